#  Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
A union is a binary either/or (like a result: ok or error), tagged on the wire by a `type` field:

>>> from unijson.universal.primitive_type import StringValue
>>> UnionValue.error(StringValue('boom')).to_json()
{'type': 'error', 'value': 'boom'}
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from typing_extensions import override

from unijson.exception import DecodeError
from unijson.universal.universal_type import (
    Json,
    JsonDecoder,
    UniversalType,
    check_universal_type,
    decode_at,
    expect_object,
    get_field,
)
from unijson.universal.universal_value import UniversalValue, encode_value
from unijson.utils.result import Err, Ok, Result, propagate_result

if TYPE_CHECKING:
    from unijson.conf.settings import CodecSettings

UNION_TAG_KEY = 'type'
UNION_VALUE_KEY = 'value'


class UnionSide(Enum):
    OK = 'ok'
    ERROR = 'error'


@dataclass(frozen=True, slots=True)
class UnionType(UniversalType):
    ok: UniversalType
    err: UniversalType

    def __post_init__(self) -> None:
        check_universal_type(self.ok, 'union ok type')
        check_universal_type(self.err, 'union error type')

    @override
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        ok_decoder = self.ok._build_decoder(settings)
        err_decoder = self.err._build_decoder(settings)

        @propagate_result
        def decode_union(json_value: Json) -> Result[UniversalValue, DecodeError]:
            json_object = expect_object(json_value).unwrap_or_propagate()
            tag = get_field(json_object, UNION_TAG_KEY).unwrap_or_propagate()
            payload = get_field(json_object, UNION_VALUE_KEY).unwrap_or_propagate()
            match tag:
                case UnionSide.OK.value:
                    side, decoder = UnionSide.OK, ok_decoder
                case UnionSide.ERROR.value:
                    side, decoder = UnionSide.ERROR, err_decoder
                case _:
                    legal_tags = ', '.join(repr(s.value) for s in UnionSide)
                    error = DecodeError(f'unknown union tag {tag!r}, expected one of: {legal_tags}')
                    return Err(error.at(UNION_TAG_KEY))
            value = decode_at(decoder, payload, UNION_VALUE_KEY).unwrap_or_propagate()
            return Ok(UnionValue(side, value))

        return decode_union


@dataclass(frozen=True, slots=True)
class UnionValue(UniversalValue):
    side: UnionSide
    value: UniversalValue

    @classmethod
    def ok(cls, value: UniversalValue) -> UnionValue:
        return cls(UnionSide.OK, value)

    @classmethod
    def error(cls, value: UniversalValue) -> UnionValue:
        return cls(UnionSide.ERROR, value)

    @property
    def is_ok(self) -> bool:
        return self.side is UnionSide.OK

    @override
    def _is_well_formed(self) -> bool:
        return isinstance(self.side, UnionSide)

    @override
    def _to_json(self) -> Json:
        return {UNION_TAG_KEY: self.side.value, UNION_VALUE_KEY: encode_value(self.value)}
