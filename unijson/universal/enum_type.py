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

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from typing_extensions import override

from unijson.exception import DecodeError
from unijson.universal.universal_type import (
    Json,
    JsonDecoder,
    NamedMembers,
    UniversalType,
    decode_at,
    expect_object,
    get_field,
    normalize_named_members,
    type_mismatch,
)
from unijson.universal.universal_value import UniversalValue, encode_value
from unijson.utils.result import Err, Ok, Result, propagate_result

if TYPE_CHECKING:
    from unijson.conf.settings import CodecSettings

ENUM_TAG_KEY = 'variant'
ENUM_VALUE_KEY = 'value'


@dataclass(frozen=True, slots=True)
class EnumType(UniversalType):
    """ Represents a tagged union with any number of named variants, each with its own payload type.

    Encoded as `{"variant": <tag>, "value": <payload>}`, tags are matched exactly (case-sensitive).
    """

    variants: NamedMembers

    def __init__(self, variants: Mapping[str, UniversalType] | Iterable[tuple[str, UniversalType]]) -> None:
        object.__setattr__(self, 'variants', normalize_named_members(variants, 'variant'))

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(tag for tag, _ in self.variants)

    @override
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        variant_decoders = {tag: type_._build_decoder(settings) for tag, type_ in self.variants}
        legal_tags = ', '.join(self.tags) or '<no variants>'

        @propagate_result
        def decode_enum(json_value: Json) -> Result[UniversalValue, DecodeError]:
            json_object = expect_object(json_value).unwrap_or_propagate()
            tag = get_field(json_object, ENUM_TAG_KEY).unwrap_or_propagate()
            if not isinstance(tag, str):
                return Err(type_mismatch('string', tag).at(ENUM_TAG_KEY))
            payload = get_field(json_object, ENUM_VALUE_KEY).unwrap_or_propagate()
            decoder = variant_decoders.get(tag)
            if decoder is None:
                error = DecodeError(f'unknown enum variant {tag!r}, expected one of: {legal_tags}')
                return Err(error.at(ENUM_TAG_KEY))
            value = decode_at(decoder, payload, ENUM_VALUE_KEY).unwrap_or_propagate()
            return Ok(EnumValue(tag, value))

        return decode_enum


@dataclass(frozen=True, slots=True)
class EnumValue(UniversalValue):
    tag: str
    payload: UniversalValue

    @override
    def _is_well_formed(self) -> bool:
        return isinstance(self.tag, str)

    @override
    def _to_json(self) -> Json:
        return {ENUM_TAG_KEY: self.tag, ENUM_VALUE_KEY: encode_value(self.payload)}
