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
Dicts are encoded as an array of `[key, value]` rows instead of a JSON object, because keys can be any universal
value and not only strings:

>>> from unijson.universal.primitive_type import IntValue, StringValue
>>> DictValue({StringValue('a'): IntValue(1), IntValue(2): StringValue('b')}).to_json()
[['a', 1], [2, 'b']]

Every row must be an array of exactly two nodes, anything else fails the whole decode. When two rows decode to equal
keys the last one wins, unless the settings say `DICT_DUPLICATE_KEYS: reject`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from typing_extensions import override

from unijson.exception import DecodeError
from unijson.universal.universal_type import (
    Json,
    JsonDecoder,
    UniversalType,
    check_universal_type,
    decode_at,
    type_mismatch,
)
from unijson.universal.universal_value import UniversalValue, encode_value
from unijson.utils.result import Err, Ok, Result, propagate_result

if TYPE_CHECKING:
    from unijson.conf.settings import CodecSettings

Entry = tuple[UniversalValue, UniversalValue]


@dataclass(frozen=True, slots=True)
class DictType(UniversalType):
    key: UniversalType
    value: UniversalType

    def __post_init__(self) -> None:
        check_universal_type(self.key, 'dict key')
        check_universal_type(self.value, 'dict value')

    @override
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        key_decoder = self.key._build_decoder(settings)
        value_decoder = self.value._build_decoder(settings)
        reject_duplicates = settings.DICT_DUPLICATE_KEYS == 'reject'

        @propagate_result
        def decode_row(row: Json) -> Result[Entry, DecodeError]:
            if not isinstance(row, list):
                return Err(type_mismatch('[key, value] array', row))
            if len(row) != 2:
                return Err(DecodeError(f'expected [key, value] array, got array of length {len(row)}'))
            key_node, value_node = row
            key = decode_at(key_decoder, key_node, 0).unwrap_or_propagate()
            value = decode_at(value_decoder, value_node, 1).unwrap_or_propagate()
            return Ok((key, value))

        @propagate_result
        def decode_dict(json_value: Json) -> Result[UniversalValue, DecodeError]:
            if not isinstance(json_value, list):
                return Err(type_mismatch('array of [key, value] arrays', json_value))
            entries: dict[UniversalValue, UniversalValue] = {}
            for index, row in enumerate(json_value):
                key, value = decode_row(row).map_err(lambda error: error.at(index)).unwrap_or_propagate()
                if reject_duplicates and key in entries:
                    return Err(DecodeError(f'duplicate dict key {key!r}').at(index))
                entries[key] = value
            return Ok(DictValue(entries))

        return decode_dict


@dataclass(frozen=True, slots=True)
class DictValue(UniversalValue):
    entries: Mapping[UniversalValue, UniversalValue]

    def __post_init__(self) -> None:
        if isinstance(self.entries, Mapping):
            # XXX: detach from the caller's mapping, values are immutable
            object.__setattr__(self, 'entries', dict(self.entries))

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    @override
    def _is_well_formed(self) -> bool:
        return isinstance(self.entries, Mapping)

    @override
    def _to_json(self) -> Json:
        return [[encode_value(key), encode_value(value)] for key, value in self.entries.items()]
