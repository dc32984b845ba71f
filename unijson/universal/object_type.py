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
)
from unijson.universal.universal_value import UniversalValue, encode_value
from unijson.utils.result import Ok, Result, propagate_result

if TYPE_CHECKING:
    from unijson.conf.settings import CodecSettings


@dataclass(frozen=True, slots=True)
class ObjectType(UniversalType):
    """ Represents records with a fixed, ordered set of named fields, encoded as a JSON object.

    Fields can be given as a mapping or as an iterable of `(name, type)` pairs, names must be unique. Encoding keeps
    the declared order, decoding looks fields up by name and ignores keys that were not declared.
    """

    fields: NamedMembers

    def __init__(self, fields: Mapping[str, UniversalType] | Iterable[tuple[str, UniversalType]]) -> None:
        object.__setattr__(self, 'fields', normalize_named_members(fields, 'field'))

    @override
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        field_decoders = tuple((name, type_._build_decoder(settings)) for name, type_ in self.fields)

        @propagate_result
        def decode_object(json_value: Json) -> Result[UniversalValue, DecodeError]:
            json_object = expect_object(json_value).unwrap_or_propagate()
            fields: list[tuple[str, UniversalValue]] = []
            for name, decoder in field_decoders:
                field_node = get_field(json_object, name).unwrap_or_propagate()
                fields.append((name, decode_at(decoder, field_node, name).unwrap_or_propagate()))
            return Ok(ObjectValue(tuple(fields)))

        return decode_object


@dataclass(frozen=True, slots=True)
class ObjectValue(UniversalValue):
    """ Ordered `(name, value)` pairs, mirroring the fields of an `ObjectType`.

    >>> from unijson.universal.primitive_type import IntValue, StringValue
    >>> person = ObjectValue.of(name=StringValue('Anna'), age=IntValue(21))
    >>> person['age']
    IntValue(value=21)
    >>> person.to_json()
    {'name': 'Anna', 'age': 21}
    """

    fields: tuple[tuple[str, UniversalValue], ...]

    def __post_init__(self) -> None:
        if isinstance(self.fields, Mapping):
            object.__setattr__(self, 'fields', tuple(self.fields.items()))
        elif isinstance(self.fields, list):
            object.__setattr__(self, 'fields', tuple(tuple(item) for item in self.fields))

    @classmethod
    def of(cls, **fields: UniversalValue) -> ObjectValue:
        return cls(tuple(fields.items()))

    def __getitem__(self, name: str) -> UniversalValue:
        for field_name, value in self.fields:
            if field_name == name:
                return value
        raise KeyError(name)

    @override
    def _is_well_formed(self) -> bool:
        if not isinstance(self.fields, tuple):
            return False
        if not all(isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str) for item in self.fields):
            return False
        # a JSON object cannot carry the same name twice
        return len({name for name, _ in self.fields}) == len(self.fields)

    @override
    def _to_json(self) -> Json:
        return {name: encode_value(value) for name, value in self.fields}
