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


@dataclass(frozen=True, slots=True)
class ListType(UniversalType):
    """ Represents homogeneous variable size sequences, encoded as JSON arrays.
    """

    element: UniversalType

    def __post_init__(self) -> None:
        check_universal_type(self.element, 'list element')

    @override
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        element_decoder = self.element._build_decoder(settings)

        @propagate_result
        def decode_list(json_value: Json) -> Result[UniversalValue, DecodeError]:
            if not isinstance(json_value, list):
                return Err(type_mismatch('array', json_value))
            elements = tuple(
                decode_at(element_decoder, item, index).unwrap_or_propagate()
                for index, item in enumerate(json_value)
            )
            return Ok(ListValue(elements))

        return decode_list


@dataclass(frozen=True, slots=True)
class ListValue(UniversalValue):
    elements: tuple[UniversalValue, ...]

    def __post_init__(self) -> None:
        if isinstance(self.elements, list):
            object.__setattr__(self, 'elements', tuple(self.elements))

    @override
    def _is_well_formed(self) -> bool:
        return isinstance(self.elements, tuple)

    @override
    def _to_json(self) -> Json:
        return [encode_value(element) for element in self.elements]
