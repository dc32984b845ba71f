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
from typing import TYPE_CHECKING, Optional

from typing_extensions import override

from unijson.exception import DecodeError
from unijson.universal.universal_type import Json, JsonDecoder, UniversalType, check_universal_type
from unijson.universal.universal_value import UniversalValue, encode_value
from unijson.utils.result import Ok, Result

if TYPE_CHECKING:
    from unijson.conf.settings import CodecSettings


@dataclass(frozen=True, slots=True)
class OptionalType(UniversalType):
    """ Represents a value that is either absent (`null`) or present and shaped by `inner`.

    There is no extra nesting on the wire, so `null` always means absent: an `OptionalType(UnitType())` or an
    `OptionalType(OptionalType(...))` cannot tell a present `null` from an absent value.
    """

    inner: UniversalType

    def __post_init__(self) -> None:
        check_universal_type(self.inner, 'optional inner type')

    @override
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        inner_decoder = self.inner._build_decoder(settings)

        def decode_optional(json_value: Json) -> Result[UniversalValue, DecodeError]:
            if json_value is None:
                return Ok(OptionalValue(None))
            return inner_decoder(json_value).map(OptionalValue)

        return decode_optional


@dataclass(frozen=True, slots=True)
class OptionalValue(UniversalValue):
    value: Optional[UniversalValue] = None

    @property
    def is_present(self) -> bool:
        return self.value is not None

    @override
    def _is_well_formed(self) -> bool:
        return True

    @override
    def _to_json(self) -> Json:
        if self.value is None:
            return None
        else:
            return encode_value(self.value)
