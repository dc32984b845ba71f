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
from unijson.universal.universal_type import Json, JsonDecoder, UniversalType
from unijson.universal.universal_value import UniversalValue
from unijson.utils.result import Ok, Result

if TYPE_CHECKING:
    from unijson.conf.settings import CodecSettings


@dataclass(frozen=True, slots=True)
class UnitType(UniversalType):
    """ Represents the absence of information, it is encoded as `null` and decoding it never fails.
    """

    @override
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        return _decode_unit


def _decode_unit(json_value: Json) -> Result[UniversalValue, DecodeError]:
    # XXX: zero sized value, the node is ignored whatever it is
    return Ok(UnitValue())


@dataclass(frozen=True, slots=True)
class UnitValue(UniversalValue):
    @override
    def _is_well_formed(self) -> bool:
        return True

    @override
    def _to_json(self) -> Json:
        return None
