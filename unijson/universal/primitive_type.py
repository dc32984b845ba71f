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

import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from typing_extensions import assert_never, override

from unijson.exception import DecodeError, InvalidDescriptorError
from unijson.universal.universal_type import Json, JsonDecoder, UniversalType, type_mismatch
from unijson.universal.universal_value import UniversalValue
from unijson.utils.result import Err, Ok, Result

if TYPE_CHECKING:
    from unijson.conf.settings import CodecSettings

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

# ints above this cannot be converted to float
_FLOAT_MAX_AS_INT = int(sys.float_info.max)


class PrimitiveKind(Enum):
    STRING = 'string'
    BOOL = 'bool'
    FLOAT = 'float'
    INT = 'int'


@dataclass(frozen=True, slots=True)
class PrimitiveType(UniversalType):
    """ Represents the JSON scalars: strings, booleans, floats and signed 64-bit integers.
    """

    kind: PrimitiveKind

    def __post_init__(self) -> None:
        if not isinstance(self.kind, PrimitiveKind):
            raise InvalidDescriptorError(f'expected PrimitiveKind, got {type(self.kind).__name__}')

    @override
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        match self.kind:
            case PrimitiveKind.STRING:
                return _decode_string
            case PrimitiveKind.BOOL:
                return _decode_bool
            case PrimitiveKind.INT:
                return _decode_int
            case PrimitiveKind.FLOAT:
                return _decode_float_or_int if settings.FLOAT_ACCEPTS_INT else _decode_float
            case _:
                assert_never(self.kind)


def _decode_string(json_value: Json) -> Result[UniversalValue, DecodeError]:
    if not isinstance(json_value, str):
        return Err(type_mismatch('string', json_value))
    return Ok(StringValue(json_value))


def _decode_bool(json_value: Json) -> Result[UniversalValue, DecodeError]:
    if not isinstance(json_value, bool):
        return Err(type_mismatch('bool', json_value))
    return Ok(BoolValue(json_value))


def _decode_int(json_value: Json) -> Result[UniversalValue, DecodeError]:
    # XXX: bool is a subclass of int, but `true` is not an integer in JSON
    if isinstance(json_value, bool) or not isinstance(json_value, int):
        return Err(type_mismatch('int', json_value))
    if not INT64_MIN <= json_value <= INT64_MAX:
        return Err(DecodeError(f'int {json_value} is out of the signed 64-bit range'))
    return Ok(IntValue(json_value))


def _decode_float(json_value: Json) -> Result[UniversalValue, DecodeError]:
    if not isinstance(json_value, float):
        return Err(type_mismatch('float', json_value))
    if not math.isfinite(json_value):
        return Err(DecodeError(f'float {json_value} is not finite'))
    return Ok(FloatValue(json_value))


def _decode_float_or_int(json_value: Json) -> Result[UniversalValue, DecodeError]:
    if isinstance(json_value, int) and not isinstance(json_value, bool):
        try:
            return Ok(FloatValue(float(json_value)))
        except OverflowError:
            return Err(DecodeError(f'int {json_value} is too large for a float'))
    return _decode_float(json_value)


@dataclass(frozen=True, slots=True)
class StringValue(UniversalValue):
    value: str

    @override
    def _is_well_formed(self) -> bool:
        return isinstance(self.value, str)

    @override
    def _to_json(self) -> Json:
        return self.value


@dataclass(frozen=True, slots=True)
class BoolValue(UniversalValue):
    value: bool

    @override
    def _is_well_formed(self) -> bool:
        return isinstance(self.value, bool)

    @override
    def _to_json(self) -> Json:
        return self.value


@dataclass(frozen=True, slots=True)
class FloatValue(UniversalValue):
    """ A finite float, an `int` payload is accepted too and rendered as a float.
    """

    value: float

    @override
    def _is_well_formed(self) -> bool:
        # XXX: nan and the infinities have no JSON representation
        if isinstance(self.value, float):
            return math.isfinite(self.value)
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            return False
        return abs(self.value) <= _FLOAT_MAX_AS_INT

    @override
    def _to_json(self) -> Json:
        return float(self.value)


@dataclass(frozen=True, slots=True)
class IntValue(UniversalValue):
    """ A signed 64-bit integer, payloads out of range are malformed.
    """

    value: int

    @override
    def _is_well_formed(self) -> bool:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            return False
        return INT64_MIN <= self.value <= INT64_MAX

    @override
    def _to_json(self) -> Json:
        return self.value
