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

from unijson.universal.binary_type import BinaryType, BinaryValue
from unijson.universal.dict_type import DictType, DictValue
from unijson.universal.enum_type import EnumType, EnumValue
from unijson.universal.list_type import ListType, ListValue
from unijson.universal.object_type import ObjectType, ObjectValue
from unijson.universal.opaque_type import OpaqueType, OpaqueValue
from unijson.universal.optional_type import OptionalType, OptionalValue
from unijson.universal.primitive_type import (
    BoolValue,
    FloatValue,
    IntValue,
    PrimitiveKind,
    PrimitiveType,
    StringValue,
)
from unijson.universal.union_type import UnionSide, UnionType, UnionValue
from unijson.universal.unit_type import UnitType, UnitValue
from unijson.universal.universal_type import Json, JsonDecoder, UniversalType
from unijson.universal.universal_value import UniversalValue, encode_value

__all__ = [
    'BINARY',
    'BOOL',
    'FLOAT',
    'INT',
    'OPAQUE',
    'STRING',
    'UNIT',
    'BinaryType',
    'BinaryValue',
    'BoolValue',
    'DictType',
    'DictValue',
    'EnumType',
    'EnumValue',
    'FloatValue',
    'IntValue',
    'Json',
    'JsonDecoder',
    'ListType',
    'ListValue',
    'ObjectType',
    'ObjectValue',
    'OpaqueType',
    'OpaqueValue',
    'OptionalType',
    'OptionalValue',
    'PrimitiveKind',
    'PrimitiveType',
    'StringValue',
    'UnionSide',
    'UnionType',
    'UnionValue',
    'UnitType',
    'UnitValue',
    'UniversalType',
    'UniversalValue',
    'encode_value',
]

# shared instances for the descriptors without parameters, any equal instance works the same
STRING = PrimitiveType(PrimitiveKind.STRING)
BOOL = PrimitiveType(PrimitiveKind.BOOL)
FLOAT = PrimitiveType(PrimitiveKind.FLOAT)
INT = PrimitiveType(PrimitiveKind.INT)
BINARY = BinaryType()
OPAQUE = OpaqueType()
UNIT = UnitType()
