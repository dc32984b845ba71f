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
The opaque type is an escape hatch for data the schema does not describe: the JSON node is carried around untouched.
"""

from __future__ import annotations

import json
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
class OpaqueType(UniversalType):
    @override
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        return _decode_opaque


def _decode_opaque(json_value: Json) -> Result[UniversalValue, DecodeError]:
    return Ok(OpaqueValue(json_value))


def _canonical_json(node: Json) -> str:
    try:
        return json.dumps(node, sort_keys=True, default=repr)
    except (TypeError, ValueError):
        # keys that cannot be sorted or a circular node
        return repr(node)


@dataclass(frozen=True, slots=True)
class OpaqueValue(UniversalValue):
    """ Compared and hashed by a canonical JSON rendering of the node, so `1` and `1.0` are different values.
    """

    node: Json

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OpaqueValue):
            return NotImplemented
        return _canonical_json(self.node) == _canonical_json(other.node)

    def __hash__(self) -> int:
        return hash(_canonical_json(self.node))

    @override
    def _is_well_formed(self) -> bool:
        try:
            json.dumps(self.node, allow_nan=False)
        except (TypeError, ValueError):
            return False
        return True

    @override
    def _to_json(self) -> Json:
        return self.node
