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

r"""
Binary values are encoded as an object carrying the payload size in bits next to the padded, URL-safe base64 of the
bytes:

>>> BinaryValue(b'\x01\x02\x03').to_json()
{'bit_length': 24, 'base64': 'AQID'}

When decoding, both the explicit `bit_length` and the length derived from the base64 payload must agree, which
catches truncated payloads that are still valid base64:

>>> from unijson.conf import CodecSettings
>>> decoder = BinaryType().build_decoder(settings=CodecSettings())
>>> decoder({'bit_length': 24, 'base64': 'AQID'})
Ok(BinaryValue(data=b'\x01\x02\x03'))
>>> decoder({'bit_length': 23, 'base64': 'AQID'}).unwrap_err().message
'bit_length mismatch: declared 23 bits, but the base64 payload has 24 bits'
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from typing_extensions import override

from unijson.exception import DecodeError
from unijson.universal.universal_type import Json, JsonDecoder, UniversalType, expect_object, get_field, type_mismatch
from unijson.universal.universal_value import UniversalValue
from unijson.utils.result import Err, Ok, Result, propagate_result

if TYPE_CHECKING:
    from unijson.conf.settings import CodecSettings

BIT_LENGTH_KEY = 'bit_length'
BASE64_KEY = 'base64'

# URL-safe alphabet, padding only at the end
_URLSAFE_BASE64_RE = re.compile(r'[A-Za-z0-9_-]*={0,2}')


@dataclass(frozen=True, slots=True)
class BinaryType(UniversalType):
    """ Represents raw byte strings.
    """

    @override
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        return _decode_binary


def decode_urlsafe_base64(text: str) -> Result[bytes, DecodeError]:
    r""" Strict URL-safe base64 decoding: padding is required and no character outside the alphabet is skipped.

    >>> decode_urlsafe_base64('-_8=')
    Ok(b'\xfb\xff')
    >>> decode_urlsafe_base64('AQ').unwrap_err().message
    'invalid base64: length 2 is not a multiple of 4, padding is required'
    """
    if len(text) % 4 != 0:
        return Err(DecodeError(f'invalid base64: length {len(text)} is not a multiple of 4, padding is required'))
    if _URLSAFE_BASE64_RE.fullmatch(text) is None:
        return Err(DecodeError('invalid base64: only the URL-safe alphabet and trailing padding are allowed'))
    try:
        return Ok(base64.urlsafe_b64decode(text))
    except binascii.Error as e:
        return Err(DecodeError(f'invalid base64: {e}'))


@propagate_result
def _decode_binary(json_value: Json) -> Result[UniversalValue, DecodeError]:
    json_object = expect_object(json_value).unwrap_or_propagate()

    bit_length = get_field(json_object, BIT_LENGTH_KEY).unwrap_or_propagate()
    if isinstance(bit_length, bool) or not isinstance(bit_length, int):
        return Err(type_mismatch('int', bit_length).at(BIT_LENGTH_KEY))

    encoded = get_field(json_object, BASE64_KEY).unwrap_or_propagate()
    if not isinstance(encoded, str):
        return Err(type_mismatch('string', encoded).at(BASE64_KEY))

    data = decode_urlsafe_base64(encoded).map_err(lambda error: error.at(BASE64_KEY)).unwrap_or_propagate()
    if len(data) * 8 != bit_length:
        return Err(DecodeError(
            f'bit_length mismatch: declared {bit_length} bits, but the base64 payload has {len(data) * 8} bits'
        ))
    return Ok(BinaryValue(data))


@dataclass(frozen=True, slots=True)
class BinaryValue(UniversalValue):
    data: bytes

    @property
    def bit_length(self) -> int:
        return len(self.data) * 8

    @override
    def _is_well_formed(self) -> bool:
        return isinstance(self.data, bytes)

    @override
    def _to_json(self) -> Json:
        return {
            BIT_LENGTH_KEY: self.bit_length,
            BASE64_KEY: base64.urlsafe_b64encode(self.data).decode('ascii'),
        }
