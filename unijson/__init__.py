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
Schema-driven conversion between universal values and JSON.

A `UniversalType` describes a shape, a `UniversalValue` is data in that shape. Values are encoded to JSON on their
own (`encode`, `encode_text`), while decoding needs the descriptor (`decode`, `decode_text`, `build_decoder`) and
returns a `Result` holding either the value or a `DecodeError`.
"""

from unijson.codec import build_decoder, decode, decode_text, encode, encode_text
from unijson.conf import CodecSettings
from unijson.exception import DecodeError, InvalidDescriptorError, UniJsonError
from unijson.utils.result import Err, Ok, Result
from unijson.version import __version__

__all__ = [
    'CodecSettings',
    'DecodeError',
    'Err',
    'InvalidDescriptorError',
    'Ok',
    'Result',
    'UniJsonError',
    'build_decoder',
    'decode',
    'decode_text',
    'encode',
    'encode_text',
    '__version__',
]
