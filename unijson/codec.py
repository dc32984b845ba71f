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
Entry points for converting between universal values and JSON.

Encoding and decoding are deliberately asymmetric:

- `encode` is driven by the value alone and never fails. Anything that is not a well-formed universal value is
  rendered as `null`, so a caller that needs the round-trip to hold must make sure the value conforms to its
  descriptor before encoding, the strict decoder may reject what the lenient encoder produced.
- `decode` is driven by the descriptor and is strict: the first node that does not match the expected shape stops
  the decoding and is reported as a `DecodeError` inside an `Err`, with the path to the node. Nothing is raised and
  nothing is logged for an expected mismatch.

Both directions recurse once per nesting level of the document (and of the descriptor), there is no explicit depth
limit: a pathologically nested input can exhaust the interpreter stack and raise `RecursionError`, which is not
converted to a `DecodeError`.

Descriptors, settings and built decoders hold no mutable state, they can be shared freely between threads. Every
operation takes an optional `settings`, when it is omitted the model defaults are used: nothing is read from files
or from the environment. JSON text is strict, `NaN` and the infinities are neither produced nor accepted.

>>> from unijson.conf import CodecSettings
>>> from unijson.universal import INT, STRING, IntValue, ObjectType, ObjectValue, StringValue
>>> person = ObjectType([('name', STRING), ('age', INT)])
>>> encode_text(ObjectValue.of(name=StringValue('Anna'), age=IntValue(21)), settings=CodecSettings())
'{"name":"Anna","age":21}'
>>> decode_text(person, '{"name": "Anna", "age": "21"}', settings=CodecSettings())
Err(DecodeError('expected int, got string', ('age',)))
"""

from functools import lru_cache
from typing import Optional

from unijson.conf import DEFAULT_SETTINGS, CodecSettings
from unijson.exception import DecodeError, InvalidDescriptorError
from unijson.universal import Json, JsonDecoder, UniversalType, UniversalValue, encode_value
from unijson.util import json_dumps, json_loads
from unijson.utils.result import Result, as_result

# the number of distinct (descriptor, settings) pairs to keep built decoders for
DECODER_CACHE_SIZE = 1024


def encode(value: object) -> Json:
    """ Convert a universal value to an object compatible with `json.dump`, never fails.
    """
    return encode_value(value)


def encode_text(value: object, *, settings: Optional[CodecSettings] = None) -> str:
    """ Convert a universal value to JSON text, never fails.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS
    return json_dumps(encode_value(value), ensure_ascii=settings.JSON_ENSURE_ASCII, indent=settings.JSON_INDENT)


@lru_cache(maxsize=DECODER_CACHE_SIZE)
def _build_decoder_cached(descriptor: UniversalType, settings: CodecSettings) -> JsonDecoder:
    return descriptor.build_decoder(settings=settings)


def build_decoder(descriptor: UniversalType, *, settings: Optional[CodecSettings] = None) -> JsonDecoder:
    """ Get a decoder for the given descriptor.

    Decoders are built once per (descriptor, settings) pair and reused, so calling this repeatedly with the same
    (or an equal) descriptor is cheap.
    """
    if not isinstance(descriptor, UniversalType):
        raise InvalidDescriptorError(f'expected a UniversalType, got {type(descriptor).__name__}')
    if settings is None:
        settings = DEFAULT_SETTINGS
    return _build_decoder_cached(descriptor, settings)


def decode(
    descriptor: UniversalType,
    json_value: Json,
    *,
    settings: Optional[CodecSettings] = None,
) -> Result[UniversalValue, DecodeError]:
    """ Decode an already parsed JSON node (as produced by `json.loads`) against a descriptor.
    """
    return build_decoder(descriptor, settings=settings)(json_value)


_parse_json = as_result(ValueError)(json_loads)


def decode_text(
    descriptor: UniversalType,
    text: str | bytes,
    *,
    settings: Optional[CodecSettings] = None,
) -> Result[UniversalValue, DecodeError]:
    """ Parse JSON text and decode it against a descriptor, text that is not valid JSON is a `DecodeError` too.
    """
    decoder = build_decoder(descriptor, settings=settings)
    return _parse_json(text).map_err(lambda e: DecodeError(f'invalid JSON: {e}')).and_then(decoder)
