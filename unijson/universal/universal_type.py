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

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Callable, TypeAlias, final

from unijson.exception import DecodeError, InvalidDescriptorError, PathSegment
from unijson.utils.result import Err, Ok, Result

if TYPE_CHECKING:
    from unijson.conf.settings import CodecSettings
    from unijson.universal.universal_value import UniversalValue

# These are all the values that can be observed when parsing a JSON with the builtin json module
# See: https://docs.python.org/3/library/json.html#encoders-and-decoders
Json: TypeAlias = dict | list | str | int | float | bool | None

JsonDecoder: TypeAlias = Callable[[Json], 'Result[UniversalValue, DecodeError]']

NamedMembers: TypeAlias = tuple[tuple[str, 'UniversalType'], ...]


class UniversalType(ABC):
    """ A universal type descriptor: the shape of a value, used to build a JSON decoder for that shape.

    Descriptors form a closed set of variants (primitives, binary, opaque, list, dict, optional, object, union,
    enum and unit), they are immutable and hashable, so a single instance can be shared by any number of
    concurrent decoders and used as a cache key.

    Encoding does not need a descriptor at all, it's driven by the value, see `UniversalValue.to_json`.
    """

    # XXX: subclasses are slotted dataclasses
    __slots__ = ()

    @final
    def build_decoder(self, *, settings: CodecSettings | None = None) -> JsonDecoder:
        """ Build a decoder for this descriptor, the decoder can then be applied to any number of JSON nodes.

        The whole descriptor tree is walked once here, child decoders are built eagerly and captured by the returned
        closure. When `settings` is not given the model defaults are used.
        """
        if settings is None:
            from unijson.conf import DEFAULT_SETTINGS
            settings = DEFAULT_SETTINGS
        return self._build_decoder(settings)

    @final
    def json_to_value(self, json_value: Json, /, *, settings: CodecSettings | None = None,
                      ) -> Result[UniversalValue, DecodeError]:
        """ Shortcut for `unijson.codec.decode`, decodes an already parsed JSON node.
        """
        from unijson.codec import decode
        return decode(self, json_value, settings=settings)

    @final
    def text_to_value(self, text: str | bytes, /, *, settings: CodecSettings | None = None,
                      ) -> Result[UniversalValue, DecodeError]:
        """ Shortcut for `unijson.codec.decode_text`, parses and decodes JSON text.
        """
        from unijson.codec import decode_text
        return decode_text(self, text, settings=settings)

    @abstractmethod
    def _build_decoder(self, settings: CodecSettings, /) -> JsonDecoder:
        """ Inner implementation of `build_decoder`.

        Compound descriptors must call `_build_decoder` on their children with the same `settings`, so the settings
        are resolved only once per tree.
        """
        raise NotImplementedError


def check_universal_type(candidate: object, what: str) -> None:
    """ Raise InvalidDescriptorError if a descriptor component is not a descriptor.
    """
    if not isinstance(candidate, UniversalType):
        raise InvalidDescriptorError(f'{what} must be a UniversalType, got {type(candidate).__name__}')


def normalize_named_members(
    members: Mapping[str, UniversalType] | Iterable[tuple[str, UniversalType]],
    what: str,
) -> NamedMembers:
    """ Turn the fields of an object (or the variants of an enum) into a tuple of `(name, type)` pairs.

    Order is preserved, names must be strings and must be unique.
    """
    items = members.items() if isinstance(members, Mapping) else members
    normalized: list[tuple[str, UniversalType]] = []
    seen: set[str] = set()
    for item in items:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            raise InvalidDescriptorError(f'each {what} must be a (name, type) pair')
        name, type_ = item
        if not isinstance(name, str):
            raise InvalidDescriptorError(f'{what} name must be a str, got {type(name).__name__}')
        if name in seen:
            raise InvalidDescriptorError(f'duplicate {what} name: {name!r}')
        check_universal_type(type_, f'{what} {name!r}')
        seen.add(name)
        normalized.append((name, type_))
    return tuple(normalized)


def json_type_name(json_value: Json) -> str:
    """ Name of the JSON type of a parsed node, for error messages.

    >>> json_type_name(True), json_type_name(1), json_type_name(1.5), json_type_name(None)
    ('bool', 'int', 'float', 'null')
    """
    # XXX: bool must come before int, since bool is a subclass of int
    if json_value is None:
        return 'null'
    if isinstance(json_value, bool):
        return 'bool'
    if isinstance(json_value, int):
        return 'int'
    if isinstance(json_value, float):
        return 'float'
    if isinstance(json_value, str):
        return 'string'
    if isinstance(json_value, list):
        return 'array'
    if isinstance(json_value, dict):
        return 'object'
    return type(json_value).__name__


def type_mismatch(expected: str, json_value: Json) -> DecodeError:
    return DecodeError(f'expected {expected}, got {json_type_name(json_value)}')


def expect_object(json_value: Json) -> Result[dict, DecodeError]:
    if not isinstance(json_value, dict):
        return Err(type_mismatch('object', json_value))
    return Ok(json_value)


def get_field(json_object: dict, name: str) -> Result[Json, DecodeError]:
    """ Look up a required key, a missing key is reported on the enclosing object, naming the key.
    """
    if name not in json_object:
        return Err(DecodeError(f'missing required field {name!r}'))
    return Ok(json_object[name])


def decode_at(decoder: JsonDecoder, json_value: Json, segment: PathSegment) -> Result[UniversalValue, DecodeError]:
    """ Apply a child decoder, locating any failure under `segment`.
    """
    return decoder(json_value).map_err(lambda error: error.at(segment))
