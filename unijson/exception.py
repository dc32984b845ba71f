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

from typing import TypeAlias

PathSegment: TypeAlias = str | int


class UniJsonError(Exception):
    """Base class for exceptions in unijson."""
    pass


class InvalidDescriptorError(UniJsonError, TypeError):
    """Raised when a universal type descriptor is built with an invalid shape, like duplicate field names.
    """
    pass


class DecodeError(UniJsonError):
    """ A JSON node did not match the shape expected by a universal type descriptor.

    Decoders do not raise this, they return it inside an `Err`. The `path` is the chain of object keys (`str`) and
    array indexes (`int`) from the document root down to the node that failed, it is built bottom-up: the innermost
    decoder creates the error with an empty path and each enclosing decoder prepends its own segment with `at()`.

    Callers that prefer exceptions can use `result.unwrap_or_raise()`.
    """

    __slots__ = ('message', 'path')

    message: str
    path: tuple[PathSegment, ...]

    def __init__(self, message: str, path: tuple[PathSegment, ...] = ()) -> None:
        super().__init__(message, path)
        self.message = message
        self.path = path

    def at(self, segment: PathSegment, /) -> DecodeError:
        """ Return a copy of this error located one level deeper, under `segment`.
        """
        return DecodeError(self.message, (segment,) + self.path)

    def format_path(self) -> str:
        """ Render the path in a JSONPath-like notation.

        >>> DecodeError('expected int', ('items', 3, 'value')).format_path()
        '$.items[3].value'
        >>> DecodeError('expected int').format_path()
        '$'
        """
        parts = ['$']
        for segment in self.path:
            if isinstance(segment, int):
                parts.append(f'[{segment}]')
            else:
                parts.append(f'.{segment}')
        return ''.join(parts)

    def __str__(self) -> str:
        return f'{self.format_path()}: {self.message}'

    def __repr__(self) -> str:
        return f'DecodeError({self.message!r}, {self.path!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodeError):
            return NotImplemented
        return self.message == other.message and self.path == other.path

    def __hash__(self) -> int:
        return hash((self.message, self.path))
