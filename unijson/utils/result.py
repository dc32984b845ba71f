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
A small `Result` type inspired by Rust, used to return expected failures (like a JSON node with the wrong shape)
instead of raising them.

Only the methods that the codec and its callers need are implemented. Nested failures are short-circuited with
`unwrap_or_propagate()` inside functions decorated with `@propagate_result`:

>>> @propagate_result
... def double(r: Result[int, str]) -> Result[int, str]:
...     value = r.unwrap_or_propagate()
...     return Ok(value * 2)
>>> double(Ok(21))
Ok(42)
>>> double(Err('nope'))
Err('nope')
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Final, Generic, Literal, NoReturn, ParamSpec, Type, TypeAlias, TypeVar

from typing_extensions import TypeIs

T = TypeVar('T', covariant=True)  # Success type
E = TypeVar('E', covariant=True)  # Error type
U = TypeVar('U')
F = TypeVar('F')
P = ParamSpec('P')
TE = TypeVar('TE', bound=Exception)


class Ok(Generic[T]):
    """
    A value that indicates success and which stores arbitrary data for the return value.
    """

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Ok({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((True, self._value))

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def ok(self) -> T:
        return self._value

    def err(self) -> None:
        return None

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, 'Called `Result.unwrap_err()` on an `Ok` value')

    def unwrap_or(self, _default: U) -> T:
        return self._value

    def unwrap_or_raise(self) -> T:
        return self._value

    def unwrap_or_propagate(self) -> T:
        return self._value

    def map(self, op: Callable[[T], U]) -> Ok[U]:
        """
        Return `Ok` with the value mapped by `op`.
        """
        return Ok(op(self._value))

    def map_err(self, _op: Callable[[E], F]) -> Ok[T]:
        return self

    def and_then(self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Chain another fallible operation on the value.
        """
        return op(self._value)


class Err(Generic[E]):
    """
    A value that signifies failure and which stores arbitrary data for the error.
    """

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: E) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Err({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and self._value == other._value

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((False, self._value))

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self._value

    def unwrap(self) -> NoReturn:
        exc = UnwrapError(self, f'Called `Result.unwrap()` on an `Err` value: {self._value!r}')
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def unwrap_err(self) -> E:
        return self._value

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_raise(self) -> NoReturn:
        """
        Raise the contained error, which must be an exception.
        """
        assert isinstance(self._value, Exception), (
            f'called `Result.unwrap_or_raise()` on non-exception value: {self._value}'
        )
        raise self._value

    def unwrap_or_propagate(self) -> NoReturn:
        """
        Abort the enclosing `@propagate_result` function, which will return this `Err`.
        """
        raise _ResultPropagationException(self)

    def map(self, _op: Callable[[T], U]) -> Err[E]:
        return self

    def map_err(self, op: Callable[[E], F]) -> Err[F]:
        """
        Return `Err` with the error mapped by `op`.
        """
        return Err(op(self._value))

    def and_then(self, _op: Callable[[T], Result[U, E]]) -> Err[E]:
        return self


Result: TypeAlias = Ok[T] | Err[E]

# for use in `isinstance` checks
OkErr: Final = (Ok, Err)


class UnwrapError(Exception):
    """
    Exception raised from `unwrap` calls on the wrong variant. The original `Result` is kept in `.result`.
    """

    _result: Result[Any, Any]

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self._result = result

    @property
    def result(self) -> Result[Any, Any]:
        return self._result


class _ResultPropagationException(Exception):
    def __init__(self, err: Err[E]) -> None:
        super().__init__('did you forget to annotate the function/method with `@propagate_result`?')
        self.err = err


def propagate_result(f: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """
    Decorator to turn a function into one that allows using unwrap_or_propagate.
    """
    @functools.wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return f(*args, **kwargs)
        except _ResultPropagationException as e:
            return e.err  # type: ignore[return-value]

    return wrapper


def as_result(
    *exceptions: Type[TE],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, TE]]]:
    """
    Make a decorator to turn a function into one that returns a `Result`.

    Regular return values are turned into `Ok(return_value)`. Raised exceptions of the specified exception type(s)
    are turned into `Err(exc)`.
    """
    if not exceptions or not all(
        inspect.isclass(exception) and issubclass(exception, BaseException)
        for exception in exceptions
    ):
        raise TypeError('as_result() requires one or more exception types')

    def decorator(f: Callable[P, T]) -> Callable[P, Result[T, TE]]:
        @functools.wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, TE]:
            try:
                return Ok(f(*args, **kwargs))
            except exceptions as exc:
                return Err(exc)

        return wrapper

    return decorator


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    """A type guard to check if a result is an Ok"""
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    """A type guard to check if a result is an Err"""
    return result.is_err()
