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
from typing import final

from structlog import get_logger

from unijson.universal.universal_type import Json

logger = get_logger()


class UniversalValue(ABC):
    """ A universal value: in-memory tagged data that mirrors the shape of a `UniversalType`.

    Values know how to render themselves as JSON, so encoding needs no descriptor. Encoding never fails: a value
    whose payload has the wrong Python type is rendered as `null` (see `encode_value`). Decoding, on the other hand,
    is strict and reports every mismatch, so a malformed value may not survive a round-trip.

    All values are immutable and hashable, any of them can be used as a dict key.
    """

    # XXX: subclasses are slotted dataclasses
    __slots__ = ()

    @final
    def to_json(self) -> Json:
        """ Convert this value to an object compatible with `json.dump`.
        """
        return encode_value(self)

    @abstractmethod
    def _is_well_formed(self) -> bool:
        """ Shallow check of this value's own payload, children are checked when they are encoded.
        """
        raise NotImplementedError

    @abstractmethod
    def _to_json(self) -> Json:
        """ Inner implementation of `to_json`, you can assume that `_is_well_formed()` returned True.

        Children must be encoded with `encode_value` and never with `_to_json`, so they get checked too.
        """
        raise NotImplementedError


def encode_value(value: object) -> Json:
    """ Encode any object as a JSON node, treating it as a universal value.

    Anything that is not a `UniversalValue`, or is one with a malformed payload, is encoded as `null`.
    """
    if not isinstance(value, UniversalValue):
        logger.debug('not a universal value, encoding as null', value_type=type(value).__name__)
        return None
    if not value._is_well_formed():
        logger.debug('malformed universal value, encoding as null', value_type=type(value).__name__)
        return None
    return value._to_json()
