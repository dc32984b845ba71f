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

import json
import math
from typing import NoReturn, Optional

from unijson.universal.universal_type import Json


def json_dumps(obj: Json, *, ensure_ascii: bool = False, indent: Optional[int] = None) -> str:
    """Format a JSON node as a string, compact unless an indentation is given.

    Key order is kept as is, objects are never sorted. Non-finite floats are not valid JSON and raise `ValueError`.

    >>> json_dumps({'name': 'Anna', 'age': 21})
    '{"name":"Anna","age":21}'
    """
    if indent is None:
        return json.dumps(obj, separators=(',', ':'), ensure_ascii=ensure_ascii, allow_nan=False)
    return json.dumps(obj, indent=indent, ensure_ascii=ensure_ascii, allow_nan=False)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f'{name} is not valid JSON')


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f'number {text} is out of the float range')
    return value


def json_loads(raw: str | bytes) -> Json:
    """Parse JSON text (or UTF-8 encoded bytes) into a JSON node.

    Raises `ValueError` on invalid input, including the `NaN`, `Infinity` and `-Infinity` extensions and numbers
    that overflow a float.

    >>> json_loads('NaN')
    Traceback (most recent call last):
    ...
    ValueError: NaN is not valid JSON
    """
    # XXX: from Python3.6 onwards, json.loads can take bytes
    return json.loads(raw, parse_constant=_reject_constant, parse_float=_parse_finite_float)
