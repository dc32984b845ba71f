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

from pathlib import Path
from typing import Final, Literal, Optional, Union

from pydantic import NonNegativeInt
from structlog import get_logger

from unijson.utils import pydantic

logger = get_logger()


class CodecSettings(pydantic.BaseModel):
    # What a dict decoder does when two rows decode to equal keys: keep the last row ("last_wins") or fail
    # ("reject"). Either way no partial mapping is ever returned.
    DICT_DUPLICATE_KEYS: Literal['last_wins', 'reject'] = 'last_wins'

    # Whether a float decoder accepts a JSON integer (like `1` for `1.0`). JSON itself does not distinguish them,
    # but some producers always write a fractional part.
    FLOAT_ACCEPTS_INT: bool = True

    # Passed to `json.dumps` when rendering JSON text.
    JSON_ENSURE_ASCII: bool = False

    # Indentation for rendered JSON text, `None` renders the compact form.
    JSON_INDENT: Optional[NonNegativeInt] = None

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance.

        Nothing in the codec calls this, callers that want file based settings load them once and pass them around.
        """
        from unijson.utils.yaml import model_from_extended_yaml
        log = logger.new(source=str(filepath))
        settings = model_from_extended_yaml(cls, filepath=filepath, custom_root=Path(__file__).parent)
        log.info('codec settings loaded', dict_duplicate_keys=settings.DICT_DUPLICATE_KEYS)
        return settings


# Used whenever an operation is called without explicit settings.
DEFAULT_SETTINGS: Final = CodecSettings()
