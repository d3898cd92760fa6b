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

from typing import Literal

from bindcodec.utils import pydantic


class CodecSettings(pydantic.BaseModel):
    # When no variant of a union produces an external value, raise UnencodableUnionValue instead of returning None.
    # Decoding always fails loudly in the symmetric situation, encoding only does so when this is enabled.
    STRICT_ENCODE: bool = False

    # How `bytes` payloads are represented in the external form.
    BYTES_ENCODING: Literal['hex', 'base64'] = 'hex'

    # Whether integer codecs accept decimal strings (e.g. "5") besides JSON numbers when decoding.
    INT_ACCEPTS_NUMERIC_STR: bool = True

    @classmethod
    def from_yaml(cls, *, filepath: str) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        from bindcodec.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(cls, filepath=filepath)
