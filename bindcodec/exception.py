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

from typing import Any

"""
This module contains the exceptions raised by codecs.

IMPORTANT: the class chosen when raising matters to union codecs:

- CodecValueError means "this external value does not fit the shape of this codec", union decoding treats it as a
  plain miss and moves on to the next variant.
- MalformedInputError (and anything that is not a CodecValueError) is propagated as is, union decoding does not try
  the remaining variants.
- BuildError subclasses only happen while a codec is being built and always abort the build.
"""


class CodecError(Exception):
    """Base class for every error raised by bindcodec."""
    pass


class BuildError(CodecError):
    """Raised when a codec cannot be constructed."""
    pass


class MissingAccessor(BuildError):
    """Raised when a declared variant has no accessor in the union value class."""

    def __init__(self, union_type: type, variant_name: str) -> None:
        super().__init__(f'{union_type.__name__} has no accessor for variant {variant_name!r}')
        self.union_type = union_type
        self.variant_name = variant_name


class UnresolvableSubCodec(BuildError):
    """Raised when the codec context cannot supply a codec for a variant's payload type."""

    def __init__(self, union_type: type, variant_name: str, payload_type: Any) -> None:
        super().__init__(
            f'cannot resolve codec for variant {variant_name!r} ({payload_type!r}) of {union_type.__name__}'
        )
        self.union_type = union_type
        self.variant_name = variant_name
        self.payload_type = payload_type


class CodecTypeError(CodecError, TypeError):
    """Raised when a Python value or annotation has a type the codec does not support."""
    pass


class CodecValueError(CodecError, ValueError):
    """Raised when an external value does not fit the shape expected by a codec."""
    pass


class NoVariantMatched(CodecValueError):
    """Raised when no variant of a union accepts an external value."""

    def __init__(self, union_type: type, value: Any) -> None:
        super().__init__(f'failed to construct instance of {union_type.__name__} for input {value!r}')
        self.union_type = union_type
        self.value = value


class MalformedInputError(CodecError):
    """Raised when an external value is not a JSON-compatible value at all."""
    pass


class UnencodableUnionValue(CodecError):
    """Raised by strict union encoding when no variant produces an external value."""

    def __init__(self, union_type: type, value: Any) -> None:
        super().__init__(f'no variant of {union_type.__name__} can encode {value!r}')
        self.union_type = union_type
        self.value = value
