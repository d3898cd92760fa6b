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
This module exports the types and functions meant to be used by a data-binding layer.
"""

from bindcodec.codecs import Codec
from bindcodec.conf.settings import CodecSettings
from bindcodec.context import CodecContext, make_codec
from bindcodec.exception import (
    BuildError,
    CodecError,
    CodecTypeError,
    CodecValueError,
    MalformedInputError,
    MissingAccessor,
    NoVariantMatched,
    UnencodableUnionValue,
    UnresolvableSubCodec,
)
from bindcodec.union import UnionCodec, UnionTypeDescriptor, VariantDescriptor, union_value
from bindcodec.version import __version__

__all__ = [
    'BuildError',
    'Codec',
    'CodecContext',
    'CodecError',
    'CodecSettings',
    'CodecTypeError',
    'CodecValueError',
    'MalformedInputError',
    'MissingAccessor',
    'NoVariantMatched',
    'UnencodableUnionValue',
    'UnionCodec',
    'UnionTypeDescriptor',
    'UnresolvableSubCodec',
    'VariantDescriptor',
    'make_codec',
    'union_value',
    '__version__',
]
