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

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from enum import Enum
from types import UnionType

from bindcodec.codecs.bool_codec import BoolCodec
from bindcodec.codecs.bytes_codec import BytesCodec
from bindcodec.codecs.codec import Codec
from bindcodec.codecs.collection_codec import ListCodec, TupleCodec
from bindcodec.codecs.dataclass_codec import DataclassCodec
from bindcodec.codecs.enum_codec import EnumCodec
from bindcodec.codecs.float_codec import FloatCodec
from bindcodec.codecs.int_codec import (
    Int8Codec,
    Int16Codec,
    Int32Codec,
    Int64Codec,
    IntCodec,
    Uint8Codec,
    Uint16Codec,
    Uint32Codec,
    Uint64Codec,
)
from bindcodec.codecs.lazy_codec import LazyCodec
from bindcodec.codecs.optional_codec import OptionalCodec
from bindcodec.codecs.str_codec import StrCodec
from bindcodec.codecs.utils import TypeAliasMap, TypeMap, TypeToCodecMap
from bindcodec.types import Int8, Int16, Int32, Int64, Uint8, Uint16, Uint32, Uint64

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_TO_CODEC_MAP',
    'DEFAULT_TYPE_MAP',
    'BoolCodec',
    'BytesCodec',
    'Codec',
    'DataclassCodec',
    'EnumCodec',
    'FloatCodec',
    'Int8Codec',
    'Int16Codec',
    'Int32Codec',
    'Int64Codec',
    'IntCodec',
    'LazyCodec',
    'ListCodec',
    'OptionalCodec',
    'StrCodec',
    'TupleCodec',
    'TypeAliasMap',
    'TypeMap',
    'TypeToCodecMap',
    'Uint8Codec',
    'Uint16Codec',
    'Uint32Codec',
    'Uint64Codec',
]

# abstract collection annotations are decoded into these concrete collections
DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    Sequence: tuple,
    MutableSequence: list,
}

# Mapping between types and Codec classes.
DEFAULT_TYPE_TO_CODEC_MAP: TypeToCodecMap = {
    # builtin types:
    bool: BoolCodec,
    bytes: BytesCodec,
    float: FloatCodec,
    int: IntCodec,
    list: ListCodec,
    str: StrCodec,
    tuple: TupleCodec,
    # other Python types:
    UnionType: OptionalCodec,
    Enum: EnumCodec,
    dataclass: DataclassCodec,
    # schema markers:
    Int8: Int8Codec,
    Int16: Int16Codec,
    Int32: Int32Codec,
    Int64: Int64Codec,
    Uint8: Uint8Codec,
    Uint16: Uint16Codec,
    Uint32: Uint32Codec,
    Uint64: Uint64Codec,
}

DEFAULT_TYPE_MAP = TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_CODEC_MAP)
