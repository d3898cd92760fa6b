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

import re
from typing import TYPE_CHECKING, Any, ClassVar

from typing_extensions import Self, override

from bindcodec.codecs.codec import Codec
from bindcodec.exception import CodecTypeError, CodecValueError

if TYPE_CHECKING:
    from bindcodec.context import CodecContext

_DECIMAL_RE = re.compile(r'[+-]?[0-9]+')


class IntCodec(Codec[int]):
    """ Represents builtin `int` values, without bounds.

    Decoding accepts JSON integers and, if enabled, decimal strings like "42".
    """

    __slots__ = ('_accepts_numeric_str',)

    _accepts_numeric_str: bool

    # XXX: subclasses that model sized integers define these values
    _signed: ClassVar[bool] = True
    _bit_size: ClassVar[int | None] = None

    def __init__(self, *, accepts_numeric_str: bool = True) -> None:
        self._accepts_numeric_str = accepts_numeric_str

    @classmethod
    def _upper_bound_value(cls) -> int | None:
        if cls._bit_size is None:
            return None
        if cls._signed:
            return 2**(cls._bit_size - 1) - 1
        else:
            return 2**cls._bit_size - 1

    @classmethod
    def _lower_bound_value(cls) -> int | None:
        if not cls._signed:
            return 0
        if cls._bit_size is None:
            return None
        return -(2**(cls._bit_size - 1))

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, context: CodecContext) -> Self:
        supertype = getattr(type_, '__supertype__', type_)
        if supertype is bool or not (isinstance(supertype, type) and issubclass(supertype, int)):
            raise CodecTypeError('expected int type')
        return cls(accepts_numeric_str=context.settings.INT_ACCEPTS_NUMERIC_STR)

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise CodecTypeError('expected integer')
        self._check_range(value)

    def _check_range(self, value: int) -> None:
        upper_bound = self._upper_bound_value()
        lower_bound = self._lower_bound_value()
        if upper_bound is not None and value > upper_bound:
            raise CodecValueError('above upper bound')
        if lower_bound is not None and value < lower_bound:
            raise CodecValueError('below lower bound')

    @override
    def _encode(self, value: int, /) -> Codec.Json:
        return value

    @override
    def _decode(self, external: Codec.Json, /) -> int:
        # XXX: bool is a subclass of int, but true/false are never integers
        if isinstance(external, bool):
            raise CodecValueError('expected int, got bool')
        if isinstance(external, int):
            return external
        if isinstance(external, str) and self._accepts_numeric_str:
            if not _DECIMAL_RE.fullmatch(external):
                raise CodecValueError('expected a decimal integer string')
            try:
                return int(external)
            except ValueError as e:
                raise CodecValueError('integer string too long') from e
        raise CodecValueError('expected int')


class Int8Codec(IntCodec):
    _signed = True
    _bit_size = 8


class Int16Codec(IntCodec):
    _signed = True
    _bit_size = 16


class Int32Codec(IntCodec):
    _signed = True
    _bit_size = 32


class Int64Codec(IntCodec):
    _signed = True
    _bit_size = 64


class Uint8Codec(IntCodec):
    _signed = False
    _bit_size = 8


class Uint16Codec(IntCodec):
    _signed = False
    _bit_size = 16


class Uint32Codec(IntCodec):
    _signed = False
    _bit_size = 32


class Uint64Codec(IntCodec):
    _signed = False
    _bit_size = 64
