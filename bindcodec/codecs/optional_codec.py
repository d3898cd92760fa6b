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

from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, TypeVar, Union, get_args, get_origin

from typing_extensions import Self, override

from bindcodec.codecs.codec import Codec
from bindcodec.exception import CodecTypeError

if TYPE_CHECKING:
    from bindcodec.context import CodecContext

V = TypeVar('V')


class OptionalCodec(Codec[V | None]):
    """ Represents a codec that is either `V` or `None`.
    """

    __slots__ = ('_value',)

    _value: Codec[V]

    def __init__(self, codec: Codec[V]) -> None:
        self._value = codec

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, context: CodecContext) -> Self:
        if get_origin(type_) not in (Union, UnionType):
            raise CodecTypeError('expected type union')
        args = get_args(type_)
        if len(args) != 2 or NoneType not in args:
            raise CodecTypeError('type must be either `None | T` or `T | None`')
        not_none_type, = tuple(arg for arg in args if arg is not NoneType)
        return cls(context.get_codec(not_none_type))

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _encode(self, value: V | None, /) -> Codec.Json:
        if value is None:
            return None
        else:
            return self._value.encode(value)

    @override
    def _decode(self, external: Codec.Json, /) -> V | None:
        if external is None:
            return None
        else:
            return self._value.decode(external)
