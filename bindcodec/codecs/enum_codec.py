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

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from typing_extensions import Self, override

from bindcodec.codecs.codec import Codec
from bindcodec.exception import CodecTypeError, CodecValueError

if TYPE_CHECKING:
    from bindcodec.context import CodecContext

E = TypeVar('E', bound=Enum)

_SCALAR_TYPES = (str, int, float, bool)


class EnumCodec(Codec[E]):
    """ Represents members of an `Enum` subclass by their value.

    Decoding also accepts the name of a member when the value given is a string that is not the value of any member.
    """

    __slots__ = ('_enum_class',)

    _enum_class: type[E]

    def __init__(self, enum_class: type[E]) -> None:
        self._enum_class = enum_class

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, context: CodecContext) -> Self:
        if not (isinstance(type_, type) and issubclass(type_, Enum)):
            raise CodecTypeError('expected Enum subclass')
        for member in type_:
            if not isinstance(member.value, _SCALAR_TYPES):
                raise CodecTypeError(f'{type_.__name__}.{member.name} value cannot be represented externally')
        return cls(type_)

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._enum_class):
            raise CodecTypeError(f'expected {self._enum_class.__name__}')

    @override
    def _encode(self, value: E, /) -> Codec.Json:
        return value.value

    @override
    def _decode(self, external: Codec.Json, /) -> E:
        if not isinstance(external, _SCALAR_TYPES):
            raise CodecValueError(f'expected scalar for {self._enum_class.__name__}')
        for member in self._enum_class:
            # XXX: compare types too, otherwise True would match a member with value 1
            if type(member.value) is type(external) and member.value == external:
                return member
        if isinstance(external, str) and external in self._enum_class.__members__:
            return self._enum_class.__members__[external]
        raise CodecValueError(f'invalid {self._enum_class.__name__} value: {external!r}')
