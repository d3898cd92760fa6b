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
from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING, Any, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from bindcodec.codecs.codec import Codec
from bindcodec.exception import CodecTypeError, CodecValueError

if TYPE_CHECKING:
    from bindcodec.context import CodecContext

T = TypeVar('T')


class _CollectionCodec(Codec[Collection[T]], ABC):
    """ Used as base for Codec classes that represent homogeneous collections, encoded as JSON lists.
    """
    __slots__ = ('_item',)

    _item: Codec[T]

    def __init__(self, item_codec: Codec[T], /) -> None:
        self._item = item_codec

    @abstractmethod
    def _build(self, items: Iterable[T]) -> Collection[T]:
        """ How to build the concrete collection from an iterable of items.
        """
        raise NotImplementedError

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, context: CodecContext) -> Self:
        member_type = cls._get_member_type(type_)
        return cls(context.get_codec(member_type))

    @classmethod
    def _get_member_type(cls, type_: Any) -> Any:
        origin_type = get_origin(type_) or type_
        if not (isinstance(origin_type, type) and issubclass(origin_type, Collection)):
            raise CodecTypeError('expected Collection type')
        args = get_args(type_)
        # XXX: `tuple[T, ...]` is the only tuple form supported, fixed-size tuples are not homogeneous
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        if len(args) != 1 or args[0] is Ellipsis:
            raise CodecTypeError(f'expected {origin_type.__name__}[<type>]')
        return args[0]

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if isinstance(value, (str, bytes)) or not isinstance(value, Collection):
            raise CodecTypeError('expected Collection type')
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    @override
    def _encode(self, value: Collection[T], /) -> Codec.Json:
        return [self._item.encode(item) for item in value]

    @override
    def _decode(self, external: Codec.Json, /) -> Collection[T]:
        if not isinstance(external, list):
            raise CodecValueError('expected list')
        return self._build(self._item.decode(item) for item in external)


class ListCodec(_CollectionCodec[T]):
    """ Represents builtin `list` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> list[T]:
        return list(items)


class TupleCodec(_CollectionCodec[T]):
    """ Represents builtin `tuple[T, ...]` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> tuple[T, ...]:
        return tuple(items)
