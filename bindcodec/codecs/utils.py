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

from dataclasses import dataclass, is_dataclass
from enum import Enum
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, Mapping, NamedTuple, TypeAlias, Union, get_args, get_origin

from bindcodec.exception import CodecTypeError

if TYPE_CHECKING:
    from bindcodec.codecs.codec import Codec

TypeAliasMap: TypeAlias = Mapping[Any, Any]
TypeToCodecMap: TypeAlias = Mapping[Any, 'type[Codec]']


class TypeMap(NamedTuple):
    alias_map: TypeAliasMap
    codecs_map: TypeToCodecMap


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(int)
    'int'
    >>> pretty_type(None)
    'None'
    >>> pretty_type(tuple[int, ...])
    'tuple[int, ...]'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))


def get_aliased_origin(type_: Any, alias_map: TypeAliasMap) -> Any:
    """ The origin of a type (`list` for `list[int]`), with `typing.Union` unified into `types.UnionType` and the
    alias map applied.

    >>> from collections.abc import Sequence
    >>> get_aliased_origin(Sequence[int], {Sequence: tuple})
    <class 'tuple'>
    >>> from typing import Optional
    >>> get_aliased_origin(Optional[int], {})
    <class 'types.UnionType'>
    """
    origin = get_origin(type_) or type_
    # XXX: special case, replace typing.Union with types.UnionType
    if origin is Union:
        return UnionType
    return alias_map.get(origin, origin)


def get_usable_origin_type(type_: Any, /, *, type_map: TypeMap) -> Any:
    """ Map a given type into a key that is guaranteed to exist in `type_map.codecs_map`.

    Dataclasses are mapped to the `dataclass` key and Enum subclasses to the `Enum` key when the map has them. A
    CodecTypeError is raised when the type is not supported.

    >>> from bindcodec.codecs import DEFAULT_TYPE_MAP
    >>> get_usable_origin_type(list[int], type_map=DEFAULT_TYPE_MAP)
    <class 'list'>
    >>> get_usable_origin_type(int | None, type_map=DEFAULT_TYPE_MAP)
    <class 'types.UnionType'>
    """
    if isinstance(type_, str):
        raise CodecTypeError('string annotations are not currently supported')

    origin = get_aliased_origin(type_, type_map.alias_map)

    if origin is UnionType:
        args = get_args(type_)
        if len(args) != 2 or NoneType not in args:
            raise CodecTypeError(
                f'only `T | None` unions are supported, declare a union value class for {pretty_type(type_)}'
            )

    if origin in type_map.codecs_map:
        return origin

    if isinstance(origin, type):
        if dataclass in type_map.codecs_map and is_dataclass(origin):
            return dataclass
        if Enum in type_map.codecs_map and issubclass(origin, Enum):
            return Enum

    raise CodecTypeError(f'type {pretty_type(type_)} is not supported by any Codec class')
