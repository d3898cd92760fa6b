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
Union values are the Python side of a union type: a frozen dataclass with one optional field per variant, where
exactly one field is set on each instance. For example:

    @union_value
    class Port:
        number: int | None = None
        name: str | None = None

    Port(number=80)
    Port(name='http')

The `union_value` decorator builds, when the class is defined, the table used to resolve a variant by its
(normalized) identifier into the functions that extract its payload from an instance and wrap a payload back into an
instance. Nothing is looked up by attribute name after that.
"""

from __future__ import annotations

from dataclasses import MISSING, dataclass, fields
from functools import partial
from operator import attrgetter
from types import MappingProxyType, NoneType, UnionType
from typing import Any, Callable, Generic, Mapping, NamedTuple, TypeVar, Union, get_args, get_origin, get_type_hints

from bindcodec.exception import CodecTypeError
from bindcodec.naming import normalize_identifier
from bindcodec.union.descriptor import UnionTypeDescriptor, VariantDescriptor

U = TypeVar('U')
T = TypeVar('T')

ACCESSORS_ATTR = '__variant_accessors__'
DESCRIPTOR_ATTR = '__union_descriptor__'


class VariantAccessor(NamedTuple, Generic[U, T]):
    """ How to reach one variant of a union value class.
    """
    # attribute (dataclass field) holding this variant's payload
    attr: str
    # returns the payload when the instance holds this variant, None otherwise
    extract: Callable[[U], T | None]
    # builds an instance holding this variant with the given payload
    wrap: Callable[[T], U]


def union_value(cls: type[U]) -> type[U]:
    """ Class decorator that turns `cls` into a frozen union value dataclass with an accessor table.

    Every field must be annotated as `T | None` and default to `None`.
    """
    if '__post_init__' in cls.__dict__:
        raise CodecTypeError(f'{cls.__name__} must not define __post_init__')
    setattr(cls, '__post_init__', _check_single_variant)
    data_cls: Any = dataclass(frozen=True)(cls)

    accessors: dict[str, VariantAccessor] = {}
    variants: list[VariantDescriptor] = []
    for field in fields(data_cls):
        if field.default is not None or field.default_factory is not MISSING:
            raise CodecTypeError(f'variant {cls.__name__}.{field.name} must default to None')
        identifier = normalize_identifier(field.name)
        if identifier in accessors:
            raise CodecTypeError(f'variant {cls.__name__}.{field.name} clashes with {accessors[identifier].attr}')
        accessors[identifier] = VariantAccessor(
            attr=field.name,
            extract=attrgetter(field.name),
            wrap=partial(_wrap_variant, data_cls, field.name),
        )
        variants.append(VariantDescriptor(field.name))

    if not accessors:
        raise CodecTypeError(f'{cls.__name__} must declare at least one variant')

    setattr(data_cls, ACCESSORS_ATTR, MappingProxyType(accessors))
    setattr(data_cls, DESCRIPTOR_ATTR, UnionTypeDescriptor(cls.__name__, tuple(variants)))
    return data_cls


def is_union_value(type_: Any) -> bool:
    """ Whether the given type was declared with `union_value`."""
    return isinstance(type_, type) and ACCESSORS_ATTR in type_.__dict__


def get_accessors(union_cls: type) -> Mapping[str, VariantAccessor]:
    if not is_union_value(union_cls):
        raise CodecTypeError(f'{union_cls!r} is not a union value class')
    return getattr(union_cls, ACCESSORS_ATTR)


def get_union_descriptor(union_cls: type) -> UnionTypeDescriptor:
    """ The descriptor listing the fields of `union_cls` in declaration order."""
    if not is_union_value(union_cls):
        raise CodecTypeError(f'{union_cls!r} is not a union value class')
    return getattr(union_cls, DESCRIPTOR_ATTR)


def resolve_accessor(union_cls: type[U], identifier: str) -> VariantAccessor[U, Any] | None:
    """ Find the accessor of the variant named `identifier`, or None if the class has no such variant.
    """
    return get_accessors(union_cls).get(normalize_identifier(identifier))


def get_payload_type(union_cls: type, accessor: VariantAccessor) -> type:
    """ The type of the payload held by a variant, that is, its annotation without the `| None` part.

    Annotations are only evaluated here (and not by `union_value`) so they can refer to types defined after the
    union value class, which is what makes recursive unions possible.
    """
    annotation = get_type_hints(union_cls)[accessor.attr]
    origin = get_origin(annotation)
    if origin is not Union and origin is not UnionType:
        raise CodecTypeError(f'variant {union_cls.__name__}.{accessor.attr} must be annotated as `T | None`')
    args = tuple(arg for arg in get_args(annotation) if arg is not NoneType)
    if len(args) != 1 or len(args) == len(get_args(annotation)):
        raise CodecTypeError(f'variant {union_cls.__name__}.{accessor.attr} must be annotated as `T | None`')
    payload_type, = args
    return payload_type


def _wrap_variant(union_cls: Callable[..., U], attr: str, payload: Any) -> U:
    return union_cls(**{attr: payload})


def _check_single_variant(self: Any) -> None:
    active = [field.name for field in fields(self) if getattr(self, field.name) is not None]
    if len(active) != 1:
        raise ValueError(f'{type(self).__name__} must hold exactly one variant, got {active or "none"}')
