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

from dataclasses import dataclass
from typing import Any, Iterator, NamedTuple, Union


class VariantDescriptor(NamedTuple):
    """ One alternative of a union, as declared by the schema.

    `name` is the schema identifier, it is normalized before looking up the accessor in the union value class.
    `type_` optionally refines the type used to pick the variant's codec: a plain type or marker (like `Int8`) or a
    nested `UnionTypeDescriptor` when the payload is itself a union value. When it is `None` the payload type declared
    by the union value class is used.
    """
    name: str
    type_: Any = None


@dataclass(frozen=True, slots=True)
class UnionTypeDescriptor:
    """ Schema view of a union type: its name and its variants in declaration order.

    The declaration order is the match priority used by union codecs, it is kept in a tuple and never reordered.
    """
    name: str
    declared: tuple[VariantDescriptor, ...]

    @classmethod
    def of(cls, name: str, *variants: Union[VariantDescriptor, str, tuple[str, Any]]) -> UnionTypeDescriptor:
        """ Shortcut for building a descriptor from names, `(name, type)` pairs or `VariantDescriptor` instances.

        >>> UnionTypeDescriptor.of('port', 'number', ('name', str)).variants()
        (VariantDescriptor(name='number', type_=None), VariantDescriptor(name='name', type_=<class 'str'>))
        """
        return cls(name, tuple(_as_variant(variant) for variant in variants))

    def variants(self) -> tuple[VariantDescriptor, ...]:
        return self.declared

    def __iter__(self) -> Iterator[VariantDescriptor]:
        return iter(self.declared)

    def __len__(self) -> int:
        return len(self.declared)


def _as_variant(variant: Union[VariantDescriptor, str, tuple[str, Any]]) -> VariantDescriptor:
    if isinstance(variant, VariantDescriptor):
        return variant
    if isinstance(variant, str):
        return VariantDescriptor(variant)
    name, type_ = variant
    return VariantDescriptor(name, type_)
