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
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from bindcodec.codecs.codec import Codec
from bindcodec.exception import BuildError, MissingAccessor, UnresolvableSubCodec
from bindcodec.union.descriptor import VariantDescriptor
from bindcodec.union.value import get_payload_type, resolve_accessor
from bindcodec.utils.result import Ok

if TYPE_CHECKING:
    from bindcodec.context import CodecContext

U = TypeVar('U')
T = TypeVar('T')


@dataclass(frozen=True, slots=True, kw_only=True)
class VariantBinding(Generic[U, T]):
    """ Everything a union codec needs to handle one of its variants.
    """
    # schema name of the variant
    name: str
    # type of the payload held by the variant
    target_type: Any
    # payload of this variant from a union value, or None when the value holds another variant
    extract: Callable[[U], Optional[T]]
    # union value holding this variant with the given payload
    wrap: Callable[[T], U]
    # codec for the payload
    sub_codec: Codec[T]

    @classmethod
    def resolve(cls, union_cls: type[U], variant: VariantDescriptor, context: CodecContext) -> VariantBinding[U, Any]:
        """ Look up the accessor of `variant` in `union_cls` and the codec of its payload.

        Raises MissingAccessor or UnresolvableSubCodec, there is no partial binding.
        """
        accessor = resolve_accessor(union_cls, variant.name)
        if accessor is None:
            raise MissingAccessor(union_cls, variant.name)
        try:
            payload_type = get_payload_type(union_cls, accessor)
        except (TypeError, NameError) as e:
            raise UnresolvableSubCodec(union_cls, variant.name, accessor.attr) from e
        try:
            sub_codec = context.get_codec(payload_type, variant)
        except (TypeError, BuildError) as e:
            raise UnresolvableSubCodec(union_cls, variant.name, payload_type) from e
        return cls(
            name=variant.name,
            target_type=payload_type,
            extract=accessor.extract,
            wrap=accessor.wrap,
            sub_codec=sub_codec,
        )

    def probe(self, external: Codec.Json) -> Optional[U]:
        """ Try to decode `external` as this variant, returning the union value on a match and None otherwise.

        Only a shape mismatch is a miss, other errors from the sub-codec are raised.
        """
        match self.sub_codec.probe(external):
            case Ok(payload) if payload is not None:
                return self.wrap(payload)
            case _:
                return None

    def encode(self, value: U) -> Codec.Json:
        """ Encode the payload of this variant, or return None if `value` holds another variant.
        """
        payload = self.extract(value)
        if payload is None:
            return None
        return self.sub_codec.encode(payload)
