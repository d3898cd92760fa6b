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

from typing import TYPE_CHECKING, Callable, Iterable, TypeVar

from structlog import get_logger
from typing_extensions import override

from bindcodec.codecs.codec import Codec
from bindcodec.exception import CodecTypeError, NoVariantMatched, UnencodableUnionValue
from bindcodec.union.binding import VariantBinding
from bindcodec.union.descriptor import UnionTypeDescriptor

if TYPE_CHECKING:
    from bindcodec.context import CodecContext

logger = get_logger()

U = TypeVar('U')


class UnionCodec(Codec[U]):
    """ Codec for union values, it tries each variant in declaration order and the first one that fits wins.

    Decoding an external value that fits no variant raises NoVariantMatched. Encoding a union value for which no
    variant produces an external value returns None (and logs a warning), unless `strict_encode` is set, in which case
    UnencodableUnionValue is raised.

    Instances are built by the deferred computation returned by `UnionCodec.loader`, usually through
    `CodecContext.get_union_codec`, and are immutable.
    """

    __slots__ = ('_union_type', '_descriptor', '_bindings', '_strict_encode', 'log')

    _union_type: type[U]
    _descriptor: UnionTypeDescriptor
    _bindings: tuple[VariantBinding[U, object], ...]
    _strict_encode: bool

    def __init__(
        self,
        union_type: type[U],
        descriptor: UnionTypeDescriptor,
        bindings: Iterable[VariantBinding[U, object]],
        *,
        strict_encode: bool = False,
    ) -> None:
        self._union_type = union_type
        self._descriptor = descriptor
        # XXX: the order of the bindings is the match priority, it must never go through a set or be sorted
        self._bindings = tuple(bindings)
        self._strict_encode = strict_encode
        self.log = logger.new(union=union_type.__name__)

    def __repr__(self) -> str:
        variants = ', '.join(binding.name for binding in self._bindings)
        return f'UnionCodec({self._union_type.__name__}: {variants})'

    @property
    def union_type(self) -> type[U]:
        return self._union_type

    @property
    def descriptor(self) -> UnionTypeDescriptor:
        return self._descriptor

    @property
    def bindings(self) -> tuple[VariantBinding[U, object], ...]:
        return self._bindings

    @staticmethod
    def loader(
        union_cls: type[U],
        descriptor: UnionTypeDescriptor,
        context: CodecContext,
    ) -> Callable[[], UnionCodec[U]]:
        """ Returns the deferred computation that builds the codec for `union_cls` as described by `descriptor`.

        Nothing is resolved until the returned callable is invoked. It raises MissingAccessor or UnresolvableSubCodec
        on the first variant that cannot be bound, without producing a codec.
        """
        def load() -> UnionCodec[U]:
            bindings: list[VariantBinding[U, object]] = []
            for variant in descriptor.variants():
                bindings.append(VariantBinding.resolve(union_cls, variant, context))
            codec = UnionCodec(union_cls, descriptor, bindings, strict_encode=context.settings.STRICT_ENCODE)
            codec.log.debug('union codec built', variants=[binding.name for binding in bindings])
            return codec

        return load

    @override
    def _check_value(self, value: U | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if not isinstance(value, self._union_type):
            raise CodecTypeError(f'expected {self._union_type.__name__} instance')
        if deep:
            for binding in self._bindings:
                payload = binding.extract(value)
                if payload is not None:
                    binding.sub_codec._check_value(payload, deep=True)

    @override
    def _encode(self, value: U | None, /) -> Codec.Json:
        if value is None:
            return None
        for binding in self._bindings:
            external = binding.encode(value)
            if external is not None:
                return external
        if self._strict_encode:
            raise UnencodableUnionValue(self._union_type, value)
        # XXX: decoding fails in the symmetric situation, here the value is dropped, hence the warning
        self.log.warning('union value has no encodable variant', value=repr(value))
        return None

    @override
    def _decode(self, external: Codec.Json, /) -> U:
        for binding in self._bindings:
            value = binding.probe(external)
            if value is not None:
                return value
        raise NoVariantMatched(self._union_type, external)
