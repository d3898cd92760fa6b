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

from functools import partial
from threading import RLock
from typing import Any, Optional, TypeVar

from structlog import get_logger

from bindcodec.codecs import DEFAULT_TYPE_MAP, Codec, LazyCodec, TypeMap
from bindcodec.codecs.utils import get_usable_origin_type, pretty_type
from bindcodec.conf.settings import CodecSettings
from bindcodec.exception import CodecTypeError
from bindcodec.union.codec import UnionCodec
from bindcodec.union.descriptor import UnionTypeDescriptor, VariantDescriptor
from bindcodec.union.value import get_union_descriptor, is_union_value

logger = get_logger()

T = TypeVar('T')
U = TypeVar('U')


class CodecContext:
    """ Resolves types into codecs, and owns the union codecs built on its behalf.

    Each union codec is built at most once per context and then reused forever. Union payloads are built together
    with the union that holds them, so a broken nested union fails the outer build. Only a union that refers back to
    one that is still being built gets a `LazyCodec`. Building is guarded by a lock, so concurrent first uses of the
    same union wait for a single build.
    """

    def __init__(self, *, settings: Optional[CodecSettings] = None, type_map: TypeMap = DEFAULT_TYPE_MAP) -> None:
        if settings is None:
            from bindcodec.conf.get_settings import get_global_settings
            settings = get_global_settings()
        self.log = logger.new()
        self.settings = settings
        self.type_map = type_map
        self._union_codecs: dict[tuple[type, UnionTypeDescriptor], UnionCodec] = {}
        # keys of the union codecs whose build is in progress, only touched while holding the lock
        self._building: set[tuple[type, UnionTypeDescriptor]] = set()
        # XXX: reentrant, a union build may resolve sub-codecs that ask this context for other union codecs
        self._lock = RLock()

    def get_codec(self, type_: Any, descriptor: Optional[VariantDescriptor] = None) -> Codec:
        """ Resolve the codec for values of `type_`.

        When a variant descriptor is given, its schema type (if any) takes precedence over `type_` to pick the codec.
        Union value classes resolve to the union codec memoized by this context, or to a `LazyCodec` over it when
        that union is being built already (a recursive union).
        """
        schema_type = descriptor.type_ if descriptor is not None else None

        if is_union_value(type_):
            if schema_type is not None and not isinstance(schema_type, UnionTypeDescriptor):
                raise CodecTypeError(f'{type_.__name__} is a union value, its schema type must be a union descriptor')
            union_descriptor = schema_type if schema_type is not None else get_union_descriptor(type_)
            with self._lock:
                if (type_, union_descriptor) in self._building:
                    return LazyCodec(type_, partial(self.get_union_codec, type_, union_descriptor))
                return self.get_union_codec(type_, union_descriptor)

        if isinstance(schema_type, UnionTypeDescriptor):
            raise CodecTypeError(f'{pretty_type(type_)} is not a union value but its schema type is a union')

        lookup_type = schema_type if schema_type is not None else type_
        origin = get_usable_origin_type(lookup_type, type_map=self.type_map)
        codec_class = self.type_map.codecs_map[origin]
        return codec_class._from_type(lookup_type, context=self)

    def get_union_codec(self, union_cls: type[U], descriptor: Optional[UnionTypeDescriptor] = None) -> UnionCodec[U]:
        """ Get the union codec for `union_cls`, building it if this context has not done it yet.

        Build errors (including those of nested unions) are raised to the caller and nothing is cached, so the next
        call tries again.
        """
        if descriptor is None:
            descriptor = get_union_descriptor(union_cls)
        key = (union_cls, descriptor)

        codec = self._union_codecs.get(key)
        if codec is not None:
            return codec

        with self._lock:
            codec = self._union_codecs.get(key)
            if codec is None:
                self._building.add(key)
                try:
                    codec = UnionCodec.loader(union_cls, descriptor, self)()
                finally:
                    self._building.discard(key)
                self._union_codecs[key] = codec
                self.log.debug('union codec cached', union=union_cls.__name__, cached=len(self._union_codecs))
        return codec


def make_codec(type_: Any, *, settings: Optional[CodecSettings] = None) -> Codec:
    """ Shortcut for `CodecContext(settings=settings).get_codec(type_)`.

    Every call uses a new context, keep a CodecContext around to reuse union codecs.
    """
    return CodecContext(settings=settings).get_codec(type_)
