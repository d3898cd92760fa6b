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

from typing import Callable, TypeVar

from typing_extensions import override

from bindcodec.codecs.codec import Codec

T = TypeVar('T')


class LazyCodec(Codec[T]):
    """ Stands in for a codec that is only built when it is first used.

    This is what a context hands out for a union value while that same union is still being built, so a union whose
    inner types refer back to it (directly or through other types) does not recurse into building itself again.
    """

    __slots__ = ('_type', '_loader', '_codec')

    _type: type
    _loader: Callable[[], Codec[T]]
    _codec: Codec[T] | None

    def __init__(self, type_: type, loader: Callable[[], Codec[T]]) -> None:
        self._type = type_
        self._loader = loader
        self._codec = None

    def __repr__(self) -> str:
        state = 'resolved' if self._codec is not None else 'pending'
        return f'LazyCodec({self._type.__name__}, {state})'

    def resolve(self) -> Codec[T]:
        """ Build (or fetch from the context cache) the actual codec.

        Concurrent first uses may both call the loader, the loader is expected to hand out the same memoized instance.
        """
        codec = self._codec
        if codec is None:
            codec = self._codec = self._loader()
        return codec

    @override
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        if value is None:
            return
        self.resolve()._check_value(value, deep=deep)

    @override
    def _encode(self, value: T, /) -> Codec.Json:
        if value is None:
            return None
        return self.resolve()._encode(value)

    @override
    def _decode(self, external: Codec.Json, /) -> T:
        return self.resolve()._decode(external)
