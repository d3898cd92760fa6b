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

from typing import TYPE_CHECKING, Any

from typing_extensions import Self, override

from bindcodec.codecs.codec import Codec
from bindcodec.exception import CodecTypeError, CodecValueError

if TYPE_CHECKING:
    from bindcodec.context import CodecContext


class BoolCodec(Codec[bool]):
    """ Represents builtin `bool` values.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, context: CodecContext) -> Self:
        if type_ is not bool:
            raise CodecTypeError('expected bool type')
        return cls()

    @override
    def _check_value(self, value: bool, /, *, deep: bool) -> None:
        if not isinstance(value, bool):
            raise CodecTypeError('expected boolean')

    @override
    def _encode(self, value: bool, /) -> Codec.Json:
        return value

    @override
    def _decode(self, external: Codec.Json, /) -> bool:
        if not isinstance(external, bool):
            raise CodecValueError('expected bool')
        return external
