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

import math
from typing import TYPE_CHECKING, Any

from typing_extensions import Self, override

from bindcodec.codecs.codec import Codec
from bindcodec.exception import CodecTypeError, CodecValueError

if TYPE_CHECKING:
    from bindcodec.context import CodecContext


class FloatCodec(Codec[float]):
    """ Represents builtin `float` values, only finite values can be represented.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, context: CodecContext) -> Self:
        if type_ is not float:
            raise CodecTypeError('expected float type')
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if not isinstance(value, float):
            raise CodecTypeError('expected float')
        if not math.isfinite(value):
            raise CodecValueError('expected a finite float')

    @override
    def _encode(self, value: float, /) -> Codec.Json:
        return value

    @override
    def _decode(self, external: Codec.Json, /) -> float:
        # XXX: bool is a subclass of int, but true/false are never numbers
        if isinstance(external, bool) or not isinstance(external, (int, float)):
            raise CodecValueError('expected number')
        try:
            return float(external)
        except OverflowError as e:
            raise CodecValueError('number too large') from e
