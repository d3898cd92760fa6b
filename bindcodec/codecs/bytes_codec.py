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

import base64
import binascii
from typing import TYPE_CHECKING, Any, Literal

from typing_extensions import Self, override

from bindcodec.codecs.codec import Codec
from bindcodec.exception import CodecTypeError, CodecValueError

if TYPE_CHECKING:
    from bindcodec.context import CodecContext


class BytesCodec(Codec[bytes]):
    """ Represents builtin `bytes` values, as hex or base64 strings.
    """

    __slots__ = ('_encoding',)

    _encoding: Literal['hex', 'base64']

    def __init__(self, *, encoding: Literal['hex', 'base64'] = 'hex') -> None:
        self._encoding = encoding

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, context: CodecContext) -> Self:
        if type_ is not bytes:
            raise CodecTypeError('expected bytes type')
        return cls(encoding=context.settings.BYTES_ENCODING)

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, bytes):
            raise CodecTypeError('expected bytes type')

    @override
    def _encode(self, value: bytes, /) -> Codec.Json:
        if self._encoding == 'hex':
            return value.hex()
        return base64.b64encode(value).decode('ascii')

    @override
    def _decode(self, external: Codec.Json, /) -> bytes:
        if not isinstance(external, str):
            raise CodecValueError(f'expected {self._encoding} str')
        try:
            if self._encoding == 'hex':
                return bytes.fromhex(external)
            return base64.b64decode(external, validate=True)
        except (ValueError, binascii.Error) as e:
            raise CodecValueError(f'invalid {self._encoding} str') from e
