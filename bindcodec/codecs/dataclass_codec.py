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

from dataclasses import MISSING, fields, is_dataclass
from typing import TYPE_CHECKING, Any, NamedTuple, TypeVar, get_type_hints

from typing_extensions import Self, override

from bindcodec.codecs.codec import Codec
from bindcodec.exception import CodecTypeError, CodecValueError

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

    from bindcodec.context import CodecContext

D = TypeVar('D', bound='DataclassInstance')


class _Field(NamedTuple):
    codec: Codec
    required: bool


class DataclassCodec(Codec[D]):
    """ Represents dataclass instances as JSON objects keyed by field name.

    Decoding is strict: every required field must be present and unknown keys are rejected, this keeps dataclass
    variants of a union from accepting each other's objects.
    """
    __slots__ = ('_fields', '_class')

    _fields: dict[str, _Field]
    _class: type[D]

    def __init__(self, fields_: dict[str, _Field], class_: type[D]):
        self._fields = fields_
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, context: CodecContext) -> Self:
        if not (isinstance(type_, type) and is_dataclass(type_)):
            raise CodecTypeError('expected a dataclass')
        # XXX: annotations are evaluated here so they can refer to types defined after the dataclass
        hints = get_type_hints(type_)
        values: dict[str, _Field] = {}
        for field in fields(type_):
            if not field.init:
                continue
            required = field.default is MISSING and field.default_factory is MISSING
            values[field.name] = _Field(context.get_codec(hints[field.name]), required)
        return cls(values, type_)

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise CodecTypeError(f'expected {self._class.__name__} instance')
        if deep:
            for field_name, field in self._fields.items():
                field.codec._check_value(getattr(value, field_name), deep=True)

    @override
    def _encode(self, value: D, /) -> Codec.Json:
        return {
            field_name: field.codec.encode(getattr(value, field_name))
            for field_name, field in self._fields.items()
        }

    @override
    def _decode(self, external: Codec.Json, /) -> D:
        if not isinstance(external, dict):
            raise CodecValueError('expected dict')
        unknown = set(external) - set(self._fields)
        if unknown:
            raise CodecValueError(f'unknown fields for {self._class.__name__}: {sorted(map(str, unknown))}')
        kwargs: dict[str, Any] = {}
        for field_name, field in self._fields.items():
            if field_name not in external:
                if field.required:
                    raise CodecValueError(f'missing field {field_name!r} for {self._class.__name__}')
                continue
            kwargs[field_name] = field.codec.decode(external[field_name])
        return self._class(**kwargs)
