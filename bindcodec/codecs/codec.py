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

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeAlias, TypeVar, final

from typing_extensions import Self

from bindcodec.exception import CodecTypeError, CodecValueError, MalformedInputError
from bindcodec.utils.result import as_result

if TYPE_CHECKING:
    from bindcodec.context import CodecContext

T = TypeVar('T')

_JSON_TYPES = (dict, list, str, int, float, bool, type(None))


class Codec(ABC, Generic[T]):
    """ This class models how values of a known type are converted to and from their external representation.

    The external representation is what a data-binding layer exchanges: values that can be observed when parsing a
    JSON with the builtin json module. Codecs are built by a `CodecContext` from a type signature, compound codecs
    (optional, collections, dataclasses, unions) ask the context for the codecs of their inner types.

    Codec instances are immutable once built and can be shared between threads.
    """

    # These are all the values that can be observed when parsing a JSON with the builtin json module
    # See: https://docs.python.org/3/library/json.html#encoders-and-decoders
    Json: TypeAlias = dict | list | str | int | float | bool | None

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @classmethod
    def _from_type(cls, type_: Any, /, *, context: CodecContext) -> Self:
        """ Instantiate a Codec instance from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        use `context.get_codec` for the inner types of compound codecs.
        """
        # XXX: a Codec that is only meant for local use does not need to implement _from_type
        raise CodecTypeError(f'{cls.__name__} is not compatible with use in a CodecContext type map')

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a CodecTypeError (or CodecValueError for out of range values) if the value is not compatible.

        Compound values are checked recursively.
        """
        # XXX: subclasses must implement Codec._check_value, not Codec.check_value
        self._check_value(value, deep=True)

    @final
    def encode(self, value: T, /) -> Json:
        """ Convert a value to an object compatible with `json.dump`.

        Encoding includes a shallow check_value, so calling check_value before calling encode is not needed. A `None`
        result means there is nothing to emit for this value.
        """
        # XXX: subclasses must implement Codec._encode, not Codec.encode
        self._check_value(value, deep=False)
        return self._encode(value)

    @final
    def decode(self, external: Json, /) -> T:
        """ Convert a value that comes out from `json.load` into the value that this codec models.

        Will raise a CodecValueError if the given value does not fit, or a MalformedInputError if it is not a value
        that `json.load` could produce at all.
        """
        # XXX: subclasses must implement Codec._decode, not Codec.decode
        if not isinstance(external, _JSON_TYPES):
            raise MalformedInputError(f'{type(external).__name__} is not a JSON compatible value')
        value = self._decode(external)
        self._check_value(value, deep=False)
        return value

    @final
    @as_result(CodecValueError)
    def probe(self, external: Json, /) -> T:
        """ Like `decode`, but a value that does not fit results in `Err(CodecValueError)` instead of raising.

        Any other error is raised as usual.
        """
        return self.decode(external)

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `Codec.check_value`.

        Compound values should use `Codec._check_value` on the inner codec(s) instead of `Codec.check_value` and pass
        the appropriate deep argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _encode(self, value: T, /) -> Json:
        """ Inner implementation of `Codec.encode`, you can assume that the give value has been "shallow checked".

        Compound codecs should call `Codec.encode` on their inner codecs, not `Codec._encode`.
        """
        raise NotImplementedError

    @abstractmethod
    def _decode(self, external: Json, /) -> T:
        """ Inner implementation of `Codec.decode`, raise CodecValueError when the value does not fit.
        """
        raise NotImplementedError
