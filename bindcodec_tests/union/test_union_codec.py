from typing import NewType

from structlog.testing import capture_logs

from bindcodec.codecs import DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_CODEC_MAP, IntCodec, StrCodec, TypeMap
from bindcodec.exception import (
    CodecTypeError,
    MalformedInputError,
    NoVariantMatched,
    UnencodableUnionValue,
)
from bindcodec.union import UnionCodec, UnionTypeDescriptor, VariantBinding, union_value
from bindcodec.utils.result import Ok
from bindcodec_tests import unittest


@union_value
class IntOrStr:
    a: int | None = None
    b: str | None = None


@union_value
class StrOrInt:
    b: str | None = None
    a: int | None = None


@union_value
class Scalar:
    flag: bool | None = None
    number: int | None = None


@union_value
class Value:
    scalar: Scalar | None = None
    text: str | None = None


@union_value
class Numbers:
    values: list[int] | None = None
    text: str | None = None


Even = NewType('Even', int)


class EvenCodec(IntCodec):
    """ Only emits even numbers, odd numbers are declined by returning None.
    """

    def _encode(self, value: int, /) -> IntCodec.Json:
        if value % 2:
            return None
        return value


@union_value
class Parity:
    even: int | None = None
    number: int | None = None


PARITY_DESCRIPTOR = UnionTypeDescriptor.of('parity', ('even', Even))


class UnionCodecTestCase(unittest.TestCase):
    def test_encode_first_variant(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        self.assertEqual(codec.encode(IntOrStr(a=5)), 5)

    def test_encode_second_variant(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        self.assertEqual(codec.encode(IntOrStr(b='hello')), 'hello')

    def test_encode_zero_payload(self) -> None:
        # a falsy payload is still a present payload
        codec = self.context.get_union_codec(IntOrStr)
        self.assertEqual(codec.encode(IntOrStr(a=0)), 0)
        self.assertEqual(codec.encode(IntOrStr(b='')), '')

    def test_decode_numeric_str_matches_first_variant(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        self.assertEqual(codec.decode('5'), IntOrStr(a=5))
        self.assertEqual(codec.decode(5), IntOrStr(a=5))

    def test_decode_falls_through_to_second_variant(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        self.assertEqual(codec.decode('hello'), IntOrStr(b='hello'))

    def test_decode_no_variant_matched(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        with self.assertRaises(NoVariantMatched) as cm:
            codec.decode(True)
        self.assertIs(cm.exception.union_type, IntOrStr)
        self.assertIs(cm.exception.value, True)

    def test_decode_no_variant_matched_is_a_value_error(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        with self.assertRaises(ValueError):
            codec.decode(1.5)
        with self.assertRaises(NoVariantMatched):
            codec.decode(None)
        with self.assertRaises(NoVariantMatched):
            codec.decode({'a': 1})

    def test_probe(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        self.assertEqual(codec.probe('5'), Ok(IntOrStr(a=5)))
        result = codec.probe(True)
        self.assertTrue(result.is_err())
        self.assertIsInstance(result.err(), NoVariantMatched)

    def test_declaration_order_decides_ambiguous_input(self) -> None:
        int_first = self.context.get_union_codec(IntOrStr)
        str_first = self.context.get_union_codec(StrOrInt)
        for _ in range(10):
            self.assertEqual(int_first.decode('5'), IntOrStr(a=5))
            self.assertEqual(str_first.decode('5'), StrOrInt(b='5'))

    def test_descriptor_order_overrides_class_order(self) -> None:
        descriptor = UnionTypeDescriptor.of('str-first', 'b', 'a')
        codec = self.context.get_union_codec(IntOrStr, descriptor)
        self.assertEqual([binding.name for binding in codec.bindings], ['b', 'a'])
        self.assertEqual(codec.decode('5'), IntOrStr(b='5'))
        self.assertEqual(codec.decode(5), IntOrStr(a=5))

    def test_decode_is_idempotent(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        for external in ['5', 'hello', 7, '']:
            self.assertEqual(codec.decode(external), codec.decode(external))

    def test_round_trip(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        for value in [IntOrStr(a=5), IntOrStr(a=-3), IntOrStr(a=0), IntOrStr(b='hello'), IntOrStr(b='')]:
            self.assertRoundTrip(codec, value)

    def test_encode_none(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        self.assertIsNone(codec.encode(None))
        strict_codec = self.create_context(STRICT_ENCODE=True).get_union_codec(IntOrStr)
        self.assertIsNone(strict_codec.encode(None))

    def test_encode_wrong_type(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        with self.assertRaises(CodecTypeError):
            codec.encode(StrOrInt(b='x'))
        with self.assertRaises(CodecTypeError):
            codec.encode(5)

    def test_check_value_checks_active_payload(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        codec.check_value(IntOrStr(a=1))
        with self.assertRaises(CodecTypeError):
            # XXX: the union value itself doesn't check payload types
            codec.check_value(IntOrStr(a='not an int'))  # type: ignore[arg-type]

    def test_malformed_input_is_not_swallowed(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        with self.assertRaises(MalformedInputError):
            codec.decode(b'5')
        with self.assertRaises(MalformedInputError):
            codec.decode((1, 2))
        with self.assertRaises(MalformedInputError):
            codec.probe(object())

    def test_malformed_nested_input_is_not_swallowed(self) -> None:
        codec = self.context.get_union_codec(Numbers)
        self.assertEqual(codec.decode([1, '2']), Numbers(values=[1, 2]))
        self.assertEqual(codec.decode('1, 2'), Numbers(text='1, 2'))
        with self.assertRaises(MalformedInputError):
            codec.decode([1, b'2'])

    def test_nested_union(self) -> None:
        codec = self.context.get_union_codec(Value)
        self.assertEqual(codec.decode(True), Value(scalar=Scalar(flag=True)))
        self.assertEqual(codec.decode(3), Value(scalar=Scalar(number=3)))
        self.assertEqual(codec.decode('hi'), Value(text='hi'))
        self.assertEqual(codec.encode(Value(scalar=Scalar(number=3))), 3)
        self.assertRoundTrip(codec, Value(scalar=Scalar(flag=False)))

    def test_nested_union_descriptor(self) -> None:
        descriptor = UnionTypeDescriptor.of(
            'value',
            ('scalar', UnionTypeDescriptor.of('number-only', 'number')),
            'text',
        )
        codec = self.context.get_union_codec(Value, descriptor)
        self.assertEqual(codec.decode(3), Value(scalar=Scalar(number=3)))
        with self.assertRaises(NoVariantMatched):
            codec.decode(True)

    def test_declined_encode_returns_none_and_warns(self) -> None:
        context = self.create_context()
        context.type_map = TypeMap(DEFAULT_TYPE_ALIAS_MAP, {**DEFAULT_TYPE_TO_CODEC_MAP, Even: EvenCodec})
        with capture_logs() as logs:
            codec = context.get_union_codec(Parity, PARITY_DESCRIPTOR)
            self.assertEqual(codec.encode(Parity(even=4)), 4)
            self.assertIsNone(codec.encode(Parity(even=3)))
        warnings = [log for log in logs if log['log_level'] == 'warning']
        self.assertEqual(len(warnings), 1)
        self.assertEqual(warnings[0]['event'], 'union value has no encodable variant')
        self.assertEqual(warnings[0]['union'], 'Parity')

    def test_variant_not_in_descriptor_is_not_encoded(self) -> None:
        codec = self.context.get_union_codec(IntOrStr, UnionTypeDescriptor.of('only-a', 'a'))
        self.assertIsNone(codec.encode(IntOrStr(b='x')))
        with self.assertRaises(NoVariantMatched):
            codec.decode('x')

    def test_strict_encode(self) -> None:
        context = self.create_context(STRICT_ENCODE=True)
        codec = context.get_union_codec(IntOrStr, UnionTypeDescriptor.of('only-a', 'a'))
        self.assertEqual(codec.encode(IntOrStr(a=1)), 1)
        with self.assertRaises(UnencodableUnionValue) as cm:
            codec.encode(IntOrStr(b='x'))
        self.assertIs(cm.exception.union_type, IntOrStr)

    def test_declined_binding_moves_on_to_next_binding(self) -> None:
        codec: UnionCodec[IntOrStr] = UnionCodec(IntOrStr, UnionTypeDescriptor.of('manual', 'odd', 'text'), [
            VariantBinding(
                name='odd',
                target_type=int,
                extract=lambda value: 3,
                wrap=lambda payload: IntOrStr(a=payload),
                sub_codec=EvenCodec(),
            ),
            VariantBinding(
                name='text',
                target_type=str,
                extract=lambda value: 'fallback',
                wrap=lambda payload: IntOrStr(b=payload),
                sub_codec=StrCodec(),
            ),
        ])
        self.assertEqual(codec.encode(IntOrStr(a=1)), 'fallback')

    def test_repr(self) -> None:
        codec = self.context.get_union_codec(IntOrStr)
        self.assertEqual(repr(codec), 'UnionCodec(IntOrStr: a, b)')
