from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field
from typing import Optional

from bindcodec.codecs import DataclassCodec, ListCodec, OptionalCodec, TupleCodec
from bindcodec.context import make_codec
from bindcodec.exception import CodecTypeError, CodecValueError, MalformedInputError
from bindcodec_tests import unittest


@dataclass(frozen=True)
class Point:
    x: int
    y: int
    label: Optional[str] = None


@dataclass(frozen=True)
class Path:
    points: list[Point]
    tags: tuple[str, ...] = field(default=())


class CompoundCodecTestCase(unittest.TestCase):
    def test_optional(self) -> None:
        for type_ in [int | None, Optional[int], None | int]:
            codec = self.codec(type_)
            self.assertIsInstance(codec, OptionalCodec)
            self.assertIsNone(codec.decode(None))
            self.assertIsNone(codec.encode(None))
            self.assertEqual(codec.decode('3'), 3)
            self.assertEqual(codec.encode(3), 3)

    def test_only_optional_unions(self) -> None:
        with self.assertRaises(CodecTypeError):
            self.codec(int | str)
        with self.assertRaises(CodecTypeError):
            self.codec(int | str | None)

    def test_list(self) -> None:
        codec = self.codec(list[int])
        self.assertIsInstance(codec, ListCodec)
        self.assertEqual(codec.decode([1, '2', 3]), [1, 2, 3])
        self.assertEqual(codec.encode([1, 2]), [1, 2])
        self.assertEqual(codec.decode([]), [])
        with self.assertRaises(CodecValueError):
            codec.decode('[1, 2]')
        with self.assertRaises(CodecValueError):
            codec.decode([1, 'two'])
        with self.assertRaises(MalformedInputError):
            codec.decode([1, (2,)])

    def test_list_check_value(self) -> None:
        codec = self.codec(list[int])
        codec.check_value([1, 2])
        with self.assertRaises(CodecTypeError):
            codec.check_value([1, '2'])
        with self.assertRaises(CodecTypeError):
            codec.encode('12')

    def test_tuple(self) -> None:
        codec = self.codec(tuple[str, ...])
        self.assertIsInstance(codec, TupleCodec)
        self.assertEqual(codec.decode(['a', 'b']), ('a', 'b'))
        self.assertEqual(codec.encode(('a', 'b')), ['a', 'b'])
        with self.assertRaises(CodecTypeError):
            self.codec(tuple[str, int])
        with self.assertRaises(CodecTypeError):
            self.codec(list)

    def test_aliases(self) -> None:
        self.assertIsInstance(self.codec(Sequence[int]), TupleCodec)
        self.assertIsInstance(self.codec(MutableSequence[int]), ListCodec)

    def test_dataclass(self) -> None:
        codec = self.codec(Point)
        self.assertIsInstance(codec, DataclassCodec)
        self.assertEqual(codec.encode(Point(1, 2)), {'x': 1, 'y': 2, 'label': None})
        self.assertEqual(codec.decode({'x': 1, 'y': 2}), Point(1, 2))
        self.assertEqual(codec.decode({'x': 1, 'y': 2, 'label': 'a'}), Point(1, 2, 'a'))
        self.assertRoundTrip(codec, Point(-1, 0, 'origin'))

    def test_dataclass_is_strict(self) -> None:
        codec = self.codec(Point)
        with self.assertRaises(CodecValueError):
            codec.decode({'x': 1})
        with self.assertRaises(CodecValueError):
            codec.decode({'x': 1, 'y': 2, 'z': 3})
        with self.assertRaises(CodecValueError):
            codec.decode([1, 2])

    def test_nested_dataclass(self) -> None:
        codec = self.codec(Path)
        path = Path([Point(0, 0), Point(1, 1, 'end')], ('a',))
        self.assertEqual(codec.encode(path), {
            'points': [{'x': 0, 'y': 0, 'label': None}, {'x': 1, 'y': 1, 'label': 'end'}],
            'tags': ['a'],
        })
        self.assertRoundTrip(codec, path)
        self.assertEqual(codec.decode({'points': []}), Path([]))
        with self.assertRaises(CodecTypeError):
            codec.check_value(Path([Point(0, '0')]))  # type: ignore[arg-type]

    def test_make_codec(self) -> None:
        codec = make_codec(list[Point], settings=self.context.settings)
        self.assertEqual(codec.decode([{'x': 1, 'y': 2}]), [Point(1, 2)])
