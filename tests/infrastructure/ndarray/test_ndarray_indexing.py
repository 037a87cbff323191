import unittest

import numpy as np

from intnd.domain._errors import (
    NDArrayError,
    NDArrayErrorKind,
    PointOutOfRangeError,
    PointRankMismatchError,
)
from intnd.domain._shape import Point, Shape
from intnd.infrastructure.ndarray._ndarray import DefaultNDArray


def _filled(shape: Shape) -> DefaultNDArray:
    """Array whose element at each point is its position in row-major order."""
    a = DefaultNDArray.zeros(shape)
    n = 0
    for coords in _row_major(shape.dims):
        a.set(Point(coords), n)
        n += 1
    return a


def _row_major(dims):
    if not dims:
        yield ()
        return
    for i in range(dims[0]):
        for rest in _row_major(dims[1:]):
            yield (i,) + rest


class TestNDArrayAtSet(unittest.TestCase):
    def test_set_then_at_roundtrip(self):
        a = DefaultNDArray.zeros(Shape(3, 4))
        a.set(Point(2, 1), 42)
        self.assertEqual(a.at(Point(2, 1)), 42)
        self.assertEqual(a.at(Point(1, 2)), 0)

    def test_row_major_layout(self):
        a = _filled(Shape(2, 3, 4))
        flat = a.to_numpy().reshape(-1).tolist()
        self.assertEqual(flat, list(range(24)))
        self.assertEqual(a.at(Point(1, 0, 0)), 12)
        self.assertEqual(a.at(Point(0, 1, 0)), 4)
        self.assertEqual(a.at(Point(1, 2, 3)), 23)

    def test_at_returns_python_int(self):
        a = DefaultNDArray.ones(Shape(2))
        self.assertIs(type(a.at(Point(0))), int)

    def test_tuple_points_are_accepted(self):
        a = DefaultNDArray.zeros(Shape(2, 2))
        a.set((1, 1), 5)
        self.assertEqual(a.at([1, 1]), 5)

    def test_negative_values_are_stored(self):
        a = DefaultNDArray.zeros(Shape(2))
        a.set(Point(1), -17)
        self.assertEqual(a.at(Point(1)), -17)

    def test_set_rejects_non_integer_value(self):
        a = DefaultNDArray.zeros(Shape(2))
        with self.assertRaises(TypeError):
            a.set(Point(0), 1.5)

    def test_set_rejects_bool_value(self):
        a = DefaultNDArray.zeros(Shape(2))
        with self.assertRaises(TypeError):
            a.set(Point(0), True)
        self.assertEqual(a.at(Point(0)), 0)

    def test_set_accepts_numpy_integer_value(self):
        a = DefaultNDArray.zeros(Shape(2))
        a.set(Point(1), np.int32(11))
        self.assertEqual(a.at(Point(1)), 11)

    def test_rank_zero_array_has_single_element(self):
        a = DefaultNDArray.zeros(Shape())
        a.set(Point(), 9)
        self.assertEqual(a.at(Point()), 9)


class TestNDArrayPointValidation(unittest.TestCase):
    def setUp(self):
        self.a = DefaultNDArray.zeros(Shape(2, 3))

    def test_at_point_rank_mismatch(self):
        for p in (Point(0), Point(0, 0, 0), Point()):
            with self.subTest(point=p):
                with self.assertRaises(PointRankMismatchError) as cm:
                    self.a.at(p)
                self.assertEqual(cm.exception.actual, p.rank)
                self.assertEqual(cm.exception.expected, 2)

    def test_set_point_rank_mismatch(self):
        with self.assertRaises(PointRankMismatchError):
            self.a.set(Point(1), 5)

    def test_at_coordinate_out_of_range(self):
        for p in (Point(2, 0), Point(0, 3), Point(-1, 0), Point(0, -1)):
            with self.subTest(point=p):
                with self.assertRaises(PointOutOfRangeError):
                    self.a.at(p)

    def test_set_coordinate_out_of_range_does_not_write(self):
        with self.assertRaises(PointOutOfRangeError) as cm:
            self.a.set(Point(1, 3), 5)
        self.assertEqual(cm.exception.axis, 1)
        self.assertEqual(cm.exception.coordinate, 3)
        self.assertEqual(cm.exception.extent, 3)
        self.assertEqual(self.a.to_numpy().sum(), 0)

    def test_errors_can_be_caught_by_kind(self):
        try:
            self.a.at(Point(5, 5))
        except NDArrayError as err:
            self.assertIs(err.kind, NDArrayErrorKind.POINT_OUT_OF_RANGE)
        else:
            self.fail("expected an NDArrayError")


if __name__ == "__main__":
    unittest.main()
