import itertools
import unittest

import numpy as np

from intnd.domain._shape import Point, Shape
from intnd.infrastructure._config import Config
from intnd.infrastructure.ndarray._ndarray import DefaultNDArray


def _all_points(shape: Shape):
    for coords in itertools.product(*(range(d) for d in shape.dims)):
        yield Point(coords)


class TestNDArrayZerosOnes(unittest.TestCase):
    SHAPES = [Shape(1), Shape(4), Shape(2, 3), Shape(3, 1, 2), Shape(2, 2, 2, 2)]

    def test_zeros_every_element_is_zero(self):
        for shape in self.SHAPES:
            with self.subTest(shape=shape):
                a = DefaultNDArray.zeros(shape)
                for p in _all_points(shape):
                    self.assertEqual(a.at(p), 0)

    def test_ones_every_element_is_one(self):
        for shape in self.SHAPES:
            with self.subTest(shape=shape):
                a = DefaultNDArray.ones(shape)
                for p in _all_points(shape):
                    self.assertEqual(a.at(p), 1)

    def test_geometry_queries(self):
        a = DefaultNDArray.zeros(Shape(10, 3, 5))
        self.assertEqual(a.rank, 3)
        self.assertEqual(a.size, 150)
        self.assertEqual(a.shape, Shape(10, 3, 5))
        self.assertEqual([a.dim(i) for i in range(3)], [10, 3, 5])

    def test_factories_accept_plain_sequences_and_ints(self):
        self.assertEqual(DefaultNDArray.zeros((2, 3)).shape, Shape(2, 3))
        self.assertEqual(DefaultNDArray.ones(4).shape, Shape(4))

    def test_to_numpy_matches_shape_and_dtype(self):
        arr = DefaultNDArray.ones(Shape(2, 3)).to_numpy()
        self.assertEqual(arr.shape, (2, 3))
        self.assertEqual(arr.dtype, np.int64)
        np.testing.assert_array_equal(arr, np.ones((2, 3), dtype=np.int64))

    def test_to_numpy_is_detached(self):
        a = DefaultNDArray.zeros(Shape(2, 2))
        arr = a.to_numpy()
        arr[0, 0] = 99
        self.assertEqual(a.at(Point(0, 0)), 0)

    def test_direct_construction_is_rejected(self):
        with self.assertRaises(TypeError):
            DefaultNDArray(Shape(2), np.zeros(2, dtype=np.int64))

    def test_repr_lists_flat_buffer(self):
        a = DefaultNDArray.ones(Shape(2, 2))
        self.assertEqual(repr(a), "DefaultNDArray(shape=(2, 2), data=[1, 1, 1, 1])")


class TestNDArrayStorageConfig(unittest.TestCase):
    def tearDown(self):
        Config.reset()

    def test_default_storage_dtype(self):
        self.assertEqual(Config.get("storage.dtype"), "int64")

    def test_configured_dtype_applies_to_new_buffers(self):
        before = DefaultNDArray.zeros(Shape(2))
        Config.set("storage.dtype", "int32")
        after = DefaultNDArray.zeros(Shape(2))
        self.assertEqual(after.to_numpy().dtype, np.int32)
        self.assertEqual(before.to_numpy().dtype, np.int64)

    def test_non_integer_dtype_is_rejected(self):
        Config.set("storage.dtype", "float32")
        with self.assertRaises(ValueError):
            DefaultNDArray.ones(Shape(2))

    def test_unknown_dtype_name_is_rejected_as_value_error(self):
        Config.set("storage.dtype", "nope")
        with self.assertRaises(ValueError):
            DefaultNDArray.ones(Shape(2))

    def test_get_missing_key_returns_default(self):
        self.assertIsNone(Config.get("storage.missing"))
        self.assertEqual(Config.get("nope.nothing", 3), 3)


if __name__ == "__main__":
    unittest.main()
