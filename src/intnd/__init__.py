"""
intnd: dense, fixed-shape integer N-dimensional arrays.

Quick start
-----------
>>> from intnd import Point, Shape, zeros
>>> a = zeros(Shape(2, 3))
>>> v = a.view()
>>> v.set(Point(1, 2), 7)
>>> a.at(Point(1, 2))
7
"""

from .domain import (
    ArrayDimensionMismatchError,
    ArrayRankMismatchError,
    AxisOutOfRangeError,
    INDArray,
    InvalidShapeError,
    NDArrayError,
    NDArrayErrorKind,
    Point,
    PointOutOfRangeError,
    PointRankMismatchError,
    Shape,
)
from .infrastructure import Config, DefaultNDArray

zeros = DefaultNDArray.zeros
ones = DefaultNDArray.ones

__all__ = [
    "ArrayDimensionMismatchError",
    "ArrayRankMismatchError",
    "AxisOutOfRangeError",
    "Config",
    "DefaultNDArray",
    "INDArray",
    "InvalidShapeError",
    "NDArrayError",
    "NDArrayErrorKind",
    "Point",
    "PointOutOfRangeError",
    "PointRankMismatchError",
    "Shape",
    "ones",
    "zeros",
]

__version__ = "1.0.0"
