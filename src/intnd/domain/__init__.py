"""
Backend-agnostic contracts of intnd: value types, the array protocol and the
error taxonomy.
"""

from ._errors import (
    ArrayDimensionMismatchError,
    ArrayRankMismatchError,
    AxisOutOfRangeError,
    InvalidShapeError,
    NDArrayError,
    NDArrayErrorKind,
    PointOutOfRangeError,
    PointRankMismatchError,
)
from ._ndarray import DimensionAware, INDArray, SizeAware
from ._shape import Point, Shape

__all__ = [
    ArrayDimensionMismatchError.__name__,
    ArrayRankMismatchError.__name__,
    AxisOutOfRangeError.__name__,
    DimensionAware.__name__,
    INDArray.__name__,
    InvalidShapeError.__name__,
    NDArrayError.__name__,
    NDArrayErrorKind.__name__,
    Point.__name__,
    PointOutOfRangeError.__name__,
    PointRankMismatchError.__name__,
    Shape.__name__,
    SizeAware.__name__,
]
