"""
Validation errors raised by intnd arrays.

Every error raised by the array core derives from `NDArrayError` and carries
a `kind` tag (`NDArrayErrorKind`) together with the structured values that
were rejected. Callers may either catch a concrete subclass or catch the base
class and branch on `err.kind`.

The errors are raised at the point of the illegal call and are never caught
inside the library.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class NDArrayErrorKind(Enum):
    """
    Tag identifying which validation rule an `NDArrayError` reports.

    Attributes
    ----------
    POINT_RANK_MISMATCH : NDArrayErrorKind
        Addressing point rank differs from the array rank.
    POINT_OUT_OF_RANGE : NDArrayErrorKind
        A point coordinate is negative or not below its axis extent.
    ARRAY_RANK_MISMATCH : NDArrayErrorKind
        An operand rank is not acceptable for `add` or `dot`.
    ARRAY_DIMENSION_MISMATCH : NDArrayErrorKind
        The inner extents of a `dot` do not agree.
    AXIS_OUT_OF_RANGE : NDArrayErrorKind
        An axis index is outside `[0, rank)`.
    INVALID_SHAPE : NDArrayErrorKind
        A shape contains a non-positive extent.
    """

    POINT_RANK_MISMATCH = "point_rank_mismatch"
    POINT_OUT_OF_RANGE = "point_out_of_range"
    ARRAY_RANK_MISMATCH = "array_rank_mismatch"
    ARRAY_DIMENSION_MISMATCH = "array_dimension_mismatch"
    AXIS_OUT_OF_RANGE = "axis_out_of_range"
    INVALID_SHAPE = "invalid_shape"


class NDArrayError(Exception):
    """
    Base class of all intnd validation errors.

    Attributes
    ----------
    kind : NDArrayErrorKind
        Tag of the concrete error. Overridden by every subclass.
    """

    kind: NDArrayErrorKind


class PointRankMismatchError(NDArrayError):
    """
    Raised when a point's rank differs from the rank of the addressed array.

    Attributes
    ----------
    actual : int
        Rank of the offending point.
    expected : int
        Rank of the array.
    """

    kind = NDArrayErrorKind.POINT_RANK_MISMATCH

    def __init__(self, actual: int, expected: int) -> None:
        super().__init__(
            f"Illegal point rank: current value = {actual}, expected = {expected}."
        )
        self.actual = actual
        self.expected = expected


class PointOutOfRangeError(NDArrayError):
    """
    Raised when a point coordinate falls outside its axis extent.

    Attributes
    ----------
    axis : int
        Axis on which the coordinate was rejected.
    coordinate : int
        The rejected coordinate.
    extent : int
        Extent of that axis; valid coordinates are `0 <= c < extent`.
    """

    kind = NDArrayErrorKind.POINT_OUT_OF_RANGE

    def __init__(self, axis: int, coordinate: int, extent: int) -> None:
        super().__init__(
            f"Illegal point coordinate on axis {axis}: current value = {coordinate}, "
            f"expected value from range 0 to {extent - 1}."
        )
        self.axis = axis
        self.coordinate = coordinate
        self.extent = extent


class ArrayRankMismatchError(NDArrayError):
    """
    Raised when an operand of `add` or `dot` has an unacceptable rank.

    Attributes
    ----------
    actual : int
        The rank that was rejected.
    expected : tuple[int, ...]
        The ranks that would have been accepted.
    """

    kind = NDArrayErrorKind.ARRAY_RANK_MISMATCH

    def __init__(self, actual: int, expected: Sequence[int]) -> None:
        expected = tuple(int(e) for e in expected)
        super().__init__(
            f"Illegal NDArray rank: current value = {actual}, "
            f"expected one of {list(expected)}."
        )
        self.actual = actual
        self.expected = expected


class ArrayDimensionMismatchError(NDArrayError):
    """
    Raised when the inner extents of a matrix product disagree.

    Attributes
    ----------
    actual : int
        Extent of axis 0 of the right-hand operand.
    expected : int
        Extent of axis 1 of the left-hand operand.
    """

    kind = NDArrayErrorKind.ARRAY_DIMENSION_MISMATCH

    def __init__(self, actual: int, expected: int) -> None:
        super().__init__(
            f"Illegal NDArray dimension: current value = {actual}, expected = {expected}."
        )
        self.actual = actual
        self.expected = expected


class AxisOutOfRangeError(NDArrayError, IndexError):
    """
    Raised when `dim(axis)` / `coord(axis)` is queried with an invalid axis.

    Attributes
    ----------
    axis : int
        The rejected axis index.
    rank : int
        Rank of the queried shape, point or array.
    """

    kind = NDArrayErrorKind.AXIS_OUT_OF_RANGE

    def __init__(self, axis: int, rank: int) -> None:
        super().__init__(f"Axis {axis} is out of range for rank {rank}.")
        self.axis = axis
        self.rank = rank


class InvalidShapeError(NDArrayError, ValueError):
    """
    Raised when a shape is built with a non-positive extent.

    Attributes
    ----------
    dims : tuple[int, ...]
        The rejected extents.
    """

    kind = NDArrayErrorKind.INVALID_SHAPE

    def __init__(self, dims: Sequence[int]) -> None:
        dims = tuple(dims)
        super().__init__(f"Every shape extent must be >= 1, got {dims}.")
        self.dims = dims
