"""
NDArray interface definitions.

This module defines the domain-level contract of an integer N-dimensional
array using structural typing. Both the owning NumPy-backed array and the
aliasing view implement it, so client code can type against `INDArray`
without caring which one it holds.

Notes
-----
The protocol is split the same way the array's responsibilities are:
`SizeAware` and `DimensionAware` describe the read-only geometry, while
`INDArray` adds element access, derivation (`copy` / `view`) and the two
arithmetic operations.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ._shape import Point, Shape


@runtime_checkable
class SizeAware(Protocol):
    """Anything that knows how many elements it holds."""

    @property
    def size(self) -> int:
        """
        Return the total number of elements.

        Returns
        -------
        int
            Product of all extents.
        """
        ...


@runtime_checkable
class DimensionAware(Protocol):
    """Anything with a rank and per-axis extents."""

    @property
    def rank(self) -> int:
        """
        Return the number of axes.

        Returns
        -------
        int
            The rank.
        """
        ...

    def dim(self, axis: int) -> int:
        """
        Return the extent of `axis`.

        Parameters
        ----------
        axis : int
            Axis index in `[0, rank)`.

        Returns
        -------
        int
            The extent along that axis.

        Raises
        ------
        AxisOutOfRangeError
            If `axis` is outside `[0, rank)`.
        """
        ...


@runtime_checkable
class INDArray(SizeAware, DimensionAware, Protocol):
    """
    Integer N-dimensional array interface.

    An `INDArray` is a dense, fixed-shape array of integers laid out in
    row-major order. Implementations either own their storage
    (`DefaultNDArray`) or alias another array's storage (views).

    Notes
    -----
    - Mutations made through a view are visible through the owning array and
      every other view derived from it.
    - `copy()` always produces a detached owning array.
    """

    @property
    def shape(self) -> Shape:
        """
        Return the array shape.

        Returns
        -------
        Shape
            Rank and extents of the array.
        """
        ...

    def at(self, point: Point) -> int:
        """
        Read the element addressed by `point`.

        Parameters
        ----------
        point : Point
            Coordinates; `point.rank` must equal the array rank.

        Returns
        -------
        int
            The stored value.

        Raises
        ------
        PointRankMismatchError
            If `point.rank != rank`.
        PointOutOfRangeError
            If any coordinate is negative or `>= dim(axis)`.
        """
        ...

    def set(self, point: Point, value: int) -> None:
        """
        Write `value` at `point` in place.

        Parameters
        ----------
        point : Point
            Coordinates; validated exactly like `at`.
        value : int
            New element value.

        Raises
        ------
        PointRankMismatchError
            If `point.rank != rank`.
        PointOutOfRangeError
            If any coordinate is negative or `>= dim(axis)`.
        TypeError
            If `value` is not an integer.
        """
        ...

    def copy(self) -> "INDArray":
        """
        Return a detached owning copy with its own buffer.

        Returns
        -------
        INDArray
            New owning array with the same shape and values.
        """
        ...

    def view(self) -> "INDArray":
        """
        Return an aliasing handle over this array.

        Returns
        -------
        INDArray
            A view; writes through it are visible here and vice versa.
        """
        ...

    def add(self, other: "INDArray") -> None:
        """
        Add `other` into this array in place, broadcasting over the trailing
        axis when `other` has one axis fewer.

        Parameters
        ----------
        other : INDArray
            Operand whose rank equals this rank or this rank minus one.

        Raises
        ------
        ArrayRankMismatchError
            If `other.rank` is neither `rank` nor `rank - 1`.
        """
        ...

    def dot(self, other: "INDArray") -> "INDArray":
        """
        Matrix product of this rank-2 array with a matrix or vector.

        Parameters
        ----------
        other : INDArray
            Rank-1 or rank-2 operand with `other.dim(0) == self.dim(1)`.

        Returns
        -------
        INDArray
            New owning array of shape `(dim(0), other.dim(1))`, or
            `(dim(0),)` for a vector operand.

        Raises
        ------
        ArrayRankMismatchError
            If `self.rank != 2` or `other.rank` is not 1 or 2.
        ArrayDimensionMismatchError
            If `self.dim(1) != other.dim(0)`.
        """
        ...

    def to_numpy(self) -> Any:
        """
        Export the contents as a detached `numpy.ndarray` of shape `shape.dims`.

        Returns
        -------
        numpy.ndarray
            A copy; mutating it does not affect the array.
        """
        ...
