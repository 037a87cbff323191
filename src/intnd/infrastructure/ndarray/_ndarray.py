"""
Concrete owning NDArray implementation (NumPy backend).

`DefaultNDArray` owns a flat, contiguous NumPy integer buffer holding the
elements in row-major order, together with the `Shape` that buffer was built
from. Element access translates a `Point` into a flat offset; derivation and
arithmetic live in the memory and arithmetic mixins.

Design notes
------------
- Instances are created only through `zeros`, `ones`, `copy` and `dot`;
  calling the constructor directly raises `TypeError`.
- Point validation always runs; there is no unchecked access path.
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple, Union

import numpy as np

from ...domain._errors import PointOutOfRangeError, PointRankMismatchError
from ...domain._ndarray import INDArray
from ...domain._shape import Point, Shape, _as_int
from .mixins import NDArrayMixinArithmetic, NDArrayMixinMemory
from .mixins._memory import _OWNER_KEY

PointLike = Union[Point, Sequence[int]]


class DefaultNDArray(NDArrayMixinMemory, NDArrayMixinArithmetic, INDArray):
    """
    Owning integer N-dimensional array.

    Parameters
    ----------
    shape : Shape
        Logical shape of the array.
    data : np.ndarray
        Flat integer buffer of `shape.size` elements, owned by the new array.

    Notes
    -----
    - `_data` is never shared with another owning array; views reach it only
      through this object.
    - Use `DefaultNDArray.zeros(shape)` / `DefaultNDArray.ones(shape)` to
      create arrays.
    """

    def __init__(self, shape: Shape, data: np.ndarray, *, _key: Any = None) -> None:
        if _key is not _OWNER_KEY:
            raise TypeError(
                "DefaultNDArray cannot be constructed directly; "
                "use DefaultNDArray.zeros(), DefaultNDArray.ones() or copy()"
            )
        if data.ndim != 1 or data.shape[0] != shape.size:
            raise ValueError(
                f"buffer of shape {data.shape} does not hold {shape.size} elements"
            )
        self._shape = shape
        self._data = data

    @property
    def shape(self) -> Shape:
        """
        Return the array shape.

        Returns
        -------
        Shape
            The array's shape.
        """
        return self._shape

    @property
    def rank(self) -> int:
        """Number of axes."""
        return self._shape.rank

    def dim(self, axis: int) -> int:
        """Extent of `axis`; raises `AxisOutOfRangeError` outside `[0, rank)`."""
        return self._shape.dim(axis)

    @property
    def size(self) -> int:
        """Total number of elements."""
        return int(self._data.shape[0])

    def _block_sizes(self) -> Tuple[int, ...]:
        """
        Row-major block size of every axis (elements skipped per unit step).
        """
        blocks = []
        block = self.size
        for d in self._shape:
            block //= d
            blocks.append(block)
        return tuple(blocks)

    def _flat_index(self, point: PointLike) -> int:
        """
        Translate `point` into an offset into `_data`.

        Raises
        ------
        PointRankMismatchError
            If the point rank differs from the array rank.
        PointOutOfRangeError
            If any coordinate is negative or not below its axis extent.
        """
        point = Point.of(point)
        if point.rank != self.rank:
            raise PointRankMismatchError(point.rank, self.rank)

        index = 0
        block = self.size
        for axis, (c, d) in enumerate(zip(point, self._shape)):
            if c < 0 or c >= d:
                raise PointOutOfRangeError(axis, c, d)
            block //= d
            index += c * block
        return index

    def at(self, point: PointLike) -> int:
        """
        Read the element addressed by `point`.

        Parameters
        ----------
        point : Point or Sequence[int]
            Coordinates, one per axis.

        Returns
        -------
        int
            The stored value as a Python int.
        """
        return int(self._data[self._flat_index(point)])

    def set(self, point: PointLike, value: int) -> None:
        """
        Write `value` at `point` in place.

        Parameters
        ----------
        point : Point or Sequence[int]
            Coordinates, one per axis.
        value : int
            New element value. Must be an integer; bools are rejected.
        """
        index = self._flat_index(point)
        self._data[index] = _as_int(value, "element value")

    def __repr__(self) -> str:
        return f"DefaultNDArray(shape={self._shape.dims}, data={self._data.tolist()})"
