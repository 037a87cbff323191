"""
NDArray arithmetic mixin: in-place broadcasting `add` and matrix `dot`.

Broadcasting rule
-----------------
`add` aligns operands from the *leading* axis. When `other` has one axis
fewer than `self`, it is repeated across `self`'s trailing axis: adding a
(10,) array into a (10, 3) array adds `other[i]` to all three elements of
row `i`. This is the opposite of NumPy's trailing-axis alignment and is kept
on purpose, so the traversal is written out instead of delegated to NumPy
broadcasting.

`dot` is a plain 2-D matrix product (matrix @ matrix or matrix @ vector)
computed with `numpy.matmul` over detached copies of both operands.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Tuple, TypeVar

import numpy as np

from ....domain._errors import ArrayDimensionMismatchError, ArrayRankMismatchError
from ....domain._ndarray import INDArray
from ....domain._shape import Point, Shape
from ..._config import Config

logger = logging.getLogger(__name__)

_A = TypeVar("_A", bound="NDArrayMixinArithmetic")


def _require_ndarray(op: str, other: object) -> None:
    if not isinstance(other, INDArray):
        raise TypeError(f"{op} expects an NDArray, got {type(other)!r}")


class NDArrayMixinArithmetic(ABC):
    """
    Mixin implementing `add` and `dot` for the owning array.

    The host class must provide `rank`, `dim`, `_data`, `_shape`,
    `_block_sizes()` and `_from_buffer(...)`.
    """

    _data: np.ndarray
    _shape: Shape

    @property
    @abstractmethod
    def rank(self) -> int: ...

    @abstractmethod
    def dim(self, axis: int) -> int: ...

    @abstractmethod
    def _block_sizes(self) -> Tuple[int, ...]: ...

    def _add_bounds(self, other: INDArray) -> Tuple[int, ...]:
        """
        Per-axis iteration bounds of the broadcasting traversal.

        Axes shared with `other` iterate over the smaller of the two extents;
        the trailing axis that only `self` has iterates over its full extent.
        """
        return tuple(
            min(self.dim(k), other.dim(k)) if k < other.rank else self.dim(k)
            for k in range(self.rank)
        )

    def add(self, other: INDArray) -> None:
        """
        Add `other` into this array in place.

        Parameters
        ----------
        other : INDArray
            Operand of rank `rank` (elementwise) or `rank - 1` (broadcast over
            the trailing axis of `self`). May be a view, including a view of
            `self`.

        Raises
        ------
        TypeError
            If `other` is not an NDArray.
        ArrayRankMismatchError
            If `other.rank` is neither `rank` nor `rank - 1`.

        Notes
        -----
        - Traversal visits every coordinate inside `_add_bounds(other)` in
          row-major order; `other` is read with the leading `other.rank`
          coordinates.
        - Equal-rank operands with differing extents only touch the
          overlapping leading block.
        """
        _require_ndarray("add", other)
        if self.rank != other.rank and self.rank != other.rank + 1:
            raise ArrayRankMismatchError(self.rank, (other.rank, other.rank + 1))

        bounds = self._add_bounds(other)
        blocks = self._block_sizes()
        other_rank = other.rank
        data = self._data

        logger.debug(
            "add: self.shape=%s other.shape=%s bounds=%s",
            self._shape.dims,
            other.shape.dims,
            bounds,
        )

        for coords in np.ndindex(*bounds):
            offset = 0
            for c, block in zip(coords, blocks):
                offset += c * block
            data[offset] += other.at(Point(coords[:other_rank]))

    def dot(self: _A, other: INDArray) -> _A:
        """
        Matrix product of this rank-2 array with a rank-1 or rank-2 operand.

        Parameters
        ----------
        other : INDArray
            Right-hand operand; `other.dim(0)` must equal `self.dim(1)`.

        Returns
        -------
        DefaultNDArray
            New owning array of shape `(dim(0), other.dim(1))`, or `(dim(0),)`
            when `other` is a vector, stored with the configured
            ``storage.dtype``. Neither operand is modified.

        Raises
        ------
        TypeError
            If `other` is not an NDArray.
        ArrayRankMismatchError
            If `self.rank != 2` or `other.rank` is not 1 or 2.
        ArrayDimensionMismatchError
            If `self.dim(1) != other.dim(0)`.
        """
        _require_ndarray("dot", other)
        if self.rank != 2:
            raise ArrayRankMismatchError(self.rank, (2,))
        if other.rank not in (1, 2):
            raise ArrayRankMismatchError(other.rank, (1, 2))
        if self.dim(1) != other.dim(0):
            raise ArrayDimensionMismatchError(other.dim(0), self.dim(1))

        logger.debug("dot: %s @ %s", self._shape.dims, other.shape.dims)

        lhs = self._data.reshape(self._shape.dims)
        rhs = other.to_numpy()
        out = np.matmul(lhs, rhs).astype(Config.storage_dtype(), copy=False)
        out = np.ascontiguousarray(out)

        return type(self)._from_buffer(out.reshape(-1), Shape(out.shape))  # type: ignore[attr-defined]
