"""
Aliasing NDArray view.

`ViewNDArray` owns no storage. Every operation, including the geometry
queries, is forwarded to the wrapped source (an owning array or another
view), so the chain always ends at a single owning buffer:

- writes through any view are visible through the owner and all other views;
- `copy()` returns the source's detached copy, never a view;
- `view()` returns the source's view, so view-over-view chains are unlimited.

Views are created by `INDArray.view()`; this class is not part of the public
package surface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...domain._ndarray import INDArray
from ...domain._shape import Point, Shape

if TYPE_CHECKING:
    import numpy as np


class ViewNDArray(INDArray):
    """
    Non-owning handle forwarding every `INDArray` operation to `source`.

    Parameters
    ----------
    source : INDArray
        Array (or view) whose storage this view aliases.
    """

    def __init__(self, source: INDArray) -> None:
        self._source = source

    @property
    def source(self) -> INDArray:
        """The wrapped array."""
        return self._source

    @property
    @override
    def shape(self) -> Shape:
        return self._source.shape

    @property
    @override
    def rank(self) -> int:
        return self._source.rank

    @override
    def dim(self, axis: int) -> int:
        return self._source.dim(axis)

    @property
    @override
    def size(self) -> int:
        return self._source.size

    @override
    def at(self, point: Point) -> int:
        return self._source.at(point)

    @override
    def set(self, point: Point, value: int) -> None:
        self._source.set(point, value)

    @override
    def copy(self) -> INDArray:
        return self._source.copy()

    @override
    def view(self) -> INDArray:
        return self._source.view()

    @override
    def add(self, other: INDArray) -> None:
        self._source.add(other)

    @override
    def dot(self, other: INDArray) -> INDArray:
        return self._source.dot(other)

    @override
    def to_numpy(self) -> "np.ndarray":
        return self._source.to_numpy()

    def __repr__(self) -> str:
        return f"ViewNDArray(source={self._source!r})"
