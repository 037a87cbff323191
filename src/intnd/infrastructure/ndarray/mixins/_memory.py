"""
NDArray memory / construction mixin.

This module defines `NDArrayMixinMemory`, the part of the owning array that
allocates, copies and exports storage:

- Factory constructors: `zeros`, `ones` (the only public ways to create an
  array from nothing) and the internal `_from_buffer`.
- Derivation: `copy` (deep, detached) and `view` (aliasing handle).
- Host export: `to_numpy`.

Design intent
-------------
- Storage is a flat, contiguous, one-dimensional NumPy integer buffer in
  row-major order. The logical shape lives next to it as a `Shape`.
- An owning array never shares its buffer: every factory and `copy` hands a
  freshly allocated NumPy array to `_from_buffer`.
- New arrays are built via `cls` / `type(self)` so the mixin does not import
  the concrete class.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import Sequence, Type, TypeVar, Union

import numpy as np

from ....domain._ndarray import INDArray
from ....domain._shape import Shape
from ..._config import Config
from .._view import ViewNDArray

logger = logging.getLogger(__name__)

ShapeLike = Union[Shape, int, Sequence[int]]

_M = TypeVar("_M", bound="NDArrayMixinMemory")

# Passed by `_from_buffer` so that only this module can build owning arrays.
_OWNER_KEY = object()


def _as_shape(shape: ShapeLike) -> Shape:
    if isinstance(shape, Shape):
        return shape
    return Shape(shape)


class NDArrayMixinMemory(ABC):
    """
    Mixin implementing array construction and storage management.

    The host class must provide `_data` (flat NumPy buffer) and `_shape`
    (`Shape`), and accept `(shape, data, _key=...)` in its constructor.
    """

    _data: np.ndarray
    _shape: Shape

    @classmethod
    def _from_buffer(cls: Type[_M], data: np.ndarray, shape: Shape) -> _M:
        """
        Wrap an already-allocated flat buffer. The caller must own `data`.
        """
        return cls(shape, data, _key=_OWNER_KEY)  # type: ignore[call-arg]

    @classmethod
    def zeros(cls: Type[_M], shape: ShapeLike) -> _M:
        """
        Create an array filled with zeros.

        Parameters
        ----------
        shape : Shape or int or Sequence[int]
            Shape of the output array.

        Returns
        -------
        DefaultNDArray
            Newly allocated owning array.

        Notes
        -----
        The element dtype comes from ``Config.get("storage.dtype")``.
        """
        shape = _as_shape(shape)
        dtype = Config.storage_dtype()
        logger.debug("allocating zeros shape=%s dtype=%s", shape.dims, dtype.name)
        return cls._from_buffer(np.zeros(shape.size, dtype=dtype), shape)

    @classmethod
    def ones(cls: Type[_M], shape: ShapeLike) -> _M:
        """
        Create an array filled with ones.

        Parameters
        ----------
        shape : Shape or int or Sequence[int]
            Shape of the output array.

        Returns
        -------
        DefaultNDArray
            Newly allocated owning array.
        """
        shape = _as_shape(shape)
        dtype = Config.storage_dtype()
        logger.debug("allocating ones shape=%s dtype=%s", shape.dims, dtype.name)
        return cls._from_buffer(np.ones(shape.size, dtype=dtype), shape)

    def copy(self: _M) -> _M:
        """
        Deep-copy this array into a new owning array.

        Returns
        -------
        DefaultNDArray
            Same shape and values, independent buffer.
        """
        logger.debug("copying buffer shape=%s", self._shape.dims)
        return type(self)._from_buffer(self._data.copy(), self._shape)

    def view(self) -> INDArray:
        """
        Return an aliasing view over this array.

        Returns
        -------
        ViewNDArray
            Handle that forwards every operation to `self`.
        """
        return ViewNDArray(self)  # type: ignore[arg-type]

    def to_numpy(self) -> np.ndarray:
        """
        Export the contents as a detached NumPy array of shape `shape.dims`.

        Returns
        -------
        np.ndarray
            Copy of the buffer reshaped to the logical shape.
        """
        return self._data.reshape(self._shape.dims).copy()
