"""
NumPy-backed NDArray implementation.

Only `DefaultNDArray` is exported; views are obtained through `view()`.
"""

from ._ndarray import DefaultNDArray

__all__ = [DefaultNDArray.__name__]
