"""
Building blocks of the owning NDArray.

- `NDArrayMixinMemory`     : factories (`zeros`, `ones`), `copy`, `view`,
                             `to_numpy`
- `NDArrayMixinArithmetic` : in-place broadcasting `add` and matrix `dot`

Both are combined by `DefaultNDArray`; they are not meant to be used alone.
"""

from ._arithmetic import NDArrayMixinArithmetic
from ._memory import NDArrayMixinMemory

__all__ = [
    NDArrayMixinArithmetic.__name__,
    NDArrayMixinMemory.__name__,
]
