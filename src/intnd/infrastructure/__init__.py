from ._config import Config
from .ndarray import DefaultNDArray

__all__ = [Config.__name__, DefaultNDArray.__name__]
