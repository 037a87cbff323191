"""Process-wide settings for intnd arrays."""

from __future__ import annotations

import copy
from typing import Any, Dict

import numpy as np

_DEFAULTS: Dict[str, Any] = {
    "storage": {
        # NumPy integer dtype of newly allocated buffers
        "dtype": "int64",
    },
}


class Config:
    """
    Global configuration for intnd.

    Settings are addressed by dotted keys, e.g. ``Config.get("storage.dtype")``.
    Changes only affect buffers allocated afterwards.
    """

    _config: Dict[str, Any] = copy.deepcopy(_DEFAULTS)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        value: Any = cls._config
        for k in key.split("."):
            if not isinstance(value, dict) or k not in value:
                return default
            value = value[k]
        return value

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        """Set configuration value."""
        keys = key.split(".")
        config = cls._config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

    @classmethod
    def reset(cls) -> None:
        """Restore every setting to its default."""
        cls._config = copy.deepcopy(_DEFAULTS)

    @classmethod
    def storage_dtype(cls) -> np.dtype:
        """
        Resolve ``storage.dtype`` to a NumPy dtype.

        Returns
        -------
        np.dtype
            A signed or unsigned integer dtype.

        Raises
        ------
        ValueError
            If the configured dtype is unknown to NumPy or is not an integer
            dtype.
        """
        configured = cls.get("storage.dtype", "int64")
        try:
            dtype = np.dtype(configured)
        except TypeError as e:
            raise ValueError(
                f"storage.dtype must be an integer dtype, got {configured!r}"
            ) from e
        if not np.issubdtype(dtype, np.integer):
            raise ValueError(
                f"storage.dtype must be an integer dtype, got {dtype.name!r}"
            )
        return dtype
