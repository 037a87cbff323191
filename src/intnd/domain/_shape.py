"""
Shape and Point value types.

`Shape` describes the rank and per-axis extents of an array; `Point` is the
coordinate tuple addressing one element. Both are immutable, hashable and
compare by value. They can be built from varargs (`Shape(10, 3)`) or from one
explicit sequence (`Shape([10, 3])`, `Shape.of(dims)`).

Notes
-----
- Components are normalized to Python ints through `operator.index`, so
  NumPy integer scalars are accepted while floats, strings and bools are not.
- A `Point` may hold negative coordinates; range checks belong to the array
  being addressed, not to the point itself.
"""

from __future__ import annotations

import operator
from typing import Any, Iterable, Iterator, Tuple, Type, TypeVar

from ._errors import AxisOutOfRangeError, InvalidShapeError

_T = TypeVar("_T", bound="_IntTuple")


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{what} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{what} must be an integer, got {type(value).__name__}"
        ) from None


def _unpack(values: Tuple[Any, ...]) -> Tuple[Any, ...]:
    # Shape([2, 3]) and Shape(2, 3) are the same thing.
    if len(values) == 1 and not isinstance(values[0], (int, str, bytes)):
        try:
            return tuple(values[0])
        except TypeError:
            return values
    return values


class _IntTuple:
    """
    Immutable ordered tuple of ints shared by `Shape` and `Point`.

    Subclasses set `_component` (used in error messages) and may extend
    `_validate` with their own constraints.
    """

    __slots__ = ("_values",)

    _component = "component"

    def __init__(self, *values: Any) -> None:
        normalized = tuple(_as_int(v, self._component) for v in _unpack(values))
        self._validate(normalized)
        object.__setattr__(self, "_values", normalized)

    def _validate(self, values: Tuple[int, ...]) -> None:
        pass

    @classmethod
    def of(cls: Type[_T], values: Iterable[Any]) -> _T:
        """
        Build an instance from an explicit sequence.

        Parameters
        ----------
        values : Iterable[int]
            Components in axis order. An existing instance of the same class
            is returned unchanged.

        Returns
        -------
        Shape or Point
            The value object.
        """
        if isinstance(values, cls):
            return values
        return cls(*tuple(values))

    @property
    def rank(self) -> int:
        """Number of axes."""
        return len(self._values)

    def _component_at(self, axis: int) -> int:
        axis = _as_int(axis, "axis")
        if axis < 0 or axis >= len(self._values):
            raise AxisOutOfRangeError(axis, len(self._values))
        return self._values[axis]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._values))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(str, self._values))})"


class Shape(_IntTuple):
    """
    Rank and per-axis extents of an array.

    Parameters
    ----------
    *dims : int or Sequence[int]
        Extents in axis order (axis 0 is the outermost). Every extent must be
        a positive integer. A rank-0 shape (no extents) has size 1.

    Raises
    ------
    TypeError
        If an extent is not an integer.
    InvalidShapeError
        If an extent is smaller than 1.
    """

    __slots__ = ()

    _component = "shape extent"

    def _validate(self, values: Tuple[int, ...]) -> None:
        if any(d < 1 for d in values):
            raise InvalidShapeError(values)

    @property
    def dims(self) -> Tuple[int, ...]:
        """Extents as a plain tuple."""
        return self._values

    @property
    def size(self) -> int:
        """Total number of elements (product of all extents)."""
        n = 1
        for d in self._values:
            n *= d
        return n

    def dim(self, axis: int) -> int:
        """
        Return the extent of `axis`.

        Raises
        ------
        AxisOutOfRangeError
            If `axis` is outside `[0, rank)`.
        """
        return self._component_at(axis)


class Point(_IntTuple):
    """
    Coordinates of a single array element, one per axis.

    Parameters
    ----------
    *coords : int or Sequence[int]
        Coordinates in axis order.
    """

    __slots__ = ()

    _component = "point coordinate"

    @property
    def coords(self) -> Tuple[int, ...]:
        """Coordinates as a plain tuple."""
        return self._values

    def coord(self, axis: int) -> int:
        """
        Return the coordinate on `axis`.

        Raises
        ------
        AxisOutOfRangeError
            If `axis` is outside `[0, rank)`.
        """
        return self._component_at(axis)
