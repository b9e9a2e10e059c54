from abc import ABC, abstractmethod
from functools import reduce
from decimal import Decimal
from numbers import Real
from typing import Iterator, List
import logging
import math

logger = logging.getLogger(__name__)

__all__ = [
    "NegativeDimension",
    "dimension",
    "Shape",
    "Circle",
    "Square",
    "EquilateralTriangle",
    "Scene",
]


class NegativeDimension(ValueError):
    """Raised when a shape is constructed with a dimension below zero."""


def dimension(value: float, message: str) -> float:
    """Validate a radius or side length and return it as a float.

    Raises NegativeDimension with ``message`` if ``value`` is not >= 0
    (NaN included), and TypeError if it is not a real number. Integers
    too large for a float become infinity, like ``float("1e400")``.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise TypeError(f"dimension must be a real number, got {type(value)}")

    try:
        converted = float(value)
    except OverflowError:
        converted = math.inf if value > 0 else -math.inf

    if not converted >= 0:
        logger.debug("rejected dimension %r: %s", value, message)
        raise NegativeDimension(message)

    return converted


class Shape(ABC):
    """A shape with a perimeter. Attributes are set once and never changed."""

    __slots__ = ()

    def __setattr__(self, name, value):
        if hasattr(self, name):
            raise AttributeError(f"{type(self).__name__}.{name} cannot be changed")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__}.{name} cannot be deleted")

    @abstractmethod
    def perimeter(self) -> float:
        pass


class Circle(Shape):
    __slots__ = ("_radius",)

    def __init__(self, radius: float):
        self._radius = dimension(radius, "A circle must have a radius of at least 0.")

    @property
    def radius(self) -> float:
        return self._radius

    def perimeter(self) -> float:
        return 2 * math.pi * self._radius

    def __repr__(self) -> str:
        return f"Circle(radius={self._radius!r})"


class Square(Shape):
    __slots__ = ("_side",)

    def __init__(self, side: float):
        self._side = dimension(side, "A square must have a length of at least 0.")

    @property
    def side(self) -> float:
        return self._side

    def perimeter(self) -> float:
        return 4 * self._side

    def __repr__(self) -> str:
        return f"Square(side={self._side!r})"


class EquilateralTriangle(Shape):
    __slots__ = ("_side",)

    def __init__(self, side: float):
        self._side = dimension(
            side, "An equilateral_triangle must have a length of at least 0."
        )

    @property
    def side(self) -> float:
        return self._side

    def perimeter(self) -> float:
        return 3 * self._side

    def __repr__(self) -> str:
        return f"EquilateralTriangle(side={self._side!r})"


class Scene:
    """An ordered collection of shapes with a combined perimeter.

    Not thread-safe; callers sharing a scene between threads must lock
    around ``add_shape`` and ``total_perimeter`` themselves.
    """

    def __init__(self):
        self._shapes: List[Shape] = []

    def add_shape(self, shape: Shape) -> None:
        if not isinstance(shape, Shape):
            raise TypeError(f"only shapes can be added to a scene, got {type(shape)}")

        self._shapes.append(shape)
        logger.debug("added %r, scene now holds %d shapes", shape, len(self._shapes))

    def total_perimeter(self) -> float:
        total = reduce(lambda acc, shape: acc + shape.perimeter(), self._shapes, 0.0)
        logger.debug("total perimeter of %d shapes: %r", len(self._shapes), total)
        return total

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)
