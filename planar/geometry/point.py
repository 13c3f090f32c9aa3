# planar/geometry/point.py
from typing import Optional
from pydantic import Field, field_validator
import math
from planar.geometry.constants import EPSILON
from planar.utils.base_model import ImmutableModel


class Point(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    A point doubles as a 2-vector: subtraction, dot product and norm treat it as
    the vector from the origin. Equality is tolerance-based: two points are equal
    when they are less than EPSILON apart. That relation is not transitive near
    the boundary (a == b and b == c does not imply a == c), so points are not
    hashable.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    __hash__ = None

    @field_validator("x", "y")
    @classmethod
    def validate_coordinates(cls, value: float) -> float:
        """Validate that coordinates are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Coordinate must be a finite number, got {value}")
        return value

    def __sub__(self, other: "Point") -> "Point":
        """
        Vector subtraction of two points.

        The difference of two finite points can overflow to infinity, so the
        result skips coordinate validation.
        """
        return Point.model_construct(x=self.x - other.x, y=self.y - other.y)

    def dot(self, other: "Point") -> float:
        """Dot product of the two points taken as vectors."""
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Calculate the Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def is_close_to(self, other: "Point", tolerance: Optional[float] = None) -> bool:
        """
        Check if this point is within a tolerance of another point.

        Args:
            other: The point to compare with
            tolerance: Distance below which the points are considered equal.
                      If None, uses the default EPSILON value.

        Returns:
            True if the points are strictly closer than the tolerance
        """
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_to(other) < tolerance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.is_close_to(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return not self.is_close_to(other)

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.format_as_tuple()


def subtract(a: Point, b: Point) -> Point:
    """Return the vector a - b."""
    return a - b


def dot(a: Point, b: Point) -> float:
    """Return the dot product of a and b."""
    return a.dot(b)


def norm(a: Point) -> float:
    """Return the Euclidean length of a."""
    return a.norm()


def points_equal(a: Point, b: Point) -> bool:
    """Tolerance-based point equality, same as ``a == b``."""
    return a.is_close_to(b)
