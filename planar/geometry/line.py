import logging
import math
from pydantic import Field, model_validator
from planar.geometry.point import Point
from planar.geometry.constants import EPSILON, NO_INTERCEPT
from planar.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Line(ImmutableModel):
    """
    Represents an infinite straight line through two distinct points.

    The defining points only fix the line; equality compares the lines
    themselves, so Line(a=(0,0), b=(1,1)) equals Line(a=(2,2), b=(3,3)).
    Queries with no finite answer (the intercept of a line parallel to an
    axis) return NO_INTERCEPT rather than raising.
    """
    a: Point = Field(description="First point the line passes through")
    b: Point = Field(description="Second point the line passes through")

    __hash__ = None

    @model_validator(mode="after")
    def validate_distinct_points(self) -> "Line":
        """Validate that the defining points are distinct."""
        if self.a == self.b:
            logger.error(f"Cannot build a line through coincident points {self.a} and {self.b}")
            raise ValueError("Line requires two distinct points (a and b are the same within tolerance)")
        return self

    @property
    def direction_vector(self) -> Point:
        """Get the vector from a to b."""
        return self.b - self.a

    @property
    def is_vertical(self) -> bool:
        """True if the line is vertical within tolerance."""
        return abs(self.a.x - self.b.x) < EPSILON

    @property
    def is_horizontal(self) -> bool:
        """True if the line is horizontal within tolerance."""
        return abs(self.a.y - self.b.y) < EPSILON

    @property
    def sine(self) -> float:
        """
        Sine of the angle from the positive x-axis to the line, counterclockwise.

        The direction is taken toward increasing x, so the result does not depend
        on the order of the defining points. Vertical lines give exactly 1.0.
        """
        if self.is_vertical:
            return 1.0
        if self.b.x > self.a.x:
            return (self.b.y - self.a.y) / self.direction_vector.norm()
        return (self.a.y - self.b.y) / self.direction_vector.norm()

    @property
    def angle(self) -> float:
        """Get the inclination of the line in radians, in [-pi/2, pi/2]."""
        # Rounding can push the ratio a hair past 1
        return math.asin(max(-1.0, min(1.0, self.sine)))

    @property
    def x_intercept(self) -> float:
        """Get the x coordinate where the line meets y = 0, or NO_INTERCEPT if horizontal."""
        if self.is_horizontal:
            logger.debug(f"{self} is horizontal; no finite x-intercept")
            return NO_INTERCEPT

        m = (self.b.x - self.a.x) / (self.b.y - self.a.y)
        return self.a.x - m * self.a.y

    @property
    def y_intercept(self) -> float:
        """Get the y coordinate where the line meets x = 0, or NO_INTERCEPT if vertical."""
        if self.is_vertical:
            logger.debug(f"{self} is vertical; no finite y-intercept")
            return NO_INTERCEPT

        m = (self.b.y - self.a.y) / (self.b.x - self.a.x)
        return self.a.y - m * self.a.x

    def crosses(self, point: Point) -> bool:
        """
        Check if a point lies on the line.

        Args:
            point: The point to check

        Returns:
            True if the point is one of the defining points, or if the vectors
            a->b and b->point are parallel or anti-parallel within a tolerance
            relative to their lengths
        """
        if point == self.a or point == self.b:
            return True

        ab_vec = self.direction_vector
        bc_vec = point - self.b
        ab = ab_vec.norm()
        bc = bc_vec.norm()

        # |ab . bc| equals |ab| |bc| exactly when cos of the angle between them is +/-1
        return abs(abs(ab_vec.dot(bc_vec)) - ab * bc) < EPSILON * ab * bc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return lines_equal(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return not lines_equal(self, other)

    def __str__(self) -> str:
        return f"Line({self.a} -- {self.b})"


def lines_equal(r: Line, s: Line) -> bool:
    """True if both defining points of s lie on r, i.e. r and s are the same line."""
    return r.crosses(s.a) and r.crosses(s.b)
