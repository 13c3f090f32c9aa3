import pytest
from planar.utils.base_model import ImmutableModel
from planar.geometry.point import Point
from planar.geometry.line import Line


class Label(ImmutableModel):
    """Simple test model with basic attributes."""
    name: str
    value: int


class TestImmutableModel:
    """Test suite for ImmutableModel base class."""

    def test_immutability(self):
        model = Label(name="test", value=42)

        with pytest.raises(Exception):
            model.name = "changed"

    def test_with_changes_basic(self):
        original = Label(name="test", value=42)
        modified = original.with_changes(name="updated")

        assert original.name == "test"
        assert modified.name == "updated"
        assert modified.value == 42
        assert original is not modified

    def test_with_changes_invalid_field(self):
        model = Label(name="test", value=42)

        with pytest.raises(ValueError) as exc_info:
            model.with_changes(nonexistent="value")

        assert "Invalid field: nonexistent" in str(exc_info.value)

    def test_point_with_changes(self):
        p = Point(x=1.0, y=2.0)
        moved = p.with_changes(y=5.0)

        assert isinstance(moved, Point)
        assert moved.x == 1.0
        assert moved.y == 5.0
        assert p.y == 2.0

    def test_point_with_changes_validates(self):
        with pytest.raises(ValueError):
            Point(x=1.0, y=2.0).with_changes(x=float('nan'))

    def test_line_with_changes(self):
        line = Line(a=Point(x=0.0, y=0.0), b=Point(x=1.0, y=1.0))
        steeper = line.with_changes(b=Point(x=1.0, y=2.0))

        assert isinstance(steeper, Line)
        assert steeper.a == line.a
        assert steeper != line
        assert steeper.crosses(Point(x=2.0, y=4.0))

    def test_line_with_changes_rejects_degenerate_line(self):
        line = Line(a=Point(x=0.0, y=0.0), b=Point(x=1.0, y=1.0))

        with pytest.raises(ValueError):
            line.with_changes(b=Point(x=0.0, y=0.0))
