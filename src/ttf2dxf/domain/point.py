"""2D point value type.

A Point doubles as a position (in font or output units) and as a direction
vector (tangents handed to the biarc solver).
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """An immutable point or vector in 2D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])

    @classmethod
    def from_tuple(cls, pt: tuple[float, float]) -> "Point":
        """Build a point from an (x, y) pair as handed out by fontTools pens."""
        x, y = pt
        return cls(x, y)


ORIGIN = Point(0.0, 0.0)
