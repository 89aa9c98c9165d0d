"""Running bounding box over integer font units."""

from dataclasses import dataclass, field
from typing import Any

from ttf2dxf.domain.point import Point

# Reset values; the first added point replaces both min and max
EXTENT_SENTINEL = 2_000_000_000


@dataclass
class Extents:
    """Mutable axis-aligned bounding box.

    A freshly created or reset box is empty: minima hold a very large
    positive value and maxima a very large negative one, so the first
    add_point() sets both. Boxes only ever grow.

    Attributes:
        minx: Smallest x seen
        maxx: Largest x seen
        miny: Smallest y seen
        maxy: Largest y seen
    """

    minx: int = field(default=EXTENT_SENTINEL)
    maxx: int = field(default=-EXTENT_SENTINEL)
    miny: int = field(default=EXTENT_SENTINEL)
    maxy: int = field(default=-EXTENT_SENTINEL)

    def reset(self) -> "Extents":
        """Empty the box.

        Returns:
            The box itself, for chaining
        """
        self.minx = EXTENT_SENTINEL
        self.miny = EXTENT_SENTINEL
        self.maxx = -EXTENT_SENTINEL
        self.maxy = -EXTENT_SENTINEL
        return self

    def add_point(self, point: Point) -> "Extents":
        """Grow the box to include a point.

        Coordinates are truncated to integer units first.

        Args:
            point: Point to include

        Returns:
            The box itself, for chaining
        """
        x = int(point.x)
        y = int(point.y)
        if x > self.maxx:
            self.maxx = x
        if y > self.maxy:
            self.maxy = y
        if x < self.minx:
            self.minx = x
        if y < self.miny:
            self.miny = y
        return self

    def merge(self, other: "Extents") -> "Extents":
        """Grow the box to include all of another box.

        Args:
            other: Box to fold in (left unchanged)

        Returns:
            The box itself, for chaining
        """
        if other.maxx > self.maxx:
            self.maxx = other.maxx
        if other.maxy > self.maxy:
            self.maxy = other.maxy
        if other.minx < self.minx:
            self.minx = other.minx
        if other.miny < self.miny:
            self.miny = other.miny
        return self

    @property
    def is_empty(self) -> bool:
        """True until a point has been added."""
        return self.minx > self.maxx or self.miny > self.maxy

    def contains(self, point: Point) -> bool:
        """Check whether a point (truncated to integers) lies in the box."""
        x = int(point.x)
        y = int(point.y)
        return self.minx <= x <= self.maxx and self.miny <= y <= self.maxy

    def copy(self) -> "Extents":
        """Return an independent copy of the box."""
        return Extents(self.minx, self.maxx, self.miny, self.maxy)

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to (minx, maxx, miny, maxy)."""
        return (self.minx, self.maxx, self.miny, self.maxy)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "minx": self.minx,
            "maxx": self.maxx,
            "miny": self.miny,
            "maxy": self.maxy,
        }
