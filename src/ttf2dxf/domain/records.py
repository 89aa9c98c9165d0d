"""Outline records streamed from the geometry core to an output writer.

The core never stores the arcs it builds; it hands each record to a sink as
soon as it is known. A path is a PathStart followed by any number of LineTo
and ArcTo records.
"""

from dataclasses import dataclass, field
from typing import Protocol

from ttf2dxf.domain.point import Point


@dataclass(frozen=True, slots=True)
class PathStart:
    """Begin a new path at a point."""

    point: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the previous point."""

    point: Point


@dataclass(frozen=True, slots=True)
class ArcTo:
    """Circular arc from the previous point.

    Attributes:
        point: Arc end point
        bulge: tan(included angle / 4); positive for counter-clockwise arcs
    """

    point: Point
    bulge: float


OutlineRecord = PathStart | LineTo | ArcTo


class RecordSink(Protocol):
    """Anything that accepts outline records."""

    def emit(self, record: OutlineRecord) -> None: ...


@dataclass
class RecordCollector:
    """Sink that keeps every record in a list."""

    records: list[OutlineRecord] = field(default_factory=list)

    def emit(self, record: OutlineRecord) -> None:
        self.records.append(record)

    def of_type(self, record_type: type) -> list[OutlineRecord]:
        """Return the collected records of one type, in order."""
        return [r for r in self.records if isinstance(r, record_type)]

    def clear(self) -> None:
        self.records.clear()
