"""DXF writer for traced glyph outlines.

This module provides the DxfWriter class, which turns streamed outline
records into LWPOLYLINE entities and glyph metrics into ordinate DIMENSION
entities that OpenSCAD's dxf_dim() can read.
"""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import ezdxf
from ezdxf.document import Drawing

from ttf2dxf.domain import ArcTo, Extents, LineTo, OutlineRecord, PathStart, Point

# Group 70 dimension type flags
DIM_ORDINATE = 6
DIM_ORDINATE_X = 64

# Characters that may not appear in DXF layer names
INVALID_LAYER_CHARS = frozenset('<>/\\":;?*|=`,')

DEFAULT_LAYER = "0"


def layer_name_for(char: str) -> str:
    """Derive a layer name from a character.

    Printable ASCII characters name their own layer ("A", "7", "&"). Anything
    else, including characters DXF forbids in layer names, becomes
    "_<code point>" ("_32" for space, "_233" for "é").

    Args:
        char: A single character

    Returns:
        Layer name
    """
    if "!" <= char <= "~" and char not in INVALID_LAYER_CHARS:
        return char
    return f"_{ord(char)}"


class PolylineSink:
    """RecordSink that builds LWPOLYLINE entities on one layer.

    Every PathStart begins a new polyline. A bulge belongs to the vertex at
    the start of its segment, so an ArcTo sets the bulge of the previous
    vertex before appending its end point.
    """

    def __init__(self, writer: "DxfWriter", layer: str) -> None:
        self._writer = writer
        self._layer = layer
        self._vertices: list[list[float]] = []
        self.polyline_count = 0

    def emit(self, record: OutlineRecord) -> None:
        if isinstance(record, PathStart):
            self.flush()
            self._vertices = [[record.point.x, record.point.y, 0.0]]
        elif isinstance(record, LineTo):
            self._vertices.append([record.point.x, record.point.y, 0.0])
        elif isinstance(record, ArcTo):
            if self._vertices:
                self._vertices[-1][2] = record.bulge
            self._vertices.append([record.point.x, record.point.y, 0.0])

    def flush(self) -> None:
        """Write the pending path, dropping paths with a single vertex."""
        if len(self._vertices) >= 2:
            self._writer.add_polyline(self._layer, self._vertices)
            self.polyline_count += 1
        self._vertices = []

    def discard(self) -> None:
        """Forget the pending path."""
        self._vertices = []


class DxfWriter:
    """Collects traced glyphs into an ezdxf drawing and saves it.

    Example:
        writer = DxfWriter()
        with writer.polylines("A") as sink:
            renderer.render("A", sink)
        writer.add_glyph_metrics("A", metrics.extents, metrics.advance)
        writer.save(Path("font.dxf"))
    """

    def __init__(self, dxf_version: str = "R2000") -> None:
        """Initialize the writer with an empty drawing.

        Args:
            dxf_version: DXF version string understood by ezdxf
        """
        self._doc: Drawing = ezdxf.new(dxf_version)
        self._msp = self._doc.modelspace()

    @property
    def document(self) -> Drawing:
        """The underlying ezdxf drawing."""
        return self._doc

    def ensure_layer(self, name: str) -> None:
        """Create a layer if the drawing does not have it yet."""
        if name not in self._doc.layers:
            self._doc.layers.add(name)

    def add_polyline(self, layer: str, vertices: list[list[float]]) -> None:
        """Add one LWPOLYLINE of (x, y, bulge) vertices."""
        self.ensure_layer(layer)
        self._msp.add_lwpolyline(
            [tuple(v) for v in vertices],
            format="xyb",
            dxfattribs={"layer": layer},
        )

    @contextmanager
    def polylines(self, layer: str) -> Iterator[PolylineSink]:
        """Open a record sink writing polylines onto a layer.

        The last pending path is written when the block exits normally and
        dropped when it raises.

        Args:
            layer: Target layer name

        Yields:
            PolylineSink bound to the layer
        """
        sink = PolylineSink(self, layer)
        try:
            yield sink
        except BaseException:
            sink.discard()
            raise
        sink.flush()

    def add_ordinate(self, layer: str, name: str, value: float, x_axis: bool) -> None:
        """Add a named ordinate dimension carrying a single coordinate.

        Args:
            layer: Target layer name
            name: Dimension text, used as the lookup key by dxf_dim()
            value: Coordinate value
            x_axis: True for an x-type ordinate, False for y-type
        """
        self.ensure_layer(layer)
        feature = (value, 0.0, 0.0) if x_axis else (0.0, value, 0.0)
        dimtype = DIM_ORDINATE | DIM_ORDINATE_X if x_axis else DIM_ORDINATE
        self._msp.new_entity(
            "DIMENSION",
            dxfattribs={
                "layer": layer,
                "dimtype": dimtype,
                "text": name,
                "defpoint": (0.0, 0.0, 0.0),
                "text_midpoint": feature,
                "defpoint2": feature,
                "defpoint3": feature,
            },
        )

    def add_glyph_metrics(self, layer: str, extents: Extents, advance: Point) -> None:
        """Add the six metric dimensions of a glyph or text line.

        Empty extents (glyphs without an outline) are written as zeros.

        Args:
            layer: Target layer name
            extents: Bounding box in output units
            advance: Pen advance in output units
        """
        minx, maxx, miny, maxy = (0, 0, 0, 0) if extents.is_empty else extents.to_tuple()
        self.add_ordinate(layer, "minx", minx, x_axis=True)
        self.add_ordinate(layer, "maxx", maxx, x_axis=True)
        self.add_ordinate(layer, "miny", miny, x_axis=False)
        self.add_ordinate(layer, "maxy", maxy, x_axis=False)
        self.add_ordinate(layer, "advx", advance.x, x_axis=True)
        self.add_ordinate(layer, "advy", advance.y, x_axis=False)

    def save(self, output_path: Path | None) -> None:
        """Save the drawing.

        Args:
            output_path: Target file, or None to write to stdout

        Raises:
            IOError: If file cannot be written
        """
        if output_path is None:
            self._doc.write(sys.stdout)
        else:
            self._doc.saveas(output_path)
