"""Shared fixtures: small fonts built in memory with fontTools.

TrueType test font (1000 units per em):
- space: no outline, advance 250
- A: triangle of straight lines (0,0) (500,700) (1000,0)
- O: ring of four quadratic quarter curves spanning (0,0)-(1000,1000)
- B: composite of A shifted 100 units right

OpenType (CFF) test font (1000 units per em):
- space: no outline
- I: rectangle (100,0)-(300,700)
- O: ring of four cubic quarter curves spanning (0,0)-(1000,1000)
"""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

UPM = 1000
ASCENT = 800
DESCENT = -200

# Control point offset for a cubic quarter circle of radius 500
KAPPA = 276


def _draw_triangle(pen) -> None:
    pen.moveTo((0, 0))
    pen.lineTo((500, 700))
    pen.lineTo((1000, 0))
    pen.closePath()


def _draw_quadratic_ring(pen) -> None:
    pen.moveTo((500, 0))
    pen.qCurveTo((1000, 0), (1000, 500))
    pen.qCurveTo((1000, 1000), (500, 1000))
    pen.qCurveTo((0, 1000), (0, 500))
    pen.qCurveTo((0, 0), (500, 0))
    pen.closePath()


def _draw_cubic_ring(pen) -> None:
    pen.moveTo((500, 0))
    pen.curveTo((500 + KAPPA, 0), (1000, 500 - KAPPA), (1000, 500))
    pen.curveTo((1000, 500 + KAPPA), (500 + KAPPA, 1000), (500, 1000))
    pen.curveTo((500 - KAPPA, 1000), (0, 500 + KAPPA), (0, 500))
    pen.curveTo((0, 500 - KAPPA), (500 - KAPPA, 0), (500, 0))
    pen.closePath()


def _draw_bar(pen) -> None:
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((300, 700))
    pen.lineTo((300, 0))
    pen.closePath()


def _finish(fb: FontBuilder, metrics: dict[str, tuple[int, int]], family: str) -> None:
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
    )
    fb.setupPost()


def build_ttf(path: Path) -> Path:
    """Build the TrueType test font at path."""
    glyph_order = [".notdef", "space", "A", "O", "B"]
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({0x20: "space", ord("A"): "A", ord("O"): "O", ord("B"): "B"})

    glyphs = {}
    for name, draw in (
        (".notdef", None),
        ("space", None),
        ("A", _draw_triangle),
        ("O", _draw_quadratic_ring),
    ):
        pen = TTGlyphPen(None)
        if draw is not None:
            draw(pen)
        glyphs[name] = pen.glyph()

    pen = TTGlyphPen(glyphs)
    pen.addComponent("A", (1, 0, 0, 1, 100, 0))
    glyphs["B"] = pen.glyph()

    fb.setupGlyf(glyphs)
    advances = {".notdef": 500, "space": 250, "A": 1000, "O": 1000, "B": 1100}
    glyf = fb.font["glyf"]
    _finish(
        fb,
        {name: (width, getattr(glyf[name], "xMin", 0)) for name, width in advances.items()},
        "Ttf2DxfTest",
    )
    fb.save(str(path))
    return path


def build_otf(path: Path) -> Path:
    """Build the CFF-flavoured OpenType test font at path."""
    glyph_order = [".notdef", "space", "I", "O"]
    advances = {".notdef": 500, "space": 250, "I": 400, "O": 1000}

    fb = FontBuilder(UPM, isTTF=False)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({0x20: "space", ord("I"): "I", ord("O"): "O"})

    charstrings = {}
    for name, draw in (
        (".notdef", None),
        ("space", None),
        ("I", _draw_bar),
        ("O", _draw_cubic_ring),
    ):
        pen = T2CharStringPen(advances[name], None)
        if draw is not None:
            draw(pen)
        charstrings[name] = pen.getCharString()

    fb.setupCFF(
        psName="Ttf2DxfTestCFF-Regular",
        fontInfo={"FamilyName": "Ttf2DxfTestCFF", "FullName": "Ttf2DxfTestCFF Regular"},
        charStringsDict=charstrings,
        privateDict={},
    )
    _finish(fb, {name: (width, 0) for name, width in advances.items()}, "Ttf2DxfTestCFF")
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def ttf_path(tmp_path_factory) -> Path:
    """Path of the TrueType test font."""
    return build_ttf(tmp_path_factory.mktemp("fonts") / "Ttf2DxfTest.ttf")


@pytest.fixture(scope="session")
def otf_path(tmp_path_factory) -> Path:
    """Path of the OpenType (CFF) test font."""
    return build_otf(tmp_path_factory.mktemp("fonts") / "Ttf2DxfTestCFF.otf")
