"""Unit tests for tangent arcs and biarc construction."""

import math

import pytest

from ttf2dxf.core.biarc import arc_bulge, biarc, emit_arc, solve_biarc
from ttf2dxf.core.vector import cross, dot, mag, sub
from ttf2dxf.domain import ArcTo, LineTo, Point, RecordCollector

QUARTER_BULGE = math.tan(math.pi / 8)
EIGHTH_BULGE = math.tan(math.pi / 16)


class TestArcBulge:
    """Tests for the bulge of a single tangent arc."""

    def test_counter_clockwise_quarter(self):
        """Test that a left-turning quarter circle has a positive bulge."""
        bulge = arc_bulge(Point(100, 0), Point(0, 100), Point(0, 1))
        assert bulge == pytest.approx(QUARTER_BULGE)

    def test_clockwise_quarter(self):
        """Test that a right-turning quarter circle has a negative bulge."""
        bulge = arc_bulge(Point(100, 0), Point(0, -100), Point(0, -1))
        assert bulge == pytest.approx(-QUARTER_BULGE)

    def test_semicircle(self):
        """Test that a half circle has a bulge of one."""
        bulge = arc_bulge(Point(100, 0), Point(-100, 0), Point(0, 1))
        assert bulge == pytest.approx(1.0)

    def test_direction_length_does_not_matter(self):
        a = arc_bulge(Point(100, 0), Point(0, 100), Point(0, 1))
        b = arc_bulge(Point(100, 0), Point(0, 100), Point(0, 250))
        assert a == pytest.approx(b)

    def test_tangent_along_chord_is_degenerate(self):
        """Test that a chord parallel to the tangent defines no circle."""
        assert arc_bulge(Point(0, 0), Point(100, 0), Point(1, 0)) is None
        assert arc_bulge(Point(0, 0), Point(100, 0), Point(-1, 0)) is None

    def test_zero_direction_is_degenerate(self):
        assert arc_bulge(Point(0, 0), Point(100, 50), Point(0, 0)) is None


class TestEmitArc:
    """Tests for arc emission with line fallback."""

    def test_emits_arc(self):
        sink = RecordCollector()
        emit_arc(sink, Point(100, 0), Point(0, 100), Point(0, 1))

        assert len(sink.records) == 1
        record = sink.records[0]
        assert isinstance(record, ArcTo)
        assert record.point == Point(0, 100)
        assert record.bulge == pytest.approx(QUARTER_BULGE)

    def test_degenerate_arc_becomes_line(self):
        sink = RecordCollector()
        emit_arc(sink, Point(0, 0), Point(100, 0), Point(1, 0))

        assert sink.records == [LineTo(Point(100, 0))]


class TestSolveBiarc:
    """Tests for the biarc junction solver."""

    def test_quarter_circle(self):
        """Test that a circular arc is split into two arcs on the same circle."""
        solution = solve_biarc(Point(0, 0), Point(0, 1), Point(100, 100), Point(1, 0), 1.0)

        assert solution is not None
        leg = 100 * (math.sqrt(2) - 1)
        assert solution.p1.x == pytest.approx(0)
        assert solution.p1.y == pytest.approx(leg)
        assert solution.p3.x == pytest.approx(100 - leg)
        assert solution.p3.y == pytest.approx(100)
        # Junction lies on the circle centred at (100, 0)
        assert mag(sub(solution.p2, Point(100, 0))) == pytest.approx(100)

    def test_junction_tangent_points_forward(self):
        solution = solve_biarc(Point(0, 0), Point(1, 1), Point(100, 0), Point(1, -1), 1.0)

        assert solution is not None
        assert solution.tangent_mid.x > 0
        assert solution.tangent_mid.y == pytest.approx(0, abs=1e-9)

    def test_parallel_tangents_have_no_solution(self):
        """Test that equal unit tangents make the quadratic degenerate."""
        assert solve_biarc(Point(0, 0), Point(1, 0), Point(100, 0), Point(1, 0), 1.0) is None

    @pytest.mark.parametrize(
        "direction",
        [Point(1234, 817), Point(3, 7), Point(-5, 11), Point(29, -13)],
    )
    def test_off_axis_parallel_tangents_have_no_solution(self, direction):
        """Test that rounding in the unit tangents does not hide parallelism."""
        end = Point(direction.x * 3, direction.y * 3)
        assert solve_biarc(Point(0, 0), direction, end, direction, 1.0) is None

    def test_nearly_parallel_tangents_have_no_solution(self):
        ts = Point(1, 0)
        te = Point(1, 1e-12)
        assert solve_biarc(Point(0, 0), ts, Point(100, 0), te, 1.0) is None

    def test_zero_ratio_has_no_solution(self):
        assert solve_biarc(Point(0, 0), Point(0, 1), Point(100, 100), Point(1, 0), 0.0) is None


class TestBiarc:
    """Tests for biarc emission."""

    def test_quarter_circle_gives_two_equal_arcs(self):
        sink = RecordCollector()
        biarc(sink, Point(0, 0), Point(0, 1), Point(100, 100), Point(1, 0))

        assert len(sink.records) == 2
        first, second = sink.records
        assert isinstance(first, ArcTo)
        assert isinstance(second, ArcTo)
        assert first.bulge == pytest.approx(-EIGHTH_BULGE)
        assert second.bulge == pytest.approx(-EIGHTH_BULGE)
        assert second.point == Point(100, 100)

    def test_s_curve_changes_turn_direction(self):
        """Test that an inflected piece gives arcs of opposite sign."""
        sink = RecordCollector()
        biarc(sink, Point(0, 0), Point(1, 1), Point(100, 0), Point(2, 1))

        assert len(sink.records) == 2
        first, second = sink.records
        assert isinstance(first, ArcTo)
        assert isinstance(second, ArcTo)
        assert first.bulge < 0 < second.bulge

    def test_unsolvable_biarc_becomes_line(self):
        sink = RecordCollector()
        biarc(sink, Point(0, 0), Point(1, 0), Point(100, 0), Point(1, 0))

        assert sink.records == [LineTo(Point(100, 0))]

    def test_zero_ratio_becomes_line(self):
        sink = RecordCollector()
        biarc(sink, Point(0, 0), Point(0, 1), Point(100, 100), Point(1, 0), ratio=0.0)

        assert sink.records == [LineTo(Point(100, 100))]

    def test_zero_tangents_give_lines(self):
        """Test that undefined tangents never produce arcs."""
        sink = RecordCollector()
        biarc(sink, Point(0, 0), Point(0, 0), Point(100, 40), Point(0, 0))

        assert sink.of_type(ArcTo) == []
        assert sink.records[-1].point == Point(100, 40)

    def test_always_ends_at_target(self):
        for te in (Point(1, 0), Point(0, -1), Point(-1, 1), Point(3, 7)):
            sink = RecordCollector()
            biarc(sink, Point(0, 0), Point(0, 1), Point(250, 80), te)
            assert sink.records[-1].point == Point(250, 80)


class TestBiarcTangentContinuity:
    """Tests that solved biarcs honour the end tangents."""

    @pytest.mark.parametrize(
        ("ts", "p4", "te"),
        [
            (Point(0, 1), Point(100, 100), Point(1, 0)),
            (Point(1, 1), Point(100, 0), Point(1, -1)),
            (Point(1, 1), Point(100, 0), Point(2, 1)),
            (Point(3, 1), Point(-40, 250), Point(-1, 2)),
        ],
    )
    def test_tangent_legs_are_parallel(self, ts, p4, te):
        p0 = Point(0, 0)
        solution = solve_biarc(p0, ts, p4, te, 1.0)

        assert solution is not None
        start_leg = sub(solution.p1, p0)
        end_leg = sub(p4, solution.p3)
        assert cross(start_leg, ts) == pytest.approx(0, abs=1e-6)
        assert dot(start_leg, ts) > 0
        assert cross(end_leg, te) == pytest.approx(0, abs=1e-6)
        assert dot(end_leg, te) > 0
