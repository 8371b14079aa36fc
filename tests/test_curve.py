"""Tests for curve path building and flattening."""

import pytest

from shapedrawer.core import ControlPointPair, build_curve, ops_from_control_points, sample_curve
from shapedrawer.core.math import flatten_ops, min_dist2_to_polyline, triangle_area2


class TestBuildCurve:
    def test_nothing_to_draw(self) -> None:
        assert build_curve([]) == []
        assert build_curve([(1.0, 1.0)]) == []

    @pytest.mark.parametrize("n", [2, 3, 4, 7])
    def test_move_then_one_cubic_per_segment(self, n: int) -> None:
        anchors = [(float(i * 10), float((i % 2) * 10)) for i in range(n)]
        ops = build_curve(anchors)
        assert len(ops) == n
        assert ops[0] == ("M", anchors[0])
        assert [op for op, _ in ops[1:]] == ["C"] * (n - 1)

    def test_cubics_end_on_anchors(self) -> None:
        anchors = [(0.0, 0.0), (5.0, 5.0), (10.0, 0.0), (15.0, -5.0)]
        ops = build_curve(anchors)
        for (_, (_, _, end)), anchor in zip(ops[1:], anchors[1:]):
            assert end == anchor

    def test_straight_line_handles(self) -> None:
        ops = build_curve([(0.0, 0.0), (10.0, 0.0)])
        assert ops[1] == ("C", ((0.0, 0.0), (10.0, 0.0), (10.0, 0.0)))

    def test_idempotent(self) -> None:
        anchors = [(0.0, 0.0), (5.0, 5.0), (10.0, 0.0)]
        assert build_curve(anchors) == build_curve(anchors)

    def test_pair_count_mismatch(self) -> None:
        with pytest.raises(ValueError):
            ops_from_control_points([(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)],
                                    [ControlPointPair((0.0, 0.0), (1.0, 1.0))])


class TestSampleCurve:
    def test_passes_through_every_anchor(self) -> None:
        anchors = [(0.0, 0.0), (5.0, 5.0), (10.0, 0.0)]
        samples = sample_curve(anchors, samples_per_segment=8)
        assert samples[0] == anchors[0]
        assert samples[8] == pytest.approx(anchors[1])
        assert samples[-1] == pytest.approx(anchors[2])
        assert len(samples) == 1 + 2 * 8

    def test_straight_line_stays_on_axis(self) -> None:
        for _, y in sample_curve([(0.0, 0.0), (10.0, 0.0)], samples_per_segment=10):
            assert y == pytest.approx(0.0)


class TestGeometryHelpers:
    def test_triangle_area_collinear(self) -> None:
        assert triangle_area2((0.0, 0.0), (5.0, 0.0), (10.0, 0.0)) == 0.0

    def test_triangle_area(self) -> None:
        # twice the area of a right triangle with legs 10 and 2
        assert triangle_area2((0.0, 0.0), (5.0, 2.0), (10.0, 0.0)) == pytest.approx(20.0)

    def test_polyline_distance(self) -> None:
        assert min_dist2_to_polyline((5.0, 3.0), [(0.0, 0.0), (10.0, 0.0)]) == pytest.approx(9.0)
        assert min_dist2_to_polyline((0.0, 0.0), []) == float("inf")

    def test_flatten_closes_subpath(self) -> None:
        ops = [("M", (0.0, 0.0)), ("L", (1.0, 0.0)), ("L", (1.0, 1.0)), ("Z", ())]
        assert flatten_ops(ops) == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0)]
