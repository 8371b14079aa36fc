from typing import Sequence

from .control_points import ControlPointPair, compute_control_points
from .math import Op, Point, flatten_ops


def ops_from_control_points(anchors: Sequence[Point], pairs: Sequence[ControlPointPair]) -> list[Op]:
    """
    Assemble drawing ops from anchors and their per-segment handles:
      - ("M", anchor0)
      - ("C", (c1, c2, anchor_i)) for every following anchor
    """
    if len(anchors) < 2:
        return []
    if len(pairs) != len(anchors) - 1:
        raise ValueError(f"expected {len(anchors) - 1} control point pairs, got {len(pairs)}")
    ops: list[Op] = [("M", tuple(anchors[0]))]
    for i in range(1, len(anchors)):
        pair = pairs[i - 1]
        ops.append(("C", (pair.first_control_point, pair.second_control_point, tuple(anchors[i]))))
    return ops


def build_curve(anchors: Sequence[Point]) -> list[Op]:
    """Smooth path through every anchor. Nothing to draw below two anchors."""
    return ops_from_control_points(anchors, compute_control_points(anchors))


def sample_curve(anchors: Sequence[Point], samples_per_segment: int = 32) -> list[Point]:
    """Polyline approximation of build_curve(anchors)."""
    return flatten_ops(build_curve(anchors), samples_per_segment)
