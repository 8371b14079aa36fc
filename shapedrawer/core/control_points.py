from dataclasses import dataclass
from typing import Sequence

from .math import Point, add, midpoint, reflect, scale
from .tridiagonal import solve_tridiagonal


@dataclass(frozen=True)
class ControlPointPair:
    """Bezier handles of the segment anchor[i] -> anchor[i+1]."""
    first_control_point: Point
    second_control_point: Point

    def as_tuple(self) -> tuple[Point, Point]:
        return self.first_control_point, self.second_control_point


def _system_rows(anchors: Sequence[Point]) -> tuple[list[float], list[float], list[float], list[Point]]:
    """
    One row per segment, the unknown being the segment's first control point.
    Returns (bd, d, ad, rhs).
    """
    segments = len(anchors) - 1
    bd: list[float] = []
    d: list[float] = []
    ad: list[float] = []
    rhs: list[Point] = []
    for i in range(segments):
        p0 = anchors[i]
        p3 = anchors[i + 1]
        if i == 0:
            bd.append(0.0); d.append(2.0); ad.append(1.0)
            rhs.append(add(p0, scale(p3, 2.0)))
        elif i == segments - 1:
            bd.append(2.0); d.append(7.0); ad.append(0.0)
            rhs.append(add(scale(p0, 8.0), p3))
        else:
            bd.append(1.0); d.append(4.0); ad.append(1.0)
            rhs.append(add(scale(p0, 4.0), scale(p3, 2.0)))
    return bd, d, ad, rhs


def compute_control_points(anchors: Sequence[Point]) -> list[ControlPointPair]:
    """
    Control points of a C1-continuous piecewise cubic passing through every
    anchor. Returns len(anchors) - 1 pairs; fewer than two anchors give [].

    Two anchors make a straight segment: the handles sit on the anchors.
    """
    n = len(anchors)
    if n < 2:
        return []
    if n == 2:
        return [ControlPointPair(tuple(anchors[0]), tuple(anchors[1]))]

    bd, d, ad, rhs = _system_rows(anchors)
    first = solve_tridiagonal(bd, d, ad, rhs)

    segments = n - 1
    pairs: list[ControlPointPair] = []
    for i in range(segments):
        if i == segments - 1:
            second = midpoint(anchors[i + 1], first[i])
        else:
            # mirror the next segment's first handle about the shared anchor
            second = reflect(first[i + 1], anchors[i + 1])
        pairs.append(ControlPointPair(first[i], second))
    return pairs
