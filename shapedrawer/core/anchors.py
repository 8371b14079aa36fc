import itertools
import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from shapedrawer.config import get_settings

from .control_points import ControlPointPair, compute_control_points
from .curve import ops_from_control_points
from .math import Op, Point, dist2, flatten_ops, min_dist2_to_polyline, triangle_area2
from .registries import register_shape
from .styles import AnchorStyle, LineStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnchorMarker:
    """What the host needs to place one draggable marker."""
    anchor_id: int
    center: Point
    style: AnchorStyle


@register_shape("curve")
class AnchorEditor:
    """
    Mutable, ordered anchor sequence of a smooth curve.

    Every mutation re-fits the whole curve: control points and path ops are
    always derived from the current anchors. Anchors carry stable ids so a
    host can keep one marker per anchor across inserts and removals.
    """

    def __init__(self,
                 points: Iterable[Point] = (),
                 line_style: LineStyle | None = None,
                 anchor_style: AnchorStyle | None = None,
                 hit_tolerance: float | None = None,
                 samples_per_segment: int | None = None,
                 anchor_hit_radius: float | None = None):
        settings = get_settings()
        self._line_style = line_style or LineStyle()
        self._anchor_style = anchor_style or AnchorStyle()
        self._hit_tolerance = settings.hit_tolerance if hit_tolerance is None else float(hit_tolerance)
        self._samples = settings.curve_samples if samples_per_segment is None else int(samples_per_segment)
        self._anchor_hit_radius = settings.anchor_hit_radius if anchor_hit_radius is None else float(anchor_hit_radius)
        self._ids = itertools.count()

        self._points: list[Point] = []
        self._anchor_ids: list[int] = []
        self._pairs: list[ControlPointPair] = []
        self._ops: list[Op] = []
        self.initialize(points)

    # ---- read-only views ----------------------------------------------------
    @property
    def anchors(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def anchor_ids(self) -> tuple[int, ...]:
        return tuple(self._anchor_ids)

    @property
    def control_points(self) -> tuple[ControlPointPair, ...]:
        return tuple(self._pairs)

    @property
    def path(self) -> list[Op]:
        return list(self._ops)

    @property
    def line_style(self) -> LineStyle:
        return self._line_style

    @property
    def anchor_style(self) -> AnchorStyle:
        return self._anchor_style

    @property
    def tolerance(self) -> float:
        """Distance from the curve's centerline that still counts as a hit."""
        return max(self._line_style.width * 0.5, self._hit_tolerance)

    @property
    def grab_radius(self) -> float:
        if self._anchor_hit_radius is None:
            return self._anchor_style.hit_radius
        return self._anchor_hit_radius

    def __len__(self) -> int:
        return len(self._points)

    def markers(self) -> list[AnchorMarker]:
        return [AnchorMarker(i, p, self._anchor_style)
                for i, p in zip(self._anchor_ids, self._points)]

    # ---- mutations ----------------------------------------------------------
    def initialize(self, points: Iterable[Point]) -> list[Op]:
        """Replace all anchors; every anchor gets a fresh id."""
        self._points = [(float(x), float(y)) for x, y in points]
        self._anchor_ids = [next(self._ids) for _ in self._points]
        logger.debug("Initialized curve with %d anchors", len(self._points))
        return self._rebuild()

    def move_anchor(self, index: int, point: Point) -> list[Op]:
        self._check_index(index)
        self._points[index] = (float(point[0]), float(point[1]))
        return self._rebuild()

    def move_anchor_by(self, index: int, dx: float, dy: float) -> list[Op]:
        """Apply a drag translation to one anchor."""
        self._check_index(index)
        x, y = self._points[index]
        return self.move_anchor(index, (x + dx, y + dy))

    def anchor_index(self, anchor_id: int) -> int:
        try:
            return self._anchor_ids.index(anchor_id)
        except ValueError:
            raise KeyError(anchor_id) from None

    def move_anchor_by_id(self, anchor_id: int, point: Point) -> list[Op]:
        return self.move_anchor(self.anchor_index(anchor_id), point)

    def remove_anchor(self, index: int) -> list[Op]:
        self._check_index(index)
        self._points.pop(index)
        removed = self._anchor_ids.pop(index)
        logger.debug("Removed anchor %d (id %d)", index, removed)
        return self._rebuild()

    def insertion_index(self, tap: Point) -> int:
        """
        Index at which `tap` belongs: after the first anchor of the segment
        whose triangle (p0, tap, p1) has the smallest area, i.e. the segment
        the tap is most nearly collinear with.
        """
        if len(self._points) < 2:
            raise ValueError("insertion needs at least two anchors")
        best_area = 0.0
        index = 0
        for i in range(len(self._points) - 1):
            area = triangle_area2(self._points[i], tap, self._points[i + 1])
            if i == 0 or area < best_area:
                best_area = area
                index = i + 1
        return index

    def insert_nearest(self, tap: Point) -> list[Op]:
        index = self.insertion_index(tap)
        point = (float(tap[0]), float(tap[1]))
        self._points.insert(index, point)
        self._anchor_ids.insert(index, next(self._ids))
        logger.debug("Inserted anchor at %d: %s", index, point)
        return self._rebuild()

    def tap(self, point: Point) -> bool:
        """Insert an anchor at `point` if it lands on the curve."""
        if not self.hit_test(point):
            return False
        self.insert_nearest(point)
        return True

    def set_line_style(self, style: LineStyle) -> list[Op]:
        self._line_style = style
        return self._rebuild()

    def set_anchor_style(self, style: AnchorStyle) -> list[Op]:
        self._anchor_style = style
        return self._rebuild()

    # ---- queries ------------------------------------------------------------
    def hit_test(self, point: Point) -> bool:
        if len(self._ops) < 2:
            return False
        polyline = flatten_ops(self._ops, self._samples)
        tol = self.tolerance
        return min_dist2_to_polyline(point, polyline) <= tol * tol

    def anchor_at(self, point: Point, radius: float | None = None) -> int | None:
        """Index of the last-drawn marker under `point`, if any."""
        r = self.grab_radius if radius is None else radius
        r2 = r * r
        for i in range(len(self._points) - 1, -1, -1):
            if dist2(self._points[i], point) <= r2:
                return i
        return None

    # ---- internals ----------------------------------------------------------
    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._points):
            raise IndexError(f"anchor index {index} out of range for {len(self._points)} anchors")

    def _warn_duplicates(self, points: Sequence[Point]) -> None:
        for i, (a, b) in enumerate(zip(points, points[1:])):
            if a == b:
                logger.warning("Anchors %d and %d coincide at %s; curve may degenerate", i, i + 1, a)

    def _rebuild(self) -> list[Op]:
        self._warn_duplicates(self._points)
        self._pairs = compute_control_points(self._points)
        self._ops = ops_from_control_points(self._points, self._pairs)
        return self.path
