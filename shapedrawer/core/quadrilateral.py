import logging
from enum import Enum

from shapedrawer.config import get_settings

from .math import Op, Point, dist2
from .registries import register_shape
from .styles import AnchorStyle, LineStyle

logger = logging.getLogger(__name__)


class QuadCorner(Enum):
    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_RIGHT = 2
    BOTTOM_LEFT = 3


# corner -> ((neighbour sharing y), (neighbour sharing x))
_COUPLING: dict[QuadCorner, tuple[QuadCorner, QuadCorner]] = {
    QuadCorner.TOP_LEFT: (QuadCorner.TOP_RIGHT, QuadCorner.BOTTOM_LEFT),
    QuadCorner.TOP_RIGHT: (QuadCorner.TOP_LEFT, QuadCorner.BOTTOM_RIGHT),
    QuadCorner.BOTTOM_RIGHT: (QuadCorner.BOTTOM_LEFT, QuadCorner.TOP_RIGHT),
    QuadCorner.BOTTOM_LEFT: (QuadCorner.BOTTOM_RIGHT, QuadCorner.TOP_LEFT),
}


@register_shape("quadrilateral")
class QuadrilateralEditor:
    """
    Four corners with fixed roles. Dragging a corner drags one coordinate of
    each adjacent corner along with it; the diagonal corner never moves.
    Nothing keeps the shape convex after repeated drags.
    """

    def __init__(self, width: float, height: float,
                 border_style: LineStyle | None = None,
                 anchor_style: AnchorStyle | None = None,
                 anchor_hit_radius: float | None = None):
        w = float(width); h = float(height)
        self._corners: list[Point] = [(0.0, 0.0), (w, 0.0), (w, h), (0.0, h)]
        self._size: tuple[float, float] = (w, h)
        self.border_style = border_style or LineStyle()
        self.anchor_style = anchor_style or AnchorStyle()
        if anchor_hit_radius is None:
            anchor_hit_radius = get_settings().anchor_hit_radius
        self.anchor_hit_radius = anchor_hit_radius

    @property
    def grab_radius(self) -> float:
        if self.anchor_hit_radius is None:
            return self.anchor_style.hit_radius
        return float(self.anchor_hit_radius)

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        return tuple(self._corners)

    @property
    def size(self) -> tuple[float, float]:
        return self._size

    def corner(self, corner: QuadCorner | int) -> Point:
        return self._corners[self._as_corner(corner).value]

    def path(self) -> list[Op]:
        tl, tr, br, bl = self._corners
        return [("M", tl), ("L", tr), ("L", br), ("L", bl), ("Z", ())]

    def drag_corner(self, corner: QuadCorner | int, point: Point) -> tuple[list[Op], tuple[float, float]]:
        c = self._as_corner(corner)
        x, y = float(point[0]), float(point[1])
        self._corners[c.value] = (x, y)

        shares_y, shares_x = _COUPLING[c]
        sx, _ = self._corners[shares_y.value]
        self._corners[shares_y.value] = (sx, y)
        _, sy = self._corners[shares_x.value]
        self._corners[shares_x.value] = (x, sy)

        self._update_bounds()
        logger.debug("Dragged %s to (%.2f, %.2f)", c.name, x, y)
        return self.path(), self._size

    def drag_corner_by(self, corner: QuadCorner | int, dx: float, dy: float) -> tuple[list[Op], tuple[float, float]]:
        x, y = self.corner(corner)
        return self.drag_corner(corner, (x + dx, y + dy))

    def corner_at(self, point: Point, radius: float | None = None) -> QuadCorner | None:
        r = self.grab_radius if radius is None else radius
        r2 = r * r
        for c in QuadCorner:
            if dist2(self._corners[c.value], point) <= r2:
                return c
        return None

    def set_border_style(self, style: LineStyle) -> list[Op]:
        self.border_style = style
        return self.path()

    def set_anchor_style(self, style: AnchorStyle) -> list[Op]:
        self.anchor_style = style
        return self.path()

    # ---- internals ----------------------------------------------------------
    def _update_bounds(self) -> None:
        bx, by = self._corners[QuadCorner.BOTTOM_RIGHT.value]
        self._size = (bx, by)

    @staticmethod
    def _as_corner(corner: QuadCorner | int) -> QuadCorner:
        if isinstance(corner, QuadCorner):
            return corner
        if isinstance(corner, bool) or not isinstance(corner, int):
            raise TypeError(f"corner must be a QuadCorner or an int, got {type(corner).__name__}")
        if not 0 <= corner < 4:
            raise IndexError(f"corner index {corner} out of range")
        return QuadCorner(corner)
