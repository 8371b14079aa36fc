import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum

from shapedrawer.config import get_settings

from .math import Op, Point
from .registries import register_shape
from .styles import LineStyle

logger = logging.getLogger(__name__)

KAPPA = 0.5522847498307936


@dataclass(frozen=True)
class Frame:
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return self.x + self.width * 0.5, self.y + self.height * 0.5

    def contains(self, p: Point) -> bool:
        return self.x <= p[0] <= self.x + self.width and self.y <= p[1] <= self.y + self.height

    def translated(self, dx: float, dy: float) -> "Frame":
        return replace(self, x=self.x + dx, y=self.y + dy)


class FrameHandle(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    CENTER = "center"


class FrameEditor(ABC):
    """
    Shared touch protocol of the frame shapes: begin() picks the grabbed
    handle, move() applies the delta between successive touch points, end()
    drops the handle. Points are in the parent's coordinate space.
    """

    def __init__(self, frame: Frame, edge_size: float | None = None,
                 border_style: LineStyle | None = None):
        self.frame = frame
        self.edge_size = get_settings().frame_edge_size if edge_size is None else float(edge_size)
        self.border_style = border_style or LineStyle()
        self.handle = FrameHandle.CENTER

    def begin(self, point: Point) -> FrameHandle:
        local = (point[0] - self.frame.x, point[1] - self.frame.y)
        self.handle = self.classify(local)
        logger.debug("%s grabbed at %s", type(self).__name__, self.handle.name)
        return self.handle

    def move(self, current: Point, previous: Point) -> Frame:
        dx = current[0] - previous[0]
        dy = current[1] - previous[1]
        if self.handle is FrameHandle.CENTER:
            self.frame = self.frame.translated(dx, dy)
        else:
            self.frame = self.resize(self.handle, dx, dy)
        return self.frame

    def end(self) -> None:
        self.handle = FrameHandle.CENTER

    @abstractmethod
    def classify(self, local: Point) -> FrameHandle:
        """Handle grabbed by a touch at frame-local `local`."""

    @abstractmethod
    def resize(self, handle: FrameHandle, dx: float, dy: float) -> Frame:
        """Frame after dragging `handle` by (dx, dy)."""

    @abstractmethod
    def path(self) -> list[Op]:
        """Drawing ops of the shape in the current frame."""


@register_shape("rectangle")
class RectangleEditor(FrameEditor):
    """Resized from its corners; the opposite corner stays put."""

    def classify(self, local: Point) -> FrameHandle:
        x, y = local
        w, h, e = self.frame.width, self.frame.height, self.edge_size
        if w - x < e and h - y < e:
            return FrameHandle.BOTTOM_RIGHT
        if x < e and y < e:
            return FrameHandle.TOP_LEFT
        if w - x < e and y < e:
            return FrameHandle.TOP_RIGHT
        if x < e and h - y < e:
            return FrameHandle.BOTTOM_LEFT
        return FrameHandle.CENTER

    def resize(self, handle: FrameHandle, dx: float, dy: float) -> Frame:
        f = self.frame
        match handle:
            case FrameHandle.TOP_LEFT:
                return Frame(f.x + dx, f.y + dy, f.width - dx, f.height - dy)
            case FrameHandle.TOP_RIGHT:
                return Frame(f.x, f.y + dy, f.width + dx, f.height - dy)
            case FrameHandle.BOTTOM_RIGHT:
                return Frame(f.x, f.y, f.width + dx, f.height + dy)
            case FrameHandle.BOTTOM_LEFT:
                return Frame(f.x + dx, f.y, f.width - dx, f.height + dy)
            case _:
                raise ValueError(handle)

    def path(self) -> list[Op]:
        f = self.frame
        x0, y0, x1, y1 = f.x, f.y, f.x + f.width, f.y + f.height
        return [("M", (x0, y0)), ("L", (x1, y0)), ("L", (x1, y1)), ("L", (x0, y1)), ("Z", ())]


@register_shape("oval")
class OvalEditor(FrameEditor):
    """Ellipse inscribed in its frame, resized from the edge midpoints."""

    def classify(self, local: Point) -> FrameHandle:
        x, y = local
        w, h, e = self.frame.width, self.frame.height, self.edge_size
        mid_x = abs(w * 0.5 - x) < e
        mid_y = abs(h * 0.5 - y) < e
        if mid_x and h - y < e:
            return FrameHandle.BOTTOM
        if mid_x and y < e:
            return FrameHandle.TOP
        if w - x < e and mid_y:
            return FrameHandle.RIGHT
        if x < e and mid_y:
            return FrameHandle.LEFT
        return FrameHandle.CENTER

    def resize(self, handle: FrameHandle, dx: float, dy: float) -> Frame:
        f = self.frame
        match handle:
            case FrameHandle.LEFT:
                return Frame(f.x + dx, f.y, f.width - dx, f.height)
            case FrameHandle.RIGHT:
                return Frame(f.x, f.y, f.width + dx, f.height)
            case FrameHandle.TOP:
                return Frame(f.x, f.y + dy, f.width, f.height - dy)
            case FrameHandle.BOTTOM:
                return Frame(f.x, f.y, f.width, f.height + dy)
            case _:
                raise ValueError(handle)

    def path(self) -> list[Op]:
        cx, cy = self.frame.center
        rx = self.frame.width * 0.5
        ry = self.frame.height * 0.5
        kx = KAPPA * rx
        ky = KAPPA * ry

        a0 = (cx + rx, cy)  # 0°
        a1 = (cx, cy + ry)  # 90°
        a2 = (cx - rx, cy)  # 180°
        a3 = (cx, cy - ry)  # 270°

        return [
            ("M", a0),
            ("C", ((a0[0], a0[1] + ky), (a1[0] + kx, a1[1]), a1)),
            ("C", ((a1[0] - kx, a1[1]), (a2[0], a2[1] + ky), a2)),
            ("C", ((a2[0], a2[1] - ky), (a3[0] - kx, a3[1]), a3)),
            ("C", ((a3[0] + kx, a3[1]), (a0[0], a0[1] - ky), a0)),
            ("Z", ()),
        ]
