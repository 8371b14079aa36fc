from dataclasses import dataclass, replace

Color = tuple[int, int, int, int]  # r, g, b, a in 0..255

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)


@dataclass(frozen=True)
class LineStyle:
    color: Color = BLACK
    width: float = 4.0

    def with_(self, **changes) -> "LineStyle":
        return replace(self, **changes)


@dataclass(frozen=True)
class AnchorStyle:
    """
    Look of the draggable marker drawn on every anchor / corner.
    size is (width, height) of the marker's bounding box, centered on the point.
    """
    size: tuple[float, float] = (15.0, 15.0)
    background_color: Color = WHITE
    corner_radius: float = 7.5
    border_width: float = 3.0
    border_color: Color = BLACK

    def with_(self, **changes) -> "AnchorStyle":
        return replace(self, **changes)

    @property
    def hit_radius(self) -> float:
        return 0.5 * max(self.size)
