from .canvas import CanvasWidget
from .curve_widget import CurvedLinerWidget
from .frame_widgets import FrameShapeWidget, OvalWidget, RectangleWidget
from .quad_widget import QuadrilateralWidget
from .utils import point_to_qpoint, qpoint_to_point, to_qpainter_path

__all__ = [
    "CanvasWidget",
    "CurvedLinerWidget",
    "FrameShapeWidget",
    "OvalWidget",
    "QuadrilateralWidget",
    "RectangleWidget",
    "point_to_qpoint",
    "qpoint_to_point",
    "to_qpainter_path",
]
