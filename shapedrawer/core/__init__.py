from .math import Point, Op, dist2, project_point_to_segment, flatten_ops
from .styles import Color, LineStyle, AnchorStyle
from .tridiagonal import solve_tridiagonal
from .control_points import ControlPointPair, compute_control_points
from .curve import build_curve, ops_from_control_points, sample_curve
from .anchors import AnchorEditor, AnchorMarker
from .quadrilateral import QuadCorner, QuadrilateralEditor
from .frames import Frame, FrameHandle, FrameEditor, RectangleEditor, OvalEditor
from .registries import shape_registry, register_shape
