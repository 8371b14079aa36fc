from PySide6 import QtCore, QtGui, QtWidgets

from shapedrawer.core import Point, QuadCorner, QuadrilateralEditor
from shapedrawer.widgets.utils import draw_marker, stroke_pen, to_qpainter_path


class QuadrilateralWidget(QtWidgets.QWidget):
    """Qt host for a QuadrilateralEditor: drag a corner marker to reshape."""

    cornersChanged = QtCore.Signal()
    sizeChanged = QtCore.Signal(float, float)  # new frame size after a drag

    def __init__(self, editor: QuadrilateralEditor | None = None, parent=None):
        super().__init__(parent)
        self._editor = editor or QuadrilateralEditor(200.0, 200.0)
        self._drag: QuadCorner | None = None
        self._last_pos: Point | None = None

        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setMouseTracking(True)

        self.cornersChanged.connect(self.update)

    @property
    def editor(self) -> QuadrilateralEditor:
        return self._editor

    def drag_corner(self, corner: QuadCorner | int, point: Point) -> None:
        _, (w, h) = self._editor.drag_corner(corner, point)
        self.cornersChanged.emit()
        self.sizeChanged.emit(w, h)

    def set_border_width(self, width: float) -> None:
        self._editor.set_border_style(self._editor.border_style.with_(width=float(width)))
        self.update()

    # ---------- Qt events ----------
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            return
        pos: Point = e.position().toTuple()
        self._drag = self._editor.corner_at(pos)
        self._last_pos = pos if self._drag is not None else None

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        pos: Point = e.position().toTuple()
        if self._drag is None or self._last_pos is None:
            over = self._editor.corner_at(pos) is not None
            self.setCursor(
                QtCore.Qt.CursorShape.SizeAllCursor if over
                else QtCore.Qt.CursorShape.ArrowCursor
            )
            return
        x, y = self._editor.corner(self._drag)
        self.drag_corner(self._drag, (x + pos[0] - self._last_pos[0], y + pos[1] - self._last_pos[1]))
        self._last_pos = pos

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self._drag = None
            self._last_pos = None

    # ---------- painting ----------
    def paintEvent(self, _):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        p.setPen(stroke_pen(self._editor.border_style, QtCore.Qt.PenCapStyle.SquareCap))
        p.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        p.drawPath(to_qpainter_path(self._editor.path()))
        for corner in self._editor.corners:
            draw_marker(p, corner, self._editor.anchor_style)
        p.end()
