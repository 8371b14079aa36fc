from PySide6 import QtCore, QtGui, QtWidgets

from shapedrawer.core import AnchorEditor, AnchorStyle, Color, LineStyle, Point
from shapedrawer.widgets.utils import draw_marker, stroke_pen, to_qpainter_path


class CurvedLinerWidget(QtWidgets.QWidget):
    """
    Qt host for an AnchorEditor:
      - drag a marker to move its anchor,
      - click on the curve to insert an anchor there,
      - right click (or Ctrl+click) a marker to remove it.
    """

    pointsChanged = QtCore.Signal()  # emitted whenever anchors change (insert/move/remove)

    def __init__(self, editor: AnchorEditor | None = None, parent=None):
        super().__init__(parent)
        self._editor = editor or AnchorEditor()
        self._drag_id: int | None = None
        self._last_pos: Point | None = None

        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setMouseTracking(True)

        self.pointsChanged.connect(self.update)

    # ---------- binding ----------
    @property
    def editor(self) -> AnchorEditor:
        return self._editor

    def set_points(self, points: list[Point]) -> None:
        self._editor.initialize(points)
        self._drag_id = None
        self.pointsChanged.emit()

    def clear(self) -> None:
        self.set_points([])

    def set_line_style(self, style: LineStyle) -> None:
        self._editor.set_line_style(style)
        self.update()

    def set_anchor_style(self, style: AnchorStyle) -> None:
        self._editor.set_anchor_style(style)
        self.update()

    def set_line_width(self, width: float) -> None:
        self.set_line_style(self._editor.line_style.with_(width=float(width)))

    def set_line_color(self, color: Color) -> None:
        self.set_line_style(self._editor.line_style.with_(color=color))

    def set_marker_size(self, size: float) -> None:
        """Square markers of `size`, rounded into circles."""
        s = float(size)
        self.set_anchor_style(self._editor.anchor_style.with_(size=(s, s), corner_radius=s * 0.5))

    # ---------- Qt events ----------
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        pos: Point = e.position().toTuple()
        idx = self._editor.anchor_at(pos)

        is_remove = (
            e.button() == QtCore.Qt.MouseButton.RightButton
            or (e.button() == QtCore.Qt.MouseButton.LeftButton
                and e.modifiers() & QtCore.Qt.KeyboardModifier.ControlModifier)
        )
        if is_remove and idx is not None:
            self._editor.remove_anchor(idx)
            self._drag_id = None
            self.pointsChanged.emit()
            return

        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            return
        if idx is not None:
            self._drag_id = self._editor.anchor_ids[idx]
            self._last_pos = pos
        elif len(self._editor) < 2:
            # not enough anchors for a curve yet: place them freely
            self._editor.initialize(list(self._editor.anchors) + [pos])
            self.pointsChanged.emit()
        elif self._editor.tap(pos):
            self.pointsChanged.emit()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        pos: Point = e.position().toTuple()
        if self._drag_id is None or self._last_pos is None:
            over = self._editor.anchor_at(pos) is not None
            self.setCursor(
                QtCore.Qt.CursorShape.SizeAllCursor if over
                else QtCore.Qt.CursorShape.CrossCursor
            )
            return
        dx = pos[0] - self._last_pos[0]
        dy = pos[1] - self._last_pos[1]
        self._last_pos = pos
        self._editor.move_anchor_by(self._editor.anchor_index(self._drag_id), dx, dy)
        self.pointsChanged.emit()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self._drag_id = None
            self._last_pos = None

    # ---------- painting ----------
    def paintEvent(self, _):
        if not self._editor.anchors:
            return
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)

        p.setPen(stroke_pen(self._editor.line_style))
        p.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        p.drawPath(to_qpainter_path(self._editor.path))

        for marker in self._editor.markers():
            draw_marker(p, marker.center, marker.style)
        p.end()
