from PySide6 import QtCore, QtGui, QtWidgets

from shapedrawer.core import Frame, FrameEditor, LineStyle, OvalEditor, Point, RectangleEditor
from shapedrawer.widgets.utils import stroke_pen, to_qcolor, to_qpainter_path


class FrameShapeWidget(QtWidgets.QWidget):
    """
    Qt host for a FrameEditor. The editor's frame lives in this widget's
    coordinates; the shape is painted there rather than by moving a child view.
    """

    frameChanged = QtCore.Signal()

    def __init__(self, editor: FrameEditor, fill: bool = False, parent=None):
        super().__init__(parent)
        self._editor = editor
        self._fill = fill
        self._previous: Point | None = None

        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.frameChanged.connect(self.update)

    @property
    def editor(self) -> FrameEditor:
        return self._editor

    def mousePressEvent(self, e: QtGui.QMouseEvent):
        pos: Point = e.position().toTuple()
        if not self._editor.frame.contains(pos):
            self._previous = None
            return
        self._editor.begin(pos)
        self._previous = pos

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        if self._previous is None:
            return
        pos: Point = e.position().toTuple()
        self._editor.move(pos, self._previous)
        self._previous = pos
        self.frameChanged.emit()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        self._editor.end()
        self._previous = None

    def paintEvent(self, _):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        style = self._editor.border_style
        p.setPen(stroke_pen(style))
        if self._fill:
            p.setBrush(to_qcolor(style.color))
        else:
            p.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        p.drawPath(to_qpainter_path(self._editor.path()))
        p.end()


class RectangleWidget(FrameShapeWidget):
    def __init__(self, frame: Frame | None = None, parent=None):
        super().__init__(RectangleEditor(frame or Frame(100.0, 100.0, 200.0, 150.0)), parent=parent)


class OvalWidget(FrameShapeWidget):
    def __init__(self, frame: Frame | None = None, parent=None):
        oval = OvalEditor(frame or Frame(100.0, 100.0, 200.0, 150.0),
                          border_style=LineStyle(color=(128, 128, 128, 255)))
        super().__init__(oval, fill=True, parent=parent)
