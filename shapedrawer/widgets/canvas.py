from PySide6 import QtWidgets, QtCore

from shapedrawer.core import Frame
from shapedrawer.widgets.curve_widget import CurvedLinerWidget
from shapedrawer.widgets.frame_widgets import OvalWidget, RectangleWidget
from shapedrawer.widgets.quad_widget import QuadrilateralWidget


class CanvasWidget(QtWidgets.QWidget):
    """
    Holds one editor widget per shape kind and only displays the active one.
    """

    activeShapeChanged = QtCore.Signal(str)  # emitted with the registry name of the shown shape
    shapeUpdated = QtCore.Signal(str)        # emitted when the active shape's geometry changes

    def __init__(self, parent=None):
        super().__init__(parent)

        self._stack = QtWidgets.QStackedLayout(self)
        self._stack.setStackingMode(QtWidgets.QStackedLayout.StackingMode.StackOne)

        self._shapes: dict[str, QtWidgets.QWidget] = {}
        self._active = ""

        curve = CurvedLinerWidget()
        curve.set_points([(80.0, 300.0), (220.0, 160.0), (380.0, 320.0), (560.0, 180.0)])
        curve.pointsChanged.connect(lambda: self.shapeUpdated.emit("curve"))

        quad = QuadrilateralWidget()
        quad.cornersChanged.connect(lambda: self.shapeUpdated.emit("quadrilateral"))

        rect = RectangleWidget(Frame(120.0, 120.0, 240.0, 160.0))
        rect.frameChanged.connect(lambda: self.shapeUpdated.emit("rectangle"))

        oval = OvalWidget(Frame(120.0, 120.0, 240.0, 160.0))
        oval.frameChanged.connect(lambda: self.shapeUpdated.emit("oval"))

        for name, widget in (("curve", curve), ("quadrilateral", quad), ("rectangle", rect), ("oval", oval)):
            self._shapes[name] = widget
            self._stack.addWidget(widget)

        self.set_active_shape("curve")

    # --- public API -------------------------
    @property
    def active_shape(self) -> str:
        return self._active

    @property
    def active_widget(self) -> QtWidgets.QWidget:
        return self._shapes[self._active]

    def shape_names(self) -> list[str]:
        return list(self._shapes)

    def set_active_shape(self, name: str) -> None:
        if name not in self._shapes:
            raise KeyError(name)
        self._active = name
        self._stack.setCurrentWidget(self._shapes[name])
        self.activeShapeChanged.emit(name)

    def reset_curve(self) -> None:
        self._shapes["curve"].clear()

    def sizeHint(self):
        return QtCore.QSize(640, 480)

    def __getitem__(self, name: str) -> QtWidgets.QWidget:
        return self._shapes[name]

    def __len__(self):
        return len(self._shapes)
