from PySide6 import QtCore, QtWidgets

from shapedrawer.menu.top_bar.tools import ShapeMode, ShapeSelectorWidget
from shapedrawer.widgets import CanvasWidget


class Bar(QtWidgets.QToolBar):
    def __init__(self, canvas: CanvasWidget):
        super().__init__()

        self.canvas = canvas
        self.reset_button = QtWidgets.QPushButton("reset")
        self.setObjectName("Bar")
        self.setMovable(False)
        self.setFloatable(False)
        self.setIconSize(QtCore.QSize(18, 18))
        self.shape_selector = ShapeSelectorWidget()

        self.addWidget(self.shape_selector)
        self.addWidget(self.reset_button)

        self.reset_button.clicked.connect(self._reset_curve)
        self.shape_selector.mode_changed.connect(self._on_mode_changed)

    @QtCore.Slot()
    def _reset_curve(self):
        self.canvas.reset_curve()

    def _on_mode_changed(self, mode: ShapeMode):
        self.canvas.set_active_shape(mode.value)
        # the reset button only makes sense for the curve
        self.reset_button.setEnabled(mode is ShapeMode.CURVE)
