from enum import Enum

from PySide6 import QtWidgets
from PySide6.QtCore import Qt, Signal


class ShapeMode(Enum):
    CURVE = "curve"
    QUADRILATERAL = "quadrilateral"
    RECTANGLE = "rectangle"
    OVAL = "oval"


class ShapeSelectorWidget(QtWidgets.QWidget):

    mode_changed = Signal(ShapeMode)

    def __init__(self):
        super().__init__()

        self.select_box = QtWidgets.QComboBox()
        for mode in ShapeMode:
            self.select_box.addItem(mode.value.capitalize(), mode)
        self.text = QtWidgets.QLabel("Shape: ")
        self.layout = QtWidgets.QHBoxLayout(self)

        self.layout.addWidget(self.text, alignment=Qt.AlignmentFlag.AlignLeft)
        self.layout.addWidget(self.select_box, alignment=Qt.AlignmentFlag.AlignLeft)

        self.select_box.currentIndexChanged.connect(self._on_mode_changed)

    @property
    def mode(self) -> ShapeMode:
        return self.select_box.currentData()

    def _on_mode_changed(self, _index: int):
        self.mode_changed.emit(self.mode)
