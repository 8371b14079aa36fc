import logging
import sys

from PySide6 import QtCore, QtWidgets

from shapedrawer.config import get_settings
from shapedrawer.logging_config import configure_logging
from shapedrawer.menu import Bar
from shapedrawer.widgets import CanvasWidget

logger = logging.getLogger(__name__)


class MyWidget(QtWidgets.QWidget):
    def __init__(self):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)

        self.canvas = CanvasWidget(parent=self)
        self.top_bar = Bar(self.canvas)

        self.layout.addWidget(self.top_bar, alignment=QtCore.Qt.AlignmentFlag.AlignTop)
        self.layout.addWidget(self.canvas, stretch=1)

        self.canvas.shapeUpdated.connect(self._log_update)

    def _log_update(self, name: str):
        logger.debug("%s updated", name)


def main() -> int:
    settings = get_settings()
    configure_logging(log_level=settings.log_level)

    app = QtWidgets.QApplication(sys.argv)

    widget = MyWidget()
    widget.resize(settings.window_width, settings.window_height)
    widget.show()
    logger.info("ShapeDrawer started")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
