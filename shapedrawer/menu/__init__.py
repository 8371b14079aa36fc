from .top_bar.bar import Bar
from .top_bar.tools import ShapeMode, ShapeSelectorWidget
