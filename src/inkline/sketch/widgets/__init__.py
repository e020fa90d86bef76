from .sketch_canvas import SketchCanvas
from .number_line_widget import NumberLineWidget

__all__ = ['SketchCanvas', 'NumberLineWidget']
