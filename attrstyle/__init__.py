# __init__.py

from .logger import Logger
from .utils import map_items, points
from .style import *
from .style import __all__ as _style_all
from .text import EMPTY, Run, StyledText, with_style
from .strategies import DisplayStrategy, PromptToolkitStrategy, RichStrategy

__all__ = _style_all + [
    "Logger", "map_items", "points", "EMPTY", "Run", "StyledText", "with_style",
    "DisplayStrategy", "RichStrategy", "PromptToolkitStrategy"
]
