# style/definitions.py

from enum import Enum, IntEnum
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

class AttributeKey(str, Enum):
    """Keys of the attribute mapping. Values are the plain string keys."""
    FONT = 'font'
    FOREGROUND_COLOR = 'foregroundColor'
    BACKGROUND_COLOR = 'backgroundColor'
    STROKE_COLOR = 'strokeColor'
    STROKE_WIDTH = 'strokeWidth'
    STRIKETHROUGH_COLOR = 'strikethroughColor'
    STRIKETHROUGH_STYLE = 'strikethroughStyle'
    UNDERLINE_COLOR = 'underlineColor'
    UNDERLINE_STYLE = 'underlineStyle'
    BASELINE_OFFSET = 'baselineOffset'
    TEXT_EFFECT = 'textEffect'
    SHADOW = 'shadow'
    KERN = 'kern'
    LIGATURE = 'ligature'
    PARAGRAPH_STYLE = 'paragraphStyle'

class TextAlignment(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2
    JUSTIFIED = 3
    NATURAL = 4

class WritingDirection(IntEnum):
    NATURAL = -1
    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1

class LineBreakMode(IntEnum):
    BY_WORD_WRAPPING = 0
    BY_CHAR_WRAPPING = 1
    BY_CLIPPING = 2
    BY_TRUNCATING_HEAD = 3
    BY_TRUNCATING_TAIL = 4
    BY_TRUNCATING_MIDDLE = 5

class UnderlineStyle(IntEnum):
    """Line styles and pattern bits. Combine with `|` for a patterned line."""
    NONE = 0x00
    SINGLE = 0x01
    THICK = 0x02
    DOUBLE = 0x09
    PATTERN_DOT = 0x0100
    PATTERN_DASH = 0x0200
    PATTERN_DASH_DOT = 0x0300
    PATTERN_DASH_DOT_DOT = 0x0400
    BY_WORD = 0x8000

class TabAlignment(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2

TEXT_EFFECT_LETTERPRESS = 'letterpress'

@dataclass(frozen=True)
class Font:
    """Font descriptor stored under the font key."""
    family: str
    size: float = 12.0
    bold: bool = False
    italic: bool = False

@dataclass(frozen=True)
class Shadow:
    """Shadow descriptor stored under the shadow key."""
    offset: Tuple[float, float] = (0.0, -3.0)
    blur_radius: float = 0.0
    color: Optional[Any] = None

@dataclass(frozen=True)
class TextTab:
    """A single tab stop."""
    location: float
    alignment: TabAlignment = TabAlignment.LEFT

@dataclass(frozen=True)
class ParagraphStyle:
    """
    Block-level layout record merged under the paragraph style key.
    All fields start at platform defaults. Frozen; the builder swaps in
    updated copies.
    """
    line_spacing: float = 0.0
    paragraph_spacing: float = 0.0
    paragraph_spacing_before: float = 0.0
    first_line_head_indent: float = 0.0
    head_indent: float = 0.0
    tail_indent: float = 0.0
    minimum_line_height: float = 0.0
    maximum_line_height: float = 0.0
    line_height_multiple: float = 0.0
    alignment: TextAlignment = TextAlignment.NATURAL
    base_writing_direction: WritingDirection = WritingDirection.NATURAL
    tab_stops: Tuple[TextTab, ...] = ()
    default_tab_interval: float = 0.0
    hyphenation_factor: float = 0.0
    line_break_mode: LineBreakMode = LineBreakMode.BY_WORD_WRAPPING

COLORS = {
    'GREEN': 'green3',
    'PINK': 'pink1',
    'BLUE': 'blue1',
    'GRAY': 'gray50',
    'YELLOW': 'yellow1',
    'WHITE': 'white'
}

@dataclass
class StyleDefinitions:
    """Named color palette and paragraph defaults used by output strategies."""
    colors: Dict[str, str] = field(default_factory=lambda: dict(COLORS))
    paragraph: ParagraphStyle = field(default_factory=ParagraphStyle)

    def get_color(self, value: Any) -> Any:
        """Resolve a palette name, passing anything else through."""
        if isinstance(value, str):
            return self.colors.get(value, value)
        return value

DEFAULT_DEFINITIONS = StyleDefinitions()
