# style/__init__.py

from .definitions import (
    AttributeKey, Font, LineBreakMode, ParagraphStyle, Shadow, StyleDefinitions,
    TabAlignment, TextAlignment, TextTab, UnderlineStyle, WritingDirection,
    DEFAULT_DEFINITIONS, TEXT_EFFECT_LETTERPRESS
)
from .variants import (
    Color, Indent, LineHeight, ParagraphSpacing, Spacing, Style, Tab
)
from .builder import AttributeStyle

__all__ = [
    'AttributeStyle', 'AttributeKey', 'ParagraphStyle', 'StyleDefinitions',
    'DEFAULT_DEFINITIONS', 'Font', 'Shadow', 'TextTab', 'TextAlignment',
    'WritingDirection', 'LineBreakMode', 'UnderlineStyle', 'TabAlignment',
    'TEXT_EFFECT_LETTERPRESS', 'Color', 'Spacing', 'ParagraphSpacing',
    'LineHeight', 'Indent', 'Tab', 'Style'
]
