# style/builder.py

from dataclasses import replace
from typing import Any, Dict

from ..logger import Logger
from ..utils import map_items, points
from .definitions import (
    AttributeKey, Font, LineBreakMode, ParagraphStyle, Shadow,
    TextAlignment, WritingDirection
)
from .variants import (
    Color, Indent, LineHeight, ParagraphSpacing, Spacing, Style, Tab
)

logger = Logger(__name__)

COLOR_KEYS = {
    Color.Kind.FOREGROUND: AttributeKey.FOREGROUND_COLOR,
    Color.Kind.BACKGROUND: AttributeKey.BACKGROUND_COLOR,
    Color.Kind.STROKE: AttributeKey.STROKE_COLOR,
    Color.Kind.STRIKETHROUGH: AttributeKey.STRIKETHROUGH_COLOR,
    Color.Kind.UNDERLINE: AttributeKey.UNDERLINE_COLOR
}

STYLE_KEYS = {
    Style.Kind.STRIKETHROUGH: AttributeKey.STRIKETHROUGH_STYLE,
    Style.Kind.UNDERLINE: AttributeKey.UNDERLINE_STYLE
}

PARAGRAPH_SPACING_FIELDS = {
    ParagraphSpacing.Kind.BEFORE: 'paragraph_spacing_before',
    ParagraphSpacing.Kind.AFTER: 'paragraph_spacing'
}

INDENT_FIELDS = {
    Indent.Kind.FIRST_LINE: 'first_line_head_indent',
    Indent.Kind.HEAD: 'head_indent',
    Indent.Kind.TAIL: 'tail_indent'
}

LINE_HEIGHT_FIELDS = {
    LineHeight.Kind.MINIMUM: 'minimum_line_height',
    LineHeight.Kind.MAXIMUM: 'maximum_line_height',
    LineHeight.Kind.MULTIPLE: 'line_height_multiple'
}

class AttributeStyle:
    """
    Fluent builder for a text attribute mapping.

    Character-level options go straight into the attribute mapping; paragraph
    options go into a ParagraphStyle that is merged under the paragraph style
    key only when the mapping is built. Every configuration method returns
    the builder so calls chain:

        attrs = (AttributeStyle()
                 .font(Font('Menlo', 14))
                 .color(Color.foreground('red'))
                 .spacing(Spacing.line(4))
                 .build())
    """
    def __init__(self):
        self._styles: Dict[AttributeKey, Any] = {}
        self._paragraph = ParagraphStyle()

    def font(self, font: Font) -> 'AttributeStyle':
        self._styles[AttributeKey.FONT] = font
        return self

    def color(self, color: Color) -> 'AttributeStyle':
        self._styles[COLOR_KEYS[color.kind]] = color.value
        return self

    def spacing(self, spacing: Spacing) -> 'AttributeStyle':
        if spacing.kind is Spacing.Kind.LINE:
            self._set_paragraph(line_spacing=points(spacing.value))
        else:
            field_name = PARAGRAPH_SPACING_FIELDS[spacing.value.kind]
            self._set_paragraph(**{field_name: points(spacing.value.value)})
        return self

    def line_height(self, line_height: LineHeight) -> 'AttributeStyle':
        self._set_paragraph(**{LINE_HEIGHT_FIELDS[line_height.kind]: points(line_height.value)})
        return self

    def indent(self, indent: Indent) -> 'AttributeStyle':
        self._set_paragraph(**{INDENT_FIELDS[indent.kind]: points(indent.value)})
        return self

    def alignment(self, alignment: TextAlignment) -> 'AttributeStyle':
        self._set_paragraph(alignment=alignment)
        return self

    def writing_direction(self, direction: WritingDirection) -> 'AttributeStyle':
        self._set_paragraph(base_writing_direction=direction)
        return self

    def tab(self, tab: Tab) -> 'AttributeStyle':
        if tab.kind is Tab.Kind.STOPS:
            self._set_paragraph(tab_stops=tab.value)
        else:
            self._set_paragraph(default_tab_interval=points(tab.value))
        return self

    def hyphenation(self, factor: float) -> 'AttributeStyle':
        self._set_paragraph(hyphenation_factor=factor)
        return self

    def style(self, style: Style) -> 'AttributeStyle':
        self._styles[STYLE_KEYS[style.kind]] = style.value
        return self

    def break_mode(self, mode: LineBreakMode) -> 'AttributeStyle':
        self._set_paragraph(line_break_mode=mode)
        return self

    def stroke_width(self, width: float) -> 'AttributeStyle':
        self._styles[AttributeKey.STROKE_WIDTH] = points(width)
        return self

    def baseline_offset(self, offset: float) -> 'AttributeStyle':
        self._styles[AttributeKey.BASELINE_OFFSET] = points(offset)
        return self

    def text_effect(self, effect: str) -> 'AttributeStyle':
        self._styles[AttributeKey.TEXT_EFFECT] = effect
        return self

    def shadow(self, shadow: Shadow) -> 'AttributeStyle':
        self._styles[AttributeKey.SHADOW] = shadow
        return self

    def kern(self, kern: float) -> 'AttributeStyle':
        self._styles[AttributeKey.KERN] = points(kern)
        return self

    def ligature(self, ligature: int) -> 'AttributeStyle':
        self._styles[AttributeKey.LIGATURE] = ligature
        return self

    def _set_paragraph(self, **changes) -> None:
        self._paragraph = replace(self._paragraph, **changes)

    def build_keyed(self) -> Dict[AttributeKey, Any]:
        """Return the attribute mapping keyed by AttributeKey."""
        styles = dict(self._styles)
        styles[AttributeKey.PARAGRAPH_STYLE] = self._paragraph
        logger.debug(f"Built attribute mapping with {len(styles)} keys")
        return styles

    def build(self) -> Dict[str, Any]:
        """Return the attribute mapping keyed by plain attribute names."""
        return map_items(self.build_keyed(), lambda key, value: (key.value, value))
