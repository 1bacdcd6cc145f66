# strategies.py

from dataclasses import fields
from rich.text import Text
from rich.color import Color as RichColor
from rich.style import Style as RichStyle
from prompt_toolkit.formatted_text import FormattedText
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .logger import Logger
from .text import StyledText
from .style import (
    AttributeKey, Font, LineBreakMode, ParagraphStyle, StyleDefinitions,
    TextAlignment, UnderlineStyle, DEFAULT_DEFINITIONS
)

JUSTIFY = {
    TextAlignment.LEFT: 'left',
    TextAlignment.CENTER: 'center',
    TextAlignment.RIGHT: 'right',
    TextAlignment.JUSTIFIED: 'full'
}

# (overflow, no_wrap); word wrapping is rich's default behavior
OVERFLOW = {
    LineBreakMode.BY_CHAR_WRAPPING: ('fold', False),
    LineBreakMode.BY_CLIPPING: ('crop', True),
    LineBreakMode.BY_TRUNCATING_HEAD: ('ellipsis', True),
    LineBreakMode.BY_TRUNCATING_TAIL: ('ellipsis', True),
    LineBreakMode.BY_TRUNCATING_MIDDLE: ('ellipsis', True)
}

# Character attributes a terminal can show
HANDLED_KEYS = {
    AttributeKey.FONT.value,
    AttributeKey.FOREGROUND_COLOR.value,
    AttributeKey.BACKGROUND_COLOR.value,
    AttributeKey.UNDERLINE_STYLE.value,
    AttributeKey.STRIKETHROUGH_STYLE.value,
    AttributeKey.PARAGRAPH_STYLE.value
}

DEFAULT_PARAGRAPH = ParagraphStyle()

default_logger = Logger(__name__)

class DisplayStrategy:
    """
    Base for strategies that hand styled text to a rich-text consumer API.
    Subclasses implement format().
    """
    # Paragraph fields the consumer API can express
    PARAGRAPH_FIELDS = frozenset()

    def __init__(self, definitions: Optional[StyleDefinitions] = None,
                 logger: Optional[Logger] = None):
        """
        Args:
            definitions: Color palette and paragraph defaults
            logger: Logger for skipped attributes
        """
        self.definitions = definitions or DEFAULT_DEFINITIONS
        self.logger = logger or default_logger

    def format(self, content: StyledText) -> Any:
        raise NotImplementedError

    def resolve_color(self, value: Any) -> Optional[RichColor]:
        """Parse a color value into a rich Color, None for unset or default."""
        if value is None:
            return None
        value = self.definitions.get_color(value)
        color = value if isinstance(value, RichColor) else RichColor.parse(str(value))
        return None if color.is_default else color

    def character_flags(self, attributes: Mapping[str, Any]) -> Dict[str, bool]:
        """Collect the boolean text flags shared by every terminal API."""
        font = attributes.get(AttributeKey.FONT.value)
        underline = int(attributes.get(AttributeKey.UNDERLINE_STYLE.value) or 0)
        strike = int(attributes.get(AttributeKey.STRIKETHROUGH_STYLE.value) or 0)
        self._log_skipped(attributes)
        return {
            'bold': bool(isinstance(font, Font) and font.bold),
            'italic': bool(isinstance(font, Font) and font.italic),
            'underline': bool(underline),
            'double_underline': (underline & UnderlineStyle.DOUBLE) == UnderlineStyle.DOUBLE,
            'strike': bool(strike)
        }

    def paragraph_of(self, content: StyledText) -> ParagraphStyle:
        """
        Return the first run's paragraph style, or the configured default.

        The consumer APIs take one paragraph setting per text, so differing
        paragraph styles on later runs are dropped and logged, as are
        paragraph fields this strategy has no equivalent for.
        """
        paragraphs = [
            run.attributes[AttributeKey.PARAGRAPH_STYLE.value] for run in content
            if isinstance(run.attributes.get(AttributeKey.PARAGRAPH_STYLE.value), ParagraphStyle)
        ]
        if not paragraphs:
            return self.definitions.paragraph
        paragraph = paragraphs[0]
        dropped = sum(1 for other in paragraphs[1:] if other != paragraph)
        if dropped:
            self.logger.debug(
                f"{type(self).__name__} dropping paragraph styles of {dropped} later runs"
            )
        skipped = [
            f.name for f in fields(paragraph)
            if f.name not in self.PARAGRAPH_FIELDS
            and getattr(paragraph, f.name) != getattr(DEFAULT_PARAGRAPH, f.name)
        ]
        if skipped:
            self.logger.debug(
                f"{type(self).__name__} skipping paragraph fields: {', '.join(skipped)}"
            )
        return paragraph

    def _log_skipped(self, attributes: Mapping[str, Any]) -> None:
        skipped = sorted(key for key in attributes if key not in HANDLED_KEYS)
        if skipped:
            self.logger.debug(f"{type(self).__name__} skipping attributes: {', '.join(skipped)}")

class RichStrategy(DisplayStrategy):
    """Formats styled text as a rich Text with one span per run."""
    PARAGRAPH_FIELDS = frozenset({'alignment', 'line_break_mode', 'default_tab_interval'})

    def format(self, content: StyledText) -> Text:
        paragraph = self.paragraph_of(content)
        overflow, no_wrap = OVERFLOW.get(paragraph.line_break_mode, (None, None))
        text = Text(
            justify=JUSTIFY.get(paragraph.alignment),
            overflow=overflow,
            no_wrap=no_wrap,
            tab_size=int(paragraph.default_tab_interval) or None
        )
        for run in content:
            style = self.to_style(run.attributes)
            text.append(run.text, style=style or None)
        return text

    def to_style(self, attributes: Mapping[str, Any]) -> RichStyle:
        """Translate one attribute mapping into a rich Style."""
        flags = self.character_flags(attributes)
        return RichStyle(
            color=self.resolve_color(attributes.get(AttributeKey.FOREGROUND_COLOR.value)),
            bgcolor=self.resolve_color(attributes.get(AttributeKey.BACKGROUND_COLOR.value)),
            bold=flags['bold'] or None,
            italic=flags['italic'] or None,
            underline=(flags['underline'] and not flags['double_underline']) or None,
            underline2=flags['double_underline'] or None,
            strike=flags['strike'] or None
        )

class PromptToolkitStrategy(DisplayStrategy):
    """Formats styled text as prompt_toolkit FormattedText fragments."""

    def format(self, content: StyledText) -> FormattedText:
        self.paragraph_of(content)
        fragments: List[Tuple[str, str]] = [
            (self.to_style_string(run.attributes), run.text) for run in content
        ]
        return FormattedText(fragments)

    def to_style_string(self, attributes: Mapping[str, Any]) -> str:
        """Translate one attribute mapping into a prompt_toolkit style string."""
        parts = []
        fg = self.resolve_color(attributes.get(AttributeKey.FOREGROUND_COLOR.value))
        bg = self.resolve_color(attributes.get(AttributeKey.BACKGROUND_COLOR.value))
        if fg is not None:
            parts.append(f"fg:{fg.get_truecolor().hex}")
        if bg is not None:
            parts.append(f"bg:{bg.get_truecolor().hex}")
        flags = self.character_flags(attributes)
        parts.extend(name for name in ('bold', 'italic', 'underline', 'strike') if flags[name])
        return ' '.join(parts)
