# style/variants.py

"""
Tagged option values accepted by the builder.

Each variant pairs a kind with one value; the builder dispatches on the kind
to pick the attribute key or paragraph field it writes.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Sequence

from .definitions import TextTab, UnderlineStyle

@dataclass(frozen=True)
class Color:
    class Kind(Enum):
        FOREGROUND = 'foreground'
        BACKGROUND = 'background'
        STROKE = 'stroke'
        STRIKETHROUGH = 'strikethrough'
        UNDERLINE = 'underline'

    kind: Kind
    value: Any

    @classmethod
    def foreground(cls, value: Any) -> 'Color':
        return cls(cls.Kind.FOREGROUND, value)

    @classmethod
    def background(cls, value: Any) -> 'Color':
        return cls(cls.Kind.BACKGROUND, value)

    @classmethod
    def stroke(cls, value: Any) -> 'Color':
        return cls(cls.Kind.STROKE, value)

    @classmethod
    def strikethrough(cls, value: Any) -> 'Color':
        return cls(cls.Kind.STRIKETHROUGH, value)

    @classmethod
    def underline(cls, value: Any) -> 'Color':
        return cls(cls.Kind.UNDERLINE, value)

@dataclass(frozen=True)
class ParagraphSpacing:
    class Kind(Enum):
        BEFORE = 'before'
        AFTER = 'after'

    kind: Kind
    value: float

    @classmethod
    def before(cls, value: float) -> 'ParagraphSpacing':
        return cls(cls.Kind.BEFORE, value)

    @classmethod
    def after(cls, value: float) -> 'ParagraphSpacing':
        return cls(cls.Kind.AFTER, value)

@dataclass(frozen=True)
class Spacing:
    """Line spacing, or paragraph spacing wrapping a ParagraphSpacing."""
    class Kind(Enum):
        LINE = 'line'
        PARAGRAPH = 'paragraph'

    kind: Kind
    value: Any

    @classmethod
    def line(cls, value: float) -> 'Spacing':
        return cls(cls.Kind.LINE, value)

    @classmethod
    def paragraph(cls, value: ParagraphSpacing) -> 'Spacing':
        return cls(cls.Kind.PARAGRAPH, value)

@dataclass(frozen=True)
class LineHeight:
    class Kind(Enum):
        MINIMUM = 'minimum'
        MAXIMUM = 'maximum'
        MULTIPLE = 'multiple'

    kind: Kind
    value: float

    @classmethod
    def minimum(cls, value: float) -> 'LineHeight':
        return cls(cls.Kind.MINIMUM, value)

    @classmethod
    def maximum(cls, value: float) -> 'LineHeight':
        return cls(cls.Kind.MAXIMUM, value)

    @classmethod
    def multiple(cls, value: float) -> 'LineHeight':
        return cls(cls.Kind.MULTIPLE, value)

@dataclass(frozen=True)
class Indent:
    class Kind(Enum):
        FIRST_LINE = 'first_line'
        HEAD = 'head'
        TAIL = 'tail'

    kind: Kind
    value: float

    @classmethod
    def first_line(cls, value: float) -> 'Indent':
        return cls(cls.Kind.FIRST_LINE, value)

    @classmethod
    def head(cls, value: float) -> 'Indent':
        return cls(cls.Kind.HEAD, value)

    @classmethod
    def tail(cls, value: float) -> 'Indent':
        return cls(cls.Kind.TAIL, value)

@dataclass(frozen=True)
class Tab:
    class Kind(Enum):
        STOPS = 'stops'
        DEFAULT_INTERVAL = 'default_interval'

    kind: Kind
    value: Any

    @classmethod
    def stops(cls, value: Sequence[TextTab]) -> 'Tab':
        return cls(cls.Kind.STOPS, tuple(value))

    @classmethod
    def default_interval(cls, value: float) -> 'Tab':
        return cls(cls.Kind.DEFAULT_INTERVAL, value)

@dataclass(frozen=True)
class Style:
    """Underline or strikethrough line style."""
    class Kind(Enum):
        STRIKETHROUGH = 'strikethrough'
        UNDERLINE = 'underline'

    kind: Kind
    value: UnderlineStyle

    @classmethod
    def strikethrough(cls, value: UnderlineStyle) -> 'Style':
        return cls(cls.Kind.STRIKETHROUGH, value)

    @classmethod
    def underline(cls, value: UnderlineStyle) -> 'Style':
        return cls(cls.Kind.UNDERLINE, value)
