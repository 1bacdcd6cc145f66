# test_strategies.py

import logging
import pytest
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rich.color import Color as RichColor
from rich.color import ColorParseError
from rich.text import Text
from prompt_toolkit.formatted_text import FormattedText

from attrstyle import (
    EMPTY, AttributeStyle, Color, Font, LineBreakMode, ParagraphStyle,
    PromptToolkitStrategy, RichStrategy, Style, StyleDefinitions, Tab,
    TextAlignment, UnderlineStyle, WritingDirection, with_style
)


class MockLogger:
    def __init__(self):
        self.debug = Mock()
        self.info = Mock()
        self.warning = Mock()
        self.error = Mock()


class TestRichStrategy:
    """Test suite for conversion into rich Text."""

    def setup_method(self):
        """Set up a strategy with a mock logger before each test method."""
        self.logger = MockLogger()
        self.strategy = RichStrategy(logger=self.logger)

    def test_runs_become_spans(self):
        styled = (with_style("A", AttributeStyle().color(Color.foreground('red')))
                  + with_style("B", AttributeStyle().color(Color.background('#0000ff'))))
        text = self.strategy.format(styled)
        assert isinstance(text, Text)
        assert text.plain == "AB"
        assert [(span.start, span.end) for span in text.spans] == [(0, 1), (1, 2)]
        assert text.spans[0].style.color == RichColor.parse('red')
        assert text.spans[1].style.bgcolor == RichColor.parse('#0000ff')

    def test_font_and_line_styles(self):
        style = (AttributeStyle()
                 .font(Font('Menlo', bold=True, italic=True))
                 .style(Style.underline(UnderlineStyle.SINGLE))
                 .style(Style.strikethrough(UnderlineStyle.THICK)))
        span_style = self.strategy.format(with_style("x", style)).spans[0].style
        assert span_style.bold is True
        assert span_style.italic is True
        assert span_style.underline is True
        assert span_style.strike is True

    def test_double_underline(self):
        style = AttributeStyle().style(Style.underline(UnderlineStyle.DOUBLE))
        span_style = self.strategy.format(with_style("x", style)).spans[0].style
        assert span_style.underline2 is True
        assert not span_style.underline

    def test_palette_names_resolve(self):
        style = AttributeStyle().color(Color.foreground('GREEN'))
        span_style = self.strategy.format(with_style("x", style)).spans[0].style
        assert span_style.color == RichColor.parse('green3')

    def test_custom_definitions(self):
        strategy = RichStrategy(StyleDefinitions(colors={'BRAND': '#123456'}), self.logger)
        style = AttributeStyle().color(Color.foreground('BRAND'))
        span_style = strategy.format(with_style("x", style)).spans[0].style
        assert span_style.color == RichColor.parse('#123456')

    def test_paragraph_settings(self):
        style = (AttributeStyle()
                 .alignment(TextAlignment.CENTER)
                 .break_mode(LineBreakMode.BY_TRUNCATING_TAIL)
                 .tab(Tab.default_interval(4)))
        text = self.strategy.format(with_style("x", style))
        assert text.justify == 'center'
        assert text.overflow == 'ellipsis'
        assert text.no_wrap is True
        assert text.tab_size == 4

    def test_unstyled_run_has_no_span(self):
        text = self.strategy.format(with_style("plain", AttributeStyle()))
        assert text.plain == "plain"
        assert text.spans == []

    def test_empty_text(self):
        assert self.strategy.format(EMPTY).plain == ""

    def test_unsupported_attributes_are_logged(self):
        style = AttributeStyle().kern(2).color(Color.stroke('red'))
        self.strategy.format(with_style("x", style))
        self.logger.debug.assert_called_once()
        message = self.logger.debug.call_args[0][0]
        assert 'kern' in message and 'strokeColor' in message

    def test_unsupported_paragraph_fields_are_logged(self):
        style = (AttributeStyle()
                 .alignment(TextAlignment.CENTER)
                 .hyphenation(0.5)
                 .writing_direction(WritingDirection.RIGHT_TO_LEFT))
        self.strategy.format(with_style("x", style))
        self.logger.debug.assert_called_once()
        message = self.logger.debug.call_args[0][0]
        assert message.endswith("skipping paragraph fields: base_writing_direction, hyphenation_factor")

    def test_later_paragraph_styles_are_logged(self):
        styled = (with_style("a", AttributeStyle().alignment(TextAlignment.LEFT))
                  + with_style("b", AttributeStyle().alignment(TextAlignment.RIGHT)))
        text = self.strategy.format(styled)
        assert text.justify == "left"
        messages = [call[0][0] for call in self.logger.debug.call_args_list]
        assert any("dropping paragraph styles of 1 later runs" in m for m in messages)

    def test_default_logger_is_shared(self):
        for _ in range(50):
            RichStrategy()
            PromptToolkitStrategy()
        assert len(logging.getLogger("attrstyle.strategies").handlers) <= 1
        assert RichStrategy().logger is PromptToolkitStrategy().logger

    def test_invalid_color_propagates(self):
        style = AttributeStyle().color(Color.foreground('not-a-color'))
        with pytest.raises(ColorParseError):
            self.strategy.format(with_style("x", style))


class TestPromptToolkitStrategy:
    """Test suite for conversion into prompt_toolkit fragments."""

    def setup_method(self):
        self.strategy = PromptToolkitStrategy(logger=MockLogger())

    def test_fragments_per_run(self):
        styled = (with_style("A", AttributeStyle()
                             .color(Color.foreground('#ff0000'))
                             .font(Font('Menlo', bold=True)))
                  + with_style("B", AttributeStyle()
                               .color(Color.background('#00ff00'))
                               .style(Style.underline(UnderlineStyle.SINGLE))))
        result = self.strategy.format(styled)
        assert isinstance(result, FormattedText)
        assert list(result) == [
            ("fg:#ff0000 bold", "A"),
            ("bg:#00ff00 underline", "B"),
        ]

    def test_unstyled_run(self):
        assert list(self.strategy.format(with_style("x", {}))) == [("", "x")]

    def test_strikethrough_and_italic(self):
        style = (AttributeStyle()
                 .font(Font('Menlo', italic=True))
                 .style(Style.strikethrough(UnderlineStyle.SINGLE)))
        assert list(self.strategy.format(with_style("x", style))) == [("italic strike", "x")]

    def test_paragraph_fields_are_logged(self):
        logger = MockLogger()
        strategy = PromptToolkitStrategy(logger=logger)
        strategy.format(with_style("x", AttributeStyle().alignment(TextAlignment.CENTER)))
        message = logger.debug.call_args[0][0]
        assert "skipping paragraph fields: alignment" in message

    def test_default_paragraph_comes_from_definitions(self):
        definitions = StyleDefinitions(paragraph=ParagraphStyle(alignment=TextAlignment.RIGHT))
        strategy = RichStrategy(definitions, MockLogger())
        assert strategy.format(with_style("x", {})).justify == 'right'


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
