# text.py

from types import MappingProxyType
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple, Union

from .style import AttributeStyle

@dataclass(frozen=True)
class Run:
    """A contiguous span of text sharing one attribute mapping."""
    text: str
    attributes: Mapping[str, Any]

class StyledText:
    """
    Immutable text made of styled runs.

    Concatenation with `+` appends the right operand's runs after the left
    operand's; adjacent runs with equal attributes merge into one.
    """
    __slots__ = ('_runs',)

    def __init__(self, text: str = "", attributes: Optional[Mapping[str, Any]] = None):
        runs = (Run(text, MappingProxyType(dict(attributes or {}))),) if text else ()
        object.__setattr__(self, '_runs', runs)

    @classmethod
    def from_runs(cls, runs: Iterable[Run]) -> 'StyledText':
        merged = []
        for run in runs:
            if not run.text:
                continue
            if merged and dict(merged[-1].attributes) == dict(run.attributes):
                merged[-1] = Run(merged[-1].text + run.text, merged[-1].attributes)
            else:
                merged.append(run)
        result = cls()
        object.__setattr__(result, '_runs', tuple(merged))
        return result

    @classmethod
    def empty(cls) -> 'StyledText':
        return EMPTY

    @property
    def runs(self) -> Tuple[Run, ...]:
        return self._runs

    @property
    def plain(self) -> str:
        return ''.join(run.text for run in self._runs)

    def __setattr__(self, name, value):
        raise AttributeError("StyledText is immutable")

    def __copy__(self) -> 'StyledText':
        return self

    def __deepcopy__(self, memo) -> 'StyledText':
        return self

    def __reduce__(self):
        # MappingProxyType doesn't pickle, so runs travel as plain dicts
        return (_restore, (tuple((run.text, dict(run.attributes)) for run in self._runs),))

    def __add__(self, other: 'StyledText') -> 'StyledText':
        if not isinstance(other, StyledText):
            return NotImplemented
        return StyledText.from_runs(self._runs + other._runs)

    def __eq__(self, other) -> bool:
        if not isinstance(other, StyledText):
            return NotImplemented
        return self._runs == other._runs

    __hash__ = None

    def __iter__(self) -> Iterator[Run]:
        return iter(self._runs)

    def __len__(self) -> int:
        return sum(len(run.text) for run in self._runs)

    def __str__(self) -> str:
        return self.plain

    def __repr__(self) -> str:
        return f"StyledText({self.plain!r}, runs={len(self._runs)})"

EMPTY = StyledText()

def _restore(pairs: Tuple[Tuple[str, Mapping[str, Any]], ...]) -> StyledText:
    return StyledText.from_runs(Run(text, MappingProxyType(dict(attributes)))
                                for text, attributes in pairs)

def with_style(text: str, style: Union[AttributeStyle, Mapping[str, Any]]) -> StyledText:
    """Pair literal text with a built attribute mapping, building a builder first."""
    if isinstance(style, AttributeStyle):
        return StyledText(text, style.build())
    if isinstance(style, Mapping):
        return StyledText(text, style)
    raise TypeError(f"Expected AttributeStyle or mapping, got {type(style).__name__}")
