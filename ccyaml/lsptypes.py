"""Language-server protocol value types shared across the package."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Union


@dataclass(frozen=True, order=True)
class Position:
    """A zero-based line and character offset inside a document."""

    line: int = 0
    character: int = 0


@dataclass(frozen=True)
class Range:
    """A span between two positions of a document."""

    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    def contains(self, pos: Position) -> bool:
        """Tell whether ``pos`` lies inside this range, bounds included."""
        return self.start <= pos <= self.end


class DiagnosticSeverity(IntEnum):
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4

    def __str__(self) -> str:
        return self.name.capitalize()


class DiagnosticTag(IntEnum):
    UNNECESSARY = 1
    DEPRECATED = 2


@dataclass
class Diagnostic:
    """A problem reported on a range of a document."""

    range: Range = field(default_factory=Range)
    message: str = ""
    severity: Optional[DiagnosticSeverity] = None
    code: Optional[Union[int, str]] = None
    source: str = ""
    tags: list[DiagnosticTag] = field(default_factory=list)
    data: Any = None


class CompletionItemKind(IntEnum):
    TEXT = 1
    METHOD = 2
    FUNCTION = 3
    CONSTRUCTOR = 4
    FIELD = 5
    VARIABLE = 6
    CLASS = 7
    INTERFACE = 8
    MODULE = 9
    PROPERTY = 10
    UNIT = 11
    VALUE = 12
    ENUM = 13
    KEYWORD = 14
    SNIPPET = 15
    COLOR = 16
    FILE = 17
    REFERENCE = 18
    FOLDER = 19
    ENUM_MEMBER = 20
    CONSTANT = 21
    STRUCT = 22
    EVENT = 23
    OPERATOR = 24
    TYPE_PARAMETER = 25


@dataclass
class CompletionItem:
    """A completion proposal offered to the editor."""

    label: str
    kind: Optional[CompletionItemKind] = None
    insert_text: str = ""
    detail: str = ""
    documentation: str = ""


@dataclass
class TextAndRange:
    """A piece of text together with where it sits in the document."""

    text: str = ""
    range: Range = field(default_factory=Range)


def pos_in_range(rng: Range, pos: Position) -> bool:
    """Tell whether ``pos`` lies inside ``rng``, bounds included."""
    return rng.contains(pos)


def ranges_equal(a: Range, b: Range) -> bool:
    """Tell whether two ranges cover exactly the same span."""
    return a.start == b.start and a.end == b.end