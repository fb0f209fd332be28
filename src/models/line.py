"""
Per-line alignment models

A Line carries one input line through the alignment passes: the consumed
and formatted prefix grows in `result` while the untouched suffix shrinks in
`buffer`.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class MatchResult:
    """
    First occurrence of a separator within a buffer

    Attributes:
        pre: Text before the separator
        separator: The matched separator text
        post: Text after the separator

    Example:
        Buffer "John@Doe@1200" matched against "@":
        MatchResult(pre="John", separator="@", post="Doe@1200")
    """
    pre: str
    separator: str
    post: str


@dataclass
class Line:
    """
    One logical input line and its alignment progress

    Attributes:
        original: Text as read, newline removed (never modified)
        buffer: Remaining unconsumed suffix
        result: Accumulated formatted prefix
        match: Match found in the current pass, None when the line did not
               match; cleared at the start of every pass
    """
    original: str
    buffer: str = ""
    result: str = ""
    match: Optional[MatchResult] = field(default=None)

    @classmethod
    def line_create(cls, text: str, tab_size: int = 8) -> "Line":
        """Build a Line from raw input, dropping the newline and expanding tabs"""
        original = text.rstrip("\r\n")
        return cls(original=original, buffer=original.expandtabs(tab_size))

    def match_clear(self) -> None:
        self.match = None

    def buffer_flush(self) -> None:
        """Move whatever is left of the buffer into the result"""
        self.result += self.buffer
        self.buffer = ""

    def text_final(self) -> str:
        return (self.result + self.buffer).rstrip()


class BatchState(Enum):
    """Lifecycle of one alignment unit"""
    EMPTY = "empty"
    COLLECTING = "collecting"
    PROCESSING = "processing"
    FLUSHED = "flushed"


@dataclass(frozen=True)
class InputRecord:
    """
    One event from the input reader

    Either a line of text read from `source`, or a boundary marker that ends
    the current alignment unit (text is None).
    """
    text: Optional[str]
    source: str = "-"

    @property
    def boundary(self) -> bool:
        return self.text is None
