"""
Pattern specification and alignment configuration models

Defines how a user-supplied separator is described (PatternSpec), how it
looks once compiled (Pattern), and the immutable bundle of options the
Aligner runs with (AlignConfig).
"""

from enum import Enum
from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..lib.matcher import Matcher


class MatcherKind(Enum):
    """How the pattern text is interpreted"""
    LITERAL = "literal"    # -F, exact substring
    REGEX = "regex"        # -P, regular expression


class AlignSide(Enum):
    """Where padding goes relative to the separator"""
    BEFORE = "before"      # -b, pad then emit separator
    AFTER = "after"        # -a, emit separator then pad


class Justify(Enum):
    """Placement of a short separator within the widest one of a pass"""
    LEFT = "left"          # -l, pad on the right
    RIGHT = "right"        # -r, pad on the left


@dataclass(frozen=True)
class PatternSpec:
    """
    A separator pattern as declared on the command line

    Each spec remembers the matcher kind, side and justification that were
    active when it was declared.

    Attributes:
        text: Raw pattern string
        kind: Literal substring or regular expression
        side: Align before or after the separator
        justify: Left or right justification of the separator itself
        skip: Consume the match without aligning on it

    Example:
        colalign -F -e '=' -P -s '^\\s*#'
        -> PatternSpec(text="=", kind=LITERAL, ...)
           PatternSpec(text="^\\s*#", kind=REGEX, skip=True, ...)
    """
    text: str
    kind: MatcherKind = MatcherKind.REGEX
    side: AlignSide = AlignSide.BEFORE
    justify: Justify = Justify.LEFT
    skip: bool = False


@dataclass(frozen=True)
class Pattern:
    """
    A compiled pattern: its spec plus the matcher built from it

    Created once at startup by matcher.pattern_compile(); immutable thereafter.
    """
    spec: PatternSpec
    matcher: "Matcher"

    @property
    def skip(self) -> bool:
        return self.spec.skip

    @property
    def side(self) -> AlignSide:
        return self.spec.side

    @property
    def justify(self) -> Justify:
        return self.spec.justify


@dataclass(frozen=True)
class AlignConfig:
    """
    Immutable alignment configuration handed to the Aligner

    Attributes:
        patterns: Compiled patterns, applied in declaration order
        repeat: Sweep the pattern list until nothing matches any more
        tab_size: Tab stop width for tab expansion
        spaces_before: Spaces inserted before the separator (align-before)
        spaces_after: Spaces inserted after the separator
    """
    patterns: Tuple[Pattern, ...]
    repeat: bool = False
    tab_size: int = 8
    spaces_before: int = 1
    spaces_after: int = 1

