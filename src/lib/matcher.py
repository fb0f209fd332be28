"""
Separator matchers

Turns a PatternSpec into something that can find the first occurrence of
the separator inside a line buffer. There are exactly two kinds:

- LiteralMatcher: exact substring search, no special characters
- RegexMatcher: Python regular expression, leftmost match

Both expose a single operation, find_first(), returning a MatchResult or
None when the buffer does not contain the separator.

Example:
    >>> pattern = pattern_compile(PatternSpec("@", kind=MatcherKind.LITERAL))
    >>> pattern.matcher.find_first("John@Doe@1200")
    MatchResult(pre='John', separator='@', post='Doe@1200')
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from ..models.line import MatchResult
from ..models.pattern import MatcherKind, Pattern, PatternSpec


class PatternError(Exception):
    """Raised when a pattern is empty or is not a valid regular expression"""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern '{pattern}': {reason}")


class Matcher(ABC):
    """Finds the first occurrence of a separator in a buffer"""

    @abstractmethod
    def find_first(self, buffer: str) -> Optional[MatchResult]:
        """
        Locate the leftmost separator occurrence.

        Args:
            buffer: Remaining unconsumed text of a line

        Returns:
            MatchResult(pre, separator, post) or None if not found
        """


class LiteralMatcher(Matcher):
    """Exact substring matcher (-F)"""

    def __init__(self, text: str) -> None:
        self.text = text

    def find_first(self, buffer: str) -> Optional[MatchResult]:
        pre, found, post = buffer.partition(self.text)
        if not found:
            return None
        return MatchResult(pre=pre, separator=found, post=post)

    def __repr__(self) -> str:
        return f"LiteralMatcher({self.text!r})"


class RegexMatcher(Matcher):
    """Regular expression matcher (-P)"""

    def __init__(self, text: str) -> None:
        try:
            self.regex = re.compile(text)
        except re.error as e:
            raise PatternError(text, str(e)) from e

    def find_first(self, buffer: str) -> Optional[MatchResult]:
        match = self.regex.search(buffer)
        if match is None:
            return None
        return MatchResult(
            pre=buffer[:match.start()],
            separator=match.group(0),
            post=buffer[match.end():],
        )

    def __repr__(self) -> str:
        return f"RegexMatcher({self.regex.pattern!r})"


def matcher_create(text: str, kind: MatcherKind) -> Matcher:
    """
    Build the matcher for a pattern string.

    Raises:
        PatternError: Empty pattern, or invalid regular expression syntax
    """
    if not text:
        raise PatternError(text, "empty pattern")
    if kind is MatcherKind.LITERAL:
        return LiteralMatcher(text)
    return RegexMatcher(text)


def pattern_compile(spec: PatternSpec) -> Pattern:
    """Compile a declared PatternSpec into an immutable Pattern"""
    return Pattern(spec=spec, matcher=matcher_create(spec.text, spec.kind))
