"""
Column alignment engine

Aligns separators vertically across the lines of one unit (a file, or the
whole input stream).

The engine works in passes. Each pass takes one pattern and:
1. Matching: find the first separator occurrence in every line's buffer
2. Padding: grow every matching line's result to a common width
3. Consuming: move pre-match text and separator into the result, keep the
   post-match text in the buffer for the next pass

Lines that do not match a pattern take no part in that pass's width
computation and keep their buffer for later passes. A pass that matches
no line at all flushes every remaining buffer into its result.

Example:
    >>> config = AlignConfig(patterns=(pattern_compile(PatternSpec("@")),))
    >>> Aligner(config).align(["John Jacob@Jingleheimerschmidt@5300", "John@Doe@1200"])
    ['John Jacob @ Jingleheimerschmidt@5300', 'John       @ Doe@1200']
"""

from typing import Iterable, List

from ..models.line import BatchState, InputRecord, Line
from ..models.pattern import AlignConfig, AlignSide, Justify, Pattern
from .log import LOG


class Aligner:
    """
    Aligns one batch of lines at a time

    Responsibilities:
    - Collect the lines of a unit
    - Run one pass per pattern, or sweep repeatedly in repeat mode
    - Emit result + leftover buffer per line, trailing whitespace trimmed
    """

    def __init__(self, config: AlignConfig) -> None:
        """
        Initialize aligner

        Args:
            config: Compiled patterns and global alignment options
        """
        self.config = config
        self.lines: List[Line] = []
        self.state = BatchState.EMPTY

    def line_add(self, text: str) -> None:
        """Append one raw input line to the current batch"""
        if self.state is BatchState.PROCESSING:
            raise RuntimeError("Cannot add lines while a batch is being aligned")
        self.lines.append(Line.line_create(text, self.config.tab_size))
        self.state = BatchState.COLLECTING

    def record_feed(self, record: InputRecord) -> List[str]:
        """
        Consume one record from the input reader

        Lines are collected; a boundary record aligns and flushes the batch.

        Returns:
            Output lines of the flushed batch, or [] while still collecting
        """
        if record.boundary:
            return self.batch_flush()
        self.line_add(record.text)
        return []

    def align(self, texts: Iterable[str]) -> List[str]:
        """Align a complete unit in one call"""
        for text in texts:
            self.line_add(text)
        return self.batch_flush()

    def batch_flush(self) -> List[str]:
        """
        Align the collected batch and hand back its output

        Returns:
            One output line per input line, without newlines
        """
        if self.state is not BatchState.COLLECTING:
            return []

        self.state = BatchState.PROCESSING
        sweeps = self.batch_align()
        output = [line.text_final() for line in self.lines]
        self.state = BatchState.FLUSHED
        LOG(f"Aligned {len(self.lines)} lines in {sweeps} sweep(s)", level=2)

        self.lines = []
        self.state = BatchState.EMPTY
        return output

    def batch_align(self) -> int:
        """
        Run the configured passes over the batch

        Single mode runs every pattern once, in order. Repeat mode sweeps the
        pattern list until a whole sweep matches nothing, or until a sweep
        consumes no text (patterns that only match the empty string).

        Returns:
            Number of sweeps in which at least one pattern matched
        """
        patterns = self.config.patterns

        if not self.config.repeat:
            matched = [self.pass_run(pattern) for pattern in patterns]
            return 1 if any(matched) else 0

        sweeps = 0
        while True:
            remaining = self.buffers_measure()
            matched_any = False
            for pattern in patterns:
                if self.pass_run(pattern):
                    matched_any = True
            if not matched_any:
                break
            sweeps += 1
            if self.buffers_measure() == remaining:
                LOG("Sweep consumed no text, stopping repeat", level=3)
                break
        return sweeps

    def pass_run(self, pattern: Pattern) -> bool:
        """
        Apply one pattern to every line of the batch

        Args:
            pattern: Pattern to match and align on

        Returns:
            True if at least one line matched
        """
        for line in self.lines:
            line.match_clear()
            line.match = pattern.matcher.find_first(line.buffer)

        matching = [line for line in self.lines if line.match is not None]
        LOG(
            f"Pass {pattern.matcher!r}: {len(matching)}/{len(self.lines)} lines matched",
            level=3,
        )

        if not matching:
            for line in self.lines:
                line.buffer_flush()
            return False

        if pattern.skip:
            self.matches_skip(matching)
        elif pattern.side is AlignSide.BEFORE:
            self.matches_alignBefore(matching, pattern)
        else:
            self.matches_alignAfter(matching, pattern)
        return True

    def matches_skip(self, matching: List[Line]) -> None:
        """Consume the separator without any padding"""
        for line in matching:
            line.result += line.match.pre + line.match.separator
            line.buffer = line.match.post

    def matches_alignBefore(self, matching: List[Line], pattern: Pattern) -> None:
        """
        Pad the field before the separator so the separators line up

        Steps:
            pre-match text -> trim -> pad -> spaces before -> separator
            -> trim -> pad (aligns separator ends) -> spaces after
        """
        for line in matching:
            line.result += line.match.pre

        width = self.results_pad(matching)
        if width:
            self.results_extend(matching, self.config.spaces_before)

        separators = self.separators_justify(matching, pattern)
        for line, separator in zip(matching, separators):
            line.result += separator
            line.buffer = line.match.post

        width = self.results_pad(matching)
        if width:
            self.results_extend(matching, self.config.spaces_after)

        self.buffers_lstrip(matching)

    def matches_alignAfter(self, matching: List[Line], pattern: Pattern) -> None:
        """
        Pad after the separator so the following fields line up

        The separator follows its pre-match text directly; padding only
        happens once the separator has been appended.
        """
        separators = self.separators_justify(matching, pattern)
        for line, separator in zip(matching, separators):
            line.result += line.match.pre + separator
            line.buffer = line.match.post

        width = self.results_pad(matching)
        if width:
            self.results_extend(matching, self.config.spaces_after)

        self.buffers_lstrip(matching)

    def results_pad(self, matching: List[Line]) -> int:
        """
        Trim trailing whitespace and pad all results to the widest one

        Only the matching subset counts towards the width.

        Returns:
            The common result width after padding
        """
        for line in matching:
            line.result = line.result.rstrip()
        width = max(len(line.result) for line in matching)
        for line in matching:
            line.result = line.result.ljust(width)
        return width

    def results_extend(self, matching: List[Line], count: int) -> None:
        spaces = " " * count
        for line in matching:
            line.result += spaces

    def separators_justify(self, matching: List[Line], pattern: Pattern) -> List[str]:
        """
        Justify separators of varying length within the widest one

        Left justification pads short separators on the right, right
        justification on the left.
        """
        width = max(len(line.match.separator) for line in matching)
        if pattern.justify is Justify.RIGHT:
            return [line.match.separator.rjust(width) for line in matching]
        return [line.match.separator.ljust(width) for line in matching]

    def buffers_lstrip(self, matching: List[Line]) -> None:
        for line in matching:
            line.buffer = line.buffer.lstrip()

    def buffers_measure(self) -> int:
        return sum(len(line.buffer) for line in self.lines)
