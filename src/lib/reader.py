"""
Input reader

Reads standard input or a list of files and turns them into a stream of
InputRecords for the Aligner: one record per line, plus a boundary record
whenever an alignment unit ends.

A unit ends when the reader moves on to the next file and at end of input.
With concatenate=True the whole input forms a single unit.
"""

import fileinput
from typing import Iterable, Iterator

from ..models.line import InputRecord
from .log import LOG


def records_read(
    files: Iterable[str],
    concatenate: bool = False,
    encoding: str = "utf-8",
    errors: str = "surrogateescape",
) -> Iterator[InputRecord]:
    """
    Yield line and boundary records for the given inputs.

    Args:
        files: File names; an empty list or "-" reads standard input
        concatenate: Emit a boundary only at end of input
        encoding: Encoding for named files
        errors: Decode error handler for named files

    Yields:
        InputRecord(text=line) for every line (newline removed) and
        InputRecord(text=None) at every unit boundary

    Raises:
        OSError: If an input file cannot be opened or read
    """
    names = list(files) or ["-"]
    current = None

    with fileinput.FileInput(files=names, encoding=encoding, errors=errors) as stream:
        for text in stream:
            source = stream.filename()
            if stream.isfirstline():
                if current is not None and not concatenate:
                    yield InputRecord(text=None, source=current)
                LOG(f"Reading {source}", level=2)
            current = source
            yield InputRecord(text=text.rstrip("\n"), source=source)

    if current is not None:
        yield InputRecord(text=None, source=current)
