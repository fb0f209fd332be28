"""
colalign - Line-oriented column aligner

Reformats lines of text so that separator patterns line up vertically.
"""

__version__ = "1.0.0"

from .lib import Aligner, records_read, pattern_compile, PatternError, LOG, state_connectToLogger

__all__ = [
    "Aligner",
    "records_read",
    "pattern_compile",
    "PatternError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
