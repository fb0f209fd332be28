"""
colalign - Line-oriented column aligner

Alignment engine, separator matchers and input reader.
"""

__version__ = "1.0.0"

from .aligner import Aligner
from .matcher import Matcher, LiteralMatcher, RegexMatcher, PatternError, matcher_create, pattern_compile
from .reader import records_read
from .log import LOG, state_connectToLogger

__all__ = [
    "Aligner",
    "Matcher",
    "LiteralMatcher",
    "RegexMatcher",
    "PatternError",
    "matcher_create",
    "pattern_compile",
    "records_read",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
