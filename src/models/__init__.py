"""
Models package for colalign

Contains data structures and type definitions for the alignment pipeline.
"""

from .state import ProgramState, pipeline
from .pattern import MatcherKind, AlignSide, Justify, PatternSpec, Pattern, AlignConfig
from .line import Line, MatchResult, BatchState, InputRecord

__all__ = [
    "ProgramState",
    "pipeline",
    "MatcherKind",
    "AlignSide",
    "Justify",
    "PatternSpec",
    "Pattern",
    "AlignConfig",
    "Line",
    "MatchResult",
    "BatchState",
    "InputRecord",
]
