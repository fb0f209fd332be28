"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from argparse import Namespace
from typing import Optional, Type, TypeVar, List, Callable
from dataclasses import dataclass, field

from .pattern import AlignConfig, PatternSpec


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the alignment pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: verbosity, patternSpecs, files, repeat, concatenate,
                   tabSize, spacesBefore, spacesAfter
        - config_build: alignConfig
        - input_align: batchCount, linesWritten
        - results_report: (no additions, terminal stage)

    Attributes:
        verbosity: Logging verbosity level (0-3)
        patternSpecs: Patterns in declaration order, with their per-pattern modes
        files: Input files; empty or "-" means standard input
        repeat: Sweep the patterns until none matches
        concatenate: Align all inputs as a single unit instead of per file
        tabSize: Tab stop width
        spacesBefore: Spaces inserted before the separator
        spacesAfter: Spaces inserted after the separator
        alignConfig: Compiled, immutable alignment configuration
        batchCount: Number of alignment units processed
        linesWritten: Number of output lines written
    """

    # CLI arguments
    verbosity: int = field(default=0)
    patternSpecs: List[PatternSpec] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    repeat: bool = field(default=False)
    concatenate: bool = field(default=False)
    tabSize: int = field(default=8)
    spacesBefore: int = field(default=1)
    spacesAfter: int = field(default=1)

    # Pipeline state
    alignConfig: Optional[AlignConfig] = field(default=None)
    batchCount: int = field(default=0)
    linesWritten: int = field(default=0)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Options that have no matching field (argparse bookkeeping such as the
        currently active matcher mode) are dropped.

        Args:
            options: Parsed CLI arguments

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            config_build,
            input_align,
            results_report
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
