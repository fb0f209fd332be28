"""
Verbosity-gated logging using Loguru.

LOG() checks the verbosity of the ProgramState connected to the current
context, so library code (the Aligner, the input reader) can emit
diagnostics without being handed the state explicitly.

All diagnostics go to stderr; stdout carries only aligned text.

Usage:
    from colalign.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Stage progress, shown with -v", level=1)
    LOG("Per-batch statistics, shown with -vv", level=2)
    LOG("Per-pass traces, shown with -vvv", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <8}</cyan>:<cyan>{function: <20}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: Any object with a `verbosity` attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity is at least `level`.

    Nothing is logged while no state is connected (e.g. when the Aligner is
    used as a library).

    Args:
        message: Log message to display
        level: Minimum verbosity required (1=-v, 2=-vv, 3=-vvv)
        **kwargs: Additional loguru metadata
    """
    state = _program_state.get()

    if state is not None and getattr(state, 'verbosity', 0) >= level:
        logger.opt(depth=1).debug(message, **kwargs)
