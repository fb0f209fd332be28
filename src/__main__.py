#!/usr/bin/env python3
"""
colalign - Line-oriented column aligner

Reformats each input line so that one or more separator patterns line up
vertically across all lines of a file, padding with spaces.

Philosophy:
    - Unit at a time: every file is aligned on its own, stdin as a whole
    - Order-sensitive modes: each pattern keeps the matcher kind, side and
      justification that were active when it was declared
    - Content-preserving: only spaces are inserted, trailing blanks trimmed

Usage:
    colalign [options] PATTERN [FILE ...]
    colalign [options] -e PATTERN [-e PATTERN ...] [FILE ...]

Examples:
    # Align the first '@' of every line
    colalign @ people.txt

    # Align every '@', sweeping until none are left
    colalign -g @ people.txt

    # Align '=' literally, then the start of the comment after it
    colalign -F -e = -a -e '#' settings.ini

    # Leave a leading label alone, then align on ':'
    colalign -s '^\\w+ ' -e : report.txt
"""

import io
import sys
from argparse import Action, ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .config import appsettings
from .lib import Aligner, records_read, pattern_compile, PatternError, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline, PatternSpec, MatcherKind, AlignSide, Justify, AlignConfig


class PatternModeAction(Action):
    """Switch a per-pattern mode for every pattern declared after the flag"""

    def __init__(self, option_strings, dest, const=None, **kwargs):
        super().__init__(option_strings, dest, nargs=0, const=const, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, self.const)


class PatternDeclareAction(Action):
    """Declare a pattern, capturing the modes active at this point of the command line"""

    def __init__(self, option_strings, dest, skip=False, **kwargs):
        self.skip = skip
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        specs = list(getattr(namespace, self.dest, None) or [])
        specs.append(spec_fromNamespace(namespace, values, skip=self.skip))
        setattr(namespace, self.dest, specs)


def spec_fromNamespace(namespace: Namespace, text: str, skip: bool = False) -> PatternSpec:
    """Build a PatternSpec from the modes currently recorded in the namespace"""
    return PatternSpec(
        text=text,
        kind=namespace.matcherKind,
        side=namespace.alignSide,
        justify=namespace.justify,
        skip=skip,
    )


# Define CLI arguments
parser = ArgumentParser(
    prog="colalign",
    usage="%(prog)s [options] [-e PATTERN ...] [PATTERN] [FILE ...]",
    description="colalign - align separator patterns into columns",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "args",
    nargs="*",
    metavar="FILE",
    help="Input files; '-' or none reads stdin. Without -e the first one is the PATTERN",
)

parser.add_argument(
    "-e", "--pattern",
    dest="patternSpecs",
    action=PatternDeclareAction,
    metavar="PATTERN",
    help="Pattern to align on (repeatable, applied in order)",
)

parser.add_argument(
    "-s", "--skip",
    dest="patternSpecs",
    action=PatternDeclareAction,
    skip=True,
    metavar="PATTERN",
    help="Pattern to consume without aligning on it",
)

parser.add_argument(
    "-F", "--fixed-strings",
    dest="matcherKind",
    action=PatternModeAction,
    const=MatcherKind.LITERAL,
    help="Following patterns are literal strings",
)

parser.add_argument(
    "-P", "--perl-regexp",
    dest="matcherKind",
    action=PatternModeAction,
    const=MatcherKind.REGEX,
    help="Following patterns are regular expressions",
)

parser.add_argument(
    "-a", "--after",
    dest="alignSide",
    action=PatternModeAction,
    const=AlignSide.AFTER,
    help="Following patterns align the text after the separator",
)

parser.add_argument(
    "-b", "--before",
    dest="alignSide",
    action=PatternModeAction,
    const=AlignSide.BEFORE,
    help="Following patterns align the separator itself",
)

parser.add_argument(
    "-l", "--left",
    dest="justify",
    action=PatternModeAction,
    const=Justify.LEFT,
    help="Following patterns left-justify separators of differing length",
)

parser.add_argument(
    "-r", "--right",
    dest="justify",
    action=PatternModeAction,
    const=Justify.RIGHT,
    help="Following patterns right-justify separators of differing length",
)

parser.add_argument(
    "-g", "--global",
    dest="repeat",
    action="store_true",
    help="Repeat the patterns until none of them matches any more",
)

parser.add_argument(
    "-c", "--concatenate",
    action="store_true",
    help="Align all input files as a single unit",
)

parser.add_argument(
    "-t", "--tabsize",
    dest="tabSize",
    type=int,
    default=appsettings.tab_size,
    help="Tab stop width used to expand tabs before matching",
)

parser.add_argument(
    "--spaces-before",
    dest="spacesBefore",
    type=int,
    default=appsettings.spaces_before,
    help="Spaces inserted before an aligned separator",
)

parser.add_argument(
    "--spaces-after",
    dest="spacesAfter",
    type=int,
    default=appsettings.spaces_after,
    help="Spaces inserted after an aligned separator",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=0,
    help="Increase diagnostic output on stderr (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

parser.set_defaults(
    matcherKind=MatcherKind(appsettings.default_matcher),
    alignSide=AlignSide(appsettings.default_side),
    justify=Justify(appsettings.default_justify),
)


def options_parse(argv: Optional[List[str]] = None) -> Namespace:
    """
    Parse the command line and settle the positional pattern.

    When no pattern was declared with -e, the first positional argument is
    the pattern (taking the modes active at the end of the command line) and
    the rest are files. Otherwise all positionals are files.

    Exits:
        2 if no pattern was given or a numeric option is out of range
    """
    options = parser.parse_intermixed_args(argv)
    specs = list(options.patternSpecs or [])
    files = list(options.args)

    if not any(not spec.skip for spec in specs):
        if not files:
            parser.error("no pattern given; pass PATTERN or use -e PATTERN")
        specs.append(spec_fromNamespace(options, files.pop(0)))

    if options.tabSize < 1:
        parser.error("--tabsize must be at least 1")
    if options.spacesBefore < 0 or options.spacesAfter < 0:
        parser.error("--spaces-before/--spaces-after must not be negative")

    options.patternSpecs = specs
    options.files = files
    return options


def config_build(inputstate: ProgramState) -> ProgramState:
    """
    Compile the declared patterns into an immutable AlignConfig.

    Args:
        inputstate: Program state with patternSpecs and spacing options

    Returns:
        ProgramState with added field:
            - alignConfig: AlignConfig handed to the Aligner

    Exits:
        1 if a pattern is empty or not a valid regular expression
    """
    state = inputstate.copy()

    LOG("Compiling patterns...", level=1)

    try:
        patterns = tuple(pattern_compile(spec) for spec in state.patternSpecs)
    except PatternError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for pattern in patterns:
        LOG(
            f"{pattern.matcher!r} side={pattern.side.value} "
            f"justify={pattern.justify.value} skip={pattern.skip}",
            level=2,
        )

    state.alignConfig = AlignConfig(
        patterns=patterns,
        repeat=state.repeat,
        tab_size=state.tabSize,
        spaces_before=state.spacesBefore,
        spaces_after=state.spacesAfter,
    )
    return state


def input_align(inputstate: ProgramState) -> ProgramState:
    """
    Read the input unit by unit, align each unit and write it to stdout.

    Output for a unit is written only once its last line has been read.

    Args:
        inputstate: Program state with alignConfig set

    Returns:
        ProgramState with added fields:
            - batchCount: Number of units aligned
            - linesWritten: Number of lines written

    Exits:
        1 if an input file cannot be read
    """
    state = inputstate.copy()

    LOG("Aligning input...", level=1)

    if (not state.files or "-" in state.files) and isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(encoding=appsettings.encoding, errors=appsettings.encoding_errors)
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding=appsettings.encoding, errors=appsettings.encoding_errors)

    aligner = Aligner(state.alignConfig)
    try:
        for record in records_read(
            state.files,
            concatenate=state.concatenate,
            encoding=appsettings.encoding,
            errors=appsettings.encoding_errors,
        ):
            if record.boundary:
                state.batchCount += 1
            for text in aligner.record_feed(record):
                print(text)
                state.linesWritten += 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Summarize the run on stderr (terminal pipeline stage).

    Returns:
        ProgramState unchanged
    """
    state: ProgramState = inputstate.copy()
    LOG(f"Aligned {state.batchCount} unit(s), {state.linesWritten} line(s) written", level=1)
    return state


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point - align the given inputs on the given patterns.

    Orchestrates the pipeline:
        1. config_build: Compile patterns into an AlignConfig
        2. input_align: Read, align and write every unit
        3. results_report: Log a summary

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
    """
    options = options_parse(argv)

    state: ProgramState = ProgramState.state_createFromNamespace(options=options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, config_build, input_align, results_report)


if __name__ == "__main__":
    main()
