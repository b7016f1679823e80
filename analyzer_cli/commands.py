"""
analyzer-cli command model: what a parsed invocation looks like.

Overview
- Verbosity: ordered chattiness level derived from -q / -v / -vv.
- Command: closed set of variants, exactly one per invocation. Batch variants
  carry their own validated configuration; RunServer is the default mode.
- AnalysisStatsConfig / BenchConfig: sub-configurations of the two analysis
  subcommands.
- Position / BenchTarget: what analysis-bench should measure.
- Invocation: the resolver's single output (verbosity, log file, command).

Everything here is immutable once constructed. Sequences are tuples, paths are
pathlib.Path, and variants compare by type and value, so two payload-less
variants (Symbols() and RunServer()) are never equal.
"""
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path


class Verbosity(IntEnum):
    """
    chattiness of an invocation, totally ordered from QUIET to SPAMMY.
    """
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    SPAMMY = 3

    @property
    def is_verbose(self):
        return self >= Verbosity.VERBOSE

    @property
    def is_spammy(self):
        return self is Verbosity.SPAMMY

    @property
    def level(self):
        """the logging level matching this verbosity."""
        return {
            Verbosity.QUIET: logging.ERROR,
            Verbosity.NORMAL: logging.WARNING,
            Verbosity.VERBOSE: logging.INFO,
            Verbosity.SPAMMY: logging.DEBUG,
        }[self]


@dataclass(frozen=True, slots=True)
class Position:
    """
    A location inside a file, written PATH:LINE:COLUMN on the command line.
    """
    path: Path
    line: int
    column: int

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ValueError("line and column must be non-negative")

    @classmethod
    def parse(cls, text, /):
        """
        Build a Position from 'PATH:LINE:COLUMN'.

        The two right-most colons delimit line and column, so the path itself
        may contain colons (drive letters, URIs).

        Raises
        - ValueError: a segment is missing, empty, or line/column is not a
          non-negative integer.
        """
        parts = text.rsplit(":", 2)
        if len(parts) != 3 or not parts[0]:
            raise ValueError("expected PATH:LINE:COLUMN")
        path, line, column = parts
        if not (line.isdecimal() and column.isdecimal()):
            raise ValueError("line and column must be non-negative integers")
        return cls(Path(path), int(line), int(column))

    def __str__(self):
        return f"{self.path}:{self.line}:{self.column}"


class BenchTarget:
    """base of the three mutually exclusive analysis-bench targets."""
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class HighlightTarget(BenchTarget):
    """compute syntax highlighting for a whole file."""
    absolute_path: Path


@dataclass(frozen=True, slots=True)
class CompleteTarget(BenchTarget):
    """compute completions at a position."""
    position: Position


@dataclass(frozen=True, slots=True)
class GotoDefTarget(BenchTarget):
    """compute goto-definition at a position."""
    position: Position


@dataclass(frozen=True, slots=True)
class AnalysisStatsConfig:
    project_path: Path
    randomize: bool = False
    parallel: bool = False
    collect_memory_usage: bool = False
    only_filter: str | None = None
    include_dependencies: bool = False
    load_output_dirs: bool = False
    with_proc_macro: bool = False


@dataclass(frozen=True, slots=True)
class BenchConfig:
    project_path: Path
    target: BenchTarget
    collect_memory_usage: bool = False
    load_output_dirs: bool = False
    with_proc_macro: bool = False


class Command:
    """
    base of every command variant.

    `name` is the subcommand spelling that selects the variant on the command
    line (None for the variants that are not reached through a subcommand).
    """
    __slots__ = ()
    name = None


@dataclass(frozen=True, slots=True)
class Parse(Command):
    name = "parse"
    suppress_output: bool = False


@dataclass(frozen=True, slots=True)
class Symbols(Command):
    name = "symbols"


@dataclass(frozen=True, slots=True)
class Highlight(Command):
    name = "highlight"
    rainbow: bool = False


@dataclass(frozen=True, slots=True)
class AnalysisStats(Command):
    name = "analysis-stats"
    config: AnalysisStatsConfig


@dataclass(frozen=True, slots=True)
class Bench(Command):
    name = "analysis-bench"
    config: BenchConfig


@dataclass(frozen=True, slots=True)
class Diagnostics(Command):
    name = "diagnostics"
    path: Path
    load_output_dirs: bool = False
    with_proc_macro: bool = False


@dataclass(frozen=True, slots=True)
class StructuredSearchReplace(Command):
    name = "ssr"
    rules: tuple = ()


@dataclass(frozen=True, slots=True)
class StructuredSearch(Command):
    name = "search"
    debug_snippet: str | None = None
    patterns: tuple = ()


@dataclass(frozen=True, slots=True)
class ProcMacroServer(Command):
    name = "proc-macro"


@dataclass(frozen=True, slots=True)
class RunServer(Command):
    pass


@dataclass(frozen=True, slots=True)
class PrintVersion(Command):
    pass


@dataclass(frozen=True, slots=True)
class ShowHelp(Command):
    pass


@dataclass(frozen=True, slots=True)
class Invocation:
    """
    Result of parsing one process argument list.

    log_file is always None for ShowHelp and PrintVersion.
    """
    verbosity: Verbosity = Verbosity.NORMAL
    log_file: Path | None = None
    command: Command = field(default_factory=RunServer)


__all__ = (
    "Verbosity",
    "Position",
    "BenchTarget",
    "HighlightTarget",
    "CompleteTarget",
    "GotoDefTarget",
    "AnalysisStatsConfig",
    "BenchConfig",
    "Command",
    "Parse",
    "Symbols",
    "Highlight",
    "AnalysisStats",
    "Bench",
    "Diagnostics",
    "StructuredSearchReplace",
    "StructuredSearch",
    "ProcMacroServer",
    "RunServer",
    "PrintVersion",
    "ShowHelp",
    "Invocation",
)
