"""
Command resolver: turn a process argument list into an Invocation.

Without a subcommand the tool runs its server loop; with one it performs a
single batch job. The decision points are evaluated strictly in this order,
and only one path through them is taken per invocation:

1. --version        short-circuits (after checking nothing else was given)
2. verbosity        -vv/--spammy, -v/--verbose, -q/--quiet (conflicts fail)
3. --log-file PATH
4. -h/--help        prints help, drops the log file
5. subcommand       parse | symbols | highlight | analysis-stats |
                    analysis-bench | diagnostics | ssr | search | proc-macro;
                    none → server, anything else → help

Faults are raised (see analyzer_cli.faults); help is the only output.
"""
from pathlib import Path

from .commands import *
from .faults import FlagConflictError, MalformedValueError, MissingOrAmbiguousTargetError
from .help import render_help
from .ssr import Pattern, Rule
from .tokens import Arguments
from .utils import Unset, tokenize


def parse(prompt=Unset, /, *, rule=Rule.parse, pattern=Pattern.parse):
    """
    Parse a prompt into a single, validated Invocation.

    Parameters
    - prompt: Unset (sys.argv[1:]), a shell-like string, or an iterable of
      strings. See analyzer_cli.utils.tokenize.
    - rule / pattern: converters for the free-form tokens of `ssr` and
      `search`. Each takes one string and raises ValueError on bad input.

    Raises
    - ParseError (one of its subclasses) describing the offending input.
    """
    try:
        tokens = tokenize(prompt)
    except ValueError as error:
        raise MalformedValueError(
            "cannot split prompt %r: %s" % (prompt, error),
            value=prompt,
            hint="close every quote and do not end the prompt with a backslash",
        ) from error
    arguments = Arguments(tokens)

    if arguments.contains("--version"):
        arguments.finish()
        return Invocation(command=PrintVersion())

    verbosity = _verbosity(arguments)
    log_file = arguments.value("--log-file", type=Path)

    if arguments.contains("-h", "--help"):
        render_help()
        return Invocation(verbosity, None, ShowHelp())

    subcommand = arguments.subcommand()
    if subcommand is None:
        arguments.finish()
        return Invocation(verbosity, log_file, RunServer())

    try:
        resolver = _subcommands[subcommand]
    except KeyError:
        render_help()
        return Invocation(verbosity, None, ShowHelp())

    return Invocation(verbosity, log_file, resolver(arguments, rule=rule, pattern=pattern))


def _verbosity(arguments):
    # -vv is looked up first so it is never mistaken for -v
    match (
        arguments.contains("-vv", "--spammy"),
        arguments.contains("-v", "--verbose"),
        arguments.contains("-q", "--quiet"),
    ):
        case (True, _, True):
            raise FlagConflictError(
                "Invalid flags: -q conflicts with -vv",
                flags=("-q", "-vv"),
                hint="keep a single verbosity flag",
            )
        case (True, _, False):
            return Verbosity.SPAMMY
        case (False, True, True):
            raise FlagConflictError(
                "Invalid flags: -q conflicts with -v",
                flags=("-q", "-v"),
                hint="keep a single verbosity flag",
            )
        case (False, True, False):
            return Verbosity.VERBOSE
        case (False, False, True):
            return Verbosity.QUIET
        case _:
            return Verbosity.NORMAL


def _parse(arguments, **options):
    suppress_output = arguments.contains("--no-dump")
    arguments.finish()
    return Parse(suppress_output)


def _symbols(arguments, **options):
    arguments.finish()
    return Symbols()


def _highlight(arguments, **options):
    rainbow = arguments.contains("--rainbow")
    arguments.finish()
    return Highlight(rainbow)


def _proc_macro(arguments, **options):
    arguments.finish()
    return ProcMacroServer()


def _path(arguments):
    path, = arguments.positional(1, "PATH")
    return Path(path)


def _analysis_stats(arguments, **options):
    randomize = arguments.contains("--randomize")
    parallel = arguments.contains("--parallel")
    collect_memory_usage = arguments.contains("--memory-usage")
    only_filter = arguments.value("-o", "--only")
    include_dependencies = arguments.contains("--with-deps")
    load_output_dirs = arguments.contains("--load-output-dirs")
    with_proc_macro = arguments.contains("--with-proc-macro")

    return AnalysisStats(AnalysisStatsConfig(
        project_path=_path(arguments),
        randomize=randomize,
        parallel=parallel,
        collect_memory_usage=collect_memory_usage,
        only_filter=only_filter,
        include_dependencies=include_dependencies,
        load_output_dirs=load_output_dirs,
        with_proc_macro=with_proc_macro,
    ))


def _analysis_bench(arguments, **options):
    highlight = arguments.value("--highlight", type=Path)
    complete = arguments.value("--complete", type=Position.parse)
    goto_def = arguments.value("--goto-def", type=Position.parse)

    match (highlight, complete, goto_def):
        case (Path(), None, None):
            target = HighlightTarget(highlight.absolute())
        case (None, Position(), None):
            target = CompleteTarget(complete)
        case (None, None, Position()):
            target = GotoDefTarget(goto_def)
        case _:
            given = [
                name for name, value in (
                    ("--highlight", highlight),
                    ("--complete", complete),
                    ("--goto-def", goto_def),
                ) if value is not None
            ]
            raise MissingOrAmbiguousTargetError(
                "exactly one of `--highlight`, `--complete` or `--goto-def` must be set%s" % (
                    ", got %s" % " and ".join(given) if given else ""
                ),
                given=tuple(given),
                hint="pick a single benchmark target (for example: --complete main.rs:10:5)",
            )

    collect_memory_usage = arguments.contains("--memory-usage")
    load_output_dirs = arguments.contains("--load-output-dirs")
    with_proc_macro = arguments.contains("--with-proc-macro")

    return Bench(BenchConfig(
        project_path=_path(arguments),
        target=target,
        collect_memory_usage=collect_memory_usage,
        load_output_dirs=load_output_dirs,
        with_proc_macro=with_proc_macro,
    ))


def _diagnostics(arguments, **options):
    load_output_dirs = arguments.contains("--load-output-dirs")
    with_proc_macro = arguments.contains("--with-proc-macro")
    return Diagnostics(_path(arguments), load_output_dirs, with_proc_macro)


# ssr and search consume every remaining token as data, so they never finish()
def _ssr(arguments, *, rule, **options):
    return StructuredSearchReplace(tuple(arguments.remaining(rule)))


def _search(arguments, *, pattern, **options):
    debug_snippet = arguments.value("--debug")
    return StructuredSearch(debug_snippet, tuple(arguments.remaining(pattern)))


_subcommands = {
    "parse": _parse,
    "symbols": _symbols,
    "highlight": _highlight,
    "analysis-stats": _analysis_stats,
    "analysis-bench": _analysis_bench,
    "diagnostics": _diagnostics,
    "ssr": _ssr,
    "search": _search,
    "proc-macro": _proc_macro,
}


__all__ = (
    "parse",
)
