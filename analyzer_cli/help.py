"""
Help text and its rich renderer.

HELP is the literal usage text of the tool. render_help() prints it on the
diagnostic stream (stderr), highlighting section labels, flag names and
metavars. Colours follow the same palette conventions as the fault renderer
and can be overridden through a __styles__ mapping in __main__.
"""
import re
from collections import defaultdict

from rich.console import Console
from rich.text import Text

from .config import LOG_VARIABLE, PROFILE_VARIABLE

HELP = f"""\
analyzer

USAGE:
    analyzer [FLAGS] [COMMAND] [COMMAND_OPTIONS]

FLAGS:
    --version         Print version
    -h, --help        Print this help

    -v,  --verbose
    -vv, --spammy
    -q,  --quiet      Set verbosity

    --log-file <PATH> Log to the specified file instead of stderr

ENVIRONMENTAL VARIABLES:
    {LOG_VARIABLE:<17} Set log filter (`target=level` items, comma separated)
    {PROFILE_VARIABLE:<17} Enable hierarchical profiler

COMMANDS:

not specified         Launch LSP server

parse < main.rs       Parse tree
    --no-dump         Suppress printing

symbols < main.rs     Parse input an print the list of symbols

highlight < main.rs   Highlight input as html
    --rainbow         Enable rainbow highlighting of identifiers

analysis-stats <PATH> Batch typecheck project and print summary statistics
    <PATH>            Directory with the project manifest
    --randomize       Randomize order in which crates, modules, and items are processed
    --parallel        Run type inference in parallel
    --memory-usage    Collect memory usage statistics
    -o, --only <PATH> Only analyze items matching this path
    --with-deps       Also analyze all dependencies
    --load-output-dirs
                      Load OUT_DIR values by running a build check before analysis
    --with-proc-macro Use proc-macro-srv for proc-macro expanding

analysis-bench <PATH> Benchmark specific analysis operation
    <PATH>            Directory with the project manifest
    --highlight <PATH>
                      Compute syntax highlighting for this file
    --complete <PATH:LINE:COLUMN>
                      Compute completions at this location
    --goto-def <PATH:LINE:COLUMN>
                      Compute goto definition at this location
    --memory-usage    Collect memory usage statistics
    --load-output-dirs
                      Load OUT_DIR values by running a build check before analysis
    --with-proc-macro Use proc-macro-srv for proc-macro expanding

diagnostics <PATH>
    <PATH>            Directory with the project manifest
    --load-output-dirs
                      Load OUT_DIR values by running a build check before analysis
    --with-proc-macro Use proc-macro-srv for proc-macro expanding

ssr [RULE...]
    <RULE>            A structured search replace rule (`$a.foo($b) ==> bar($a, $b)`)

search [PATTERN..]
    <PATTERN>         A structured search replace pattern (`$a.foo($b)`)
    --debug <snippet> Prints debug information for any nodes with source exactly
                      equal to <snippet>

proc-macro            Run the proc-macro expansion server
"""

console = Console(stderr=True)


def render_help(*, colorful=True):
    """
    Print HELP on stderr.

    Palette keys
    - section-label: "USAGE:", "FLAGS:", ... and the program name line
    - flag-name: -x / --long spellings
    - metavar: <PATH>, [RULE...] and friends
    """
    styles = defaultdict(str, {
        "section-label": "bold #FFFFFF",
        "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
        "flag-name": "bold #22C55E",  # GREEN for flags
        "metavar": "bold #FFD600",  # AMBER for parameters
    } | getattr(__import__("__main__"), "__styles__", {}))

    text = Text(HELP.rstrip("\n"))
    if colorful:
        text.highlight_regex(re.compile(r"^[A-Z][A-Z ]+:$", re.MULTILINE), styles["section-label"])
        text.highlight_regex(re.compile(r"\A\S+"), styles["program-name"])
        text.highlight_regex(re.compile(r"(?<![\w$(])--?[a-z][a-z-]*"), styles["flag-name"])
        text.highlight_regex(re.compile(r"<[A-Za-z:]+>|\[[A-Z]+\.\.\.?\]"), styles["metavar"])

    console.print(text, highlight=False, soft_wrap=True)


__all__ = (
    "HELP",
    "render_help",
)
