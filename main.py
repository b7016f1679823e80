import sys

from rich.pretty import pprint

from analyzer_cli import *
from analyzer_cli.__main__ import main


@handler(
    Parse,
    Symbols,
    Highlight,
    AnalysisStats,
    Bench,
    Diagnostics,
    StructuredSearchReplace,
    StructuredSearch,
    ProcMacroServer,
    RunServer,
)
def show(command):
    pprint(command)


if __name__ == '__main__':
    sys.exit(main())
