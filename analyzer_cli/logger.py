"""
Logging initialization for the collaborators.

The resolver never logs; once an Invocation exists, setup_logging() wires the
standard logging module from it:

- level: Verbosity.level (QUIET → ERROR ... SPAMMY → DEBUG)
- sink: a rich handler on stderr, or a plain file handler for --log-file
- filter: ANALYZER_LOG items refine the level per logger (see config.parse_filter)
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

from .commands import Verbosity
from .config import Environment, parse_filter

# marks handlers we installed so a second call replaces instead of stacking them
_MARKER = "_analyzer_cli_handler"


def setup_logging(verbosity=Verbosity.NORMAL, log_file=None, /, *, environment=None):
    """
    Configure the root logger for one run and return it.

    Parameters
    - verbosity: Verbosity of the invocation.
    - log_file: Path | None; when given, records go to this file instead of stderr.
    - environment: Environment; defaults to Environment.load().

    Raises
    - ValueError: the log filter in the environment is malformed.
    - OSError: the log file cannot be opened.
    """
    environment = Environment.load() if environment is None else environment
    levels = parse_filter(environment.log_filter)

    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=verbosity.is_spammy,
            rich_tracebacks=verbosity.is_verbose,
        )
    setattr(handler, _MARKER, True)

    root = logging.getLogger()
    for previous in [handler for handler in root.handlers if getattr(handler, _MARKER, False)]:
        root.removeHandler(previous)
        previous.close()
    root.addHandler(handler)

    # an explicit default in the filter wins over the verbosity flags
    root.setLevel(levels.pop("", verbosity.level))
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)

    return root


__all__ = (
    "setup_logging",
)
