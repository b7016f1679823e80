"""
Dispatcher: hand a parsed Invocation to the collaborator that runs it.

The server loop and the batch analyses live outside this package. They plug
in through the `handler` decorator, keyed by command variant type:

    from analyzer_cli import handler, AnalysisStats

    @handler(AnalysisStats)
    def analysis_stats(command):
        ...

PrintVersion and ShowHelp are served here; everything else needs a handler.
"""
import logging

from rich.console import Console

from .commands import Command, PrintVersion, ShowHelp
from .faults import UnhandledCommandError
from .utils import prog

logger = logging.getLogger(__name__)

console = Console(stderr=True)

handlers = {}


def handler(*types, registry=None):
    """
    Register the decorated callable as the collaborator for `types`.

    Raises
    - TypeError: no type given, a type is not a Command variant, or the
      decorated object is not callable.
    - ValueError: a type already has a collaborator in the registry.
    """
    registry = handlers if registry is None else registry
    if not types:
        raise TypeError("@handler() must name at least one command type")
    for variant in types:
        if not isinstance(variant, type) or not issubclass(variant, Command):
            raise TypeError("@handler() arguments must be command types")
        if variant in (PrintVersion, ShowHelp):
            raise ValueError(f"{variant.__name__} is served by the dispatcher itself")

    def wrapper(callback, /):
        if not callable(callback):
            raise TypeError("@handler() must be applied to a callable")
        for variant in types:
            if registry.setdefault(variant, callback) is not callback:
                raise ValueError(f"{variant.__name__} already has a handler")
        return callback

    return wrapper


def version():
    from . import __version__
    return f"{prog()} {__version__}"


def run(invocation, /, registry=None):
    """
    Execute an Invocation and return whatever its collaborator returns.

    Raises
    - UnhandledCommandError: no collaborator is registered for the command.
    """
    registry = handlers if registry is None else registry
    command = invocation.command

    match command:
        case PrintVersion():
            console.print(version(), highlight=False)
            return None
        case ShowHelp():
            return None

    try:
        callback = registry[type(command)]
    except KeyError:
        raise UnhandledCommandError(
            "no handler is registered for %s" % (
                "the %r command" % command.name if command.name else "server mode"
            ),
            command=command,
            hint="register one with @handler(%s)" % type(command).__name__,
        ) from None

    logger.debug("dispatching %r (verbosity=%s, log_file=%s)", command, invocation.verbosity.name, invocation.log_file)
    return callback(command)


__all__ = (
    "handlers",
    "handler",
    "run",
    "version",
)
