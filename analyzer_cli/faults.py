"""
analyzer-cli faults (parse and dispatch errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing
  failure of the front end. Codes are grouped by domain so logs and searches
  stay predictable.
- CommandException: base type carrying a message + options, able to render
  itself as a single actionable line (or a panel in fancy mode).
- ParseError and its taxonomy: everything the resolver can report.
- trigger(): central entry point to surface a fault (raise it, or print it in
  shell mode).

UX goals
- Position-first messages: when a token is at fault, the message names its
  ordinal position in the argument list (“at third position”).
- One line per failure: `[ analyzer — 11121 | Unrecognized Arguments ] ...`.

Integration
- The resolver raises; it never prints or logs a fault itself.
- The entry point catches CommandException and calls trigger(fault, shell=True).
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, UnsetType, prog as _prog

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the cli (stable identifiers).

    grouping (by high-level domain)
    - parsing (111xx)
      • FLAG_CONFLICT
      • UNRECOGNIZED_ARGUMENTS
      • ARITY_MISMATCH
      • MISSING_OR_AMBIGUOUS_TARGET
      • MALFORMED_VALUE, MISSING_VALUE
    - dispatching (112xx)
      • UNHANDLED_COMMAND
    - environment (113xx)
      • INVALID_CONFIGURATION

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- parsing errors (111xx) ---
    FLAG_CONFLICT               = 11111
    UNRECOGNIZED_ARGUMENTS      = 11121
    ARITY_MISMATCH              = 11131
    MISSING_OR_AMBIGUOUS_TARGET = 11141
    MALFORMED_VALUE             = 11151
    MISSING_VALUE               = 11152

    # --- dispatching errors (112xx) ---
    UNHANDLED_COMMAND           = 11201

    # --- environment errors (113xx) ---
    INVALID_CONFIGURATION       = 11301

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class CommandException(Exception):
    """
    base of every fault raised by the front end.

    the message is positional; everything else travels as keyword options:
    - title: short, lowercased headline (defaults to the fault's kind)
    - code: a FaultCode (defaults to the class' __code__)
    - hint: one actionable sentence (shown in fancy mode)
    - shell / fancy / colorful / deferred: runtime rendering flags
    - any other context (tokens, index, names, ...) for programmatic use
    """
    __kind__ = "CommandException"
    __code__ = None

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | UnsetType)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType({
            "title": " ".join(_split_kind(type(self).__kind__)),
            "code": type(self).__code__,
            "hint": None,
        } | options)

    @property
    def kind(self):
        """taxonomy name of this fault (e.g. 'UnrecognizedArguments')."""
        return type(self).__kind__

    @property
    def code(self):
        return self.options["code"]

    @property
    def hint(self):
        return self.options["hint"]

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if isinstance(fragment, Text):
                return fragment if colorful else Text(fragment.plain)
            return Text(str(fragment), style)

        prog = text(_prog(), styler("prog-name"))

        header = Text.assemble("[ ", prog)
        if isinstance(code := self.options["code"], FaultCode):
            header.append_text(Text.assemble(" — ", text(code.normalize(), styler("code"))))
        header.append_text(Text.assemble(
            " | ",
            text(self.options["title"].title(), styler("error-title")),
            " ]"
        ))
        message = text(str(self), styler("error-message"))

        if fancy:
            renders = [message]
            if self.options["hint"]:
                renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(self.options["hint"], styler("hint"))))
            return Panel(Group(*renders), title=header, title_align="left")

        return Text.assemble(header, " ", message)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self, soft_wrap=True)
        if self.options.get("deferred", False):
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


def _split_kind(kind):
    # "UnrecognizedArguments" -> ["unrecognized", "arguments"]
    words, current = [], ""
    for char in kind:
        if char.isupper() and current:
            words.append(current)
            current = ""
        current += char.lower()
    if current:
        words.append(current)
    return words


class ParseError(CommandException):
    """a prompt could not be turned into an invocation."""
    __kind__ = "ParseError"


class FlagConflictError(ParseError):
    """two mutually exclusive verbosity flags were both given."""
    __kind__ = "FlagConflict"
    __code__ = FaultCode.FLAG_CONFLICT


class UnrecognizedArgumentsError(ParseError):
    """tokens remained after a scope finished consuming what it knows."""
    __kind__ = "UnrecognizedArguments"
    __code__ = FaultCode.UNRECOGNIZED_ARGUMENTS


class ArityMismatchError(ParseError):
    """a subcommand received the wrong number of positional arguments."""
    __kind__ = "ArityMismatch"
    __code__ = FaultCode.ARITY_MISMATCH


class MissingOrAmbiguousTargetError(ParseError):
    """analysis-bench got zero, or more than one, benchmark target."""
    __kind__ = "MissingOrAmbiguousTarget"
    __code__ = FaultCode.MISSING_OR_AMBIGUOUS_TARGET


class MalformedValueError(ParseError):
    """a value could not be converted into its target shape."""
    __kind__ = "MalformedValue"
    __code__ = FaultCode.MALFORMED_VALUE


class MissingValueError(MalformedValueError):
    """an option was given without the value it requires."""
    __code__ = FaultCode.MISSING_VALUE

    def __init__(self, message=Unset, /, **options):
        super().__init__(message, **{"title": "missing value"} | options)


class UnhandledCommandError(CommandException):
    """no collaborator is registered for the parsed command."""
    __kind__ = "UnhandledCommand"
    __code__ = FaultCode.UNHANDLED_COMMAND


class ConfigurationError(CommandException):
    """the environment (log filter, log file) cannot be applied."""
    __kind__ = "ConfigurationError"
    __code__ = FaultCode.INVALID_CONFIGURATION


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see CommandException).
    - options are merged into the fault via copy.replace(fault, **options)
      before triggering.
    - without shell=True the fault is raised; with shell=True it is printed
      on stderr and the process exits with status 1 (unless deferred=True,
      in which case control returns to the caller).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "CommandException",
    "ParseError",
    "FlagConflictError",
    "UnrecognizedArgumentsError",
    "ArityMismatchError",
    "MissingOrAmbiguousTargetError",
    "MalformedValueError",
    "MissingValueError",
    "UnhandledCommandError",
    "ConfigurationError",
    "trigger",
)
