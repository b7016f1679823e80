"""
Environment configuration.

Two variables are read from the process environment and passed through to
the collaborators untouched; the parser never interprets them:

- ANALYZER_LOG      log filter, env-logger style: a comma separated list of
                    `target=level` items and/or a bare default `level`
                    (e.g. "warning,analyzer_cli.dispatch=debug").
- ANALYZER_PROFILE  enables the hierarchical profiler of the collaborators.
"""
import logging
import os
from dataclasses import dataclass

LOG_VARIABLE = "ANALYZER_LOG"
PROFILE_VARIABLE = "ANALYZER_PROFILE"

_LEVELS = {
    "off": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


@dataclass(frozen=True, slots=True)
class Environment:
    log_filter: str | None = None
    profile: str | None = None

    @classmethod
    def load(cls, environ=None, /):
        """read the configuration from `environ` (default: os.environ)."""
        environ = os.environ if environ is None else environ
        return cls(
            log_filter=environ.get(LOG_VARIABLE) or None,
            profile=environ.get(PROFILE_VARIABLE) or None,
        )


def parse_filter(spec, /):
    """
    Turn a log filter into a {logger_name: level} mapping.

    A bare level applies to the root logger and is stored under "".

    >>> parse_filter("info,analyzer_cli.dispatch=debug")
    {'': 20, 'analyzer_cli.dispatch': 10}

    Raises
    - ValueError: an item names an unknown level.
    """
    levels = {}
    for item in filter(None, map(str.strip, (spec or "").split(","))):
        target, separator, level = item.rpartition("=")
        if not separator:
            target, level = "", item
        elif not target.strip():
            raise ValueError(f"missing target in log filter item {item!r}")
        try:
            levels[target.strip()] = _LEVELS[level.strip().lower()]
        except KeyError:
            raise ValueError(f"unknown log level {level.strip()!r} in {LOG_VARIABLE}") from None
    return levels


__all__ = (
    "LOG_VARIABLE",
    "PROFILE_VARIABLE",
    "Environment",
    "parse_filter",
)
