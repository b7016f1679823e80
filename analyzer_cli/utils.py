"""
analyzer-cli utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the token consumer, the resolver and the
  fault layer, kept here so their semantics stay identical everywhere.

Overview
- UnsetType / Unset
  • Singleton sentinel meaning “value not provided” without conflating with None.
  • Falsey, printable as "Unset", non-subclassable.

- ordinal(number)
  • Human-friendly ordinal labels ("first", "second", "11th") used to make
    every diagnostic position-first.

- tokenize(prompt)
  • Normalize a prompt (Unset, shell-like string, iterable of strings) into
    the raw token list the token consumer works on.

Quick examples
    >>> ordinal(3)
    'third'
    >>> tokenize("analysis-stats --parallel ./project")
    ['analysis-stats', '--parallel', './project']
"""
import functools
import shlex
import sys
from collections.abc import Iterable
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    A single instance, Unset, is exposed for use as the default of parameters
    where None is a legitimate user value (for example a prompt that may be
    an empty iterable versus "read the process arguments").

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a singleton per process.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


@functools.lru_cache(maxsize=None, typed=True)
def ordinal(number, /):
    """
    Return a human-friendly ordinal label for a 1-based position.

    - 1..10 are rendered as words ("first"…"tenth") for nicer phrasing.
    - Other numbers use numeric ordinals with correct English suffixes.
    """
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError("ordinal() argument must be an integer")
    if number < 1:
        raise ValueError("ordinal() argument must be a positive integer")

    try:
        return {
            1: "first",
            2: "second",
            3: "third",
            4: "fourth",
            5: "fifth",
            6: "sixth",
            7: "seventh",
            8: "eighth",
            9: "ninth",
            10: "tenth",
        }[number]
    except KeyError:
        pass

    # 11th, 12th, 13th (and 111th, 112th, 113th, …)
    if 10 < number % 100 < 20:
        return f"{number}th"

    return f"{number}%s" % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def prog():
    """
    Program name shown in diagnostics and hints.

    The host application can override it with a __prog__ attribute in __main__.
    """
    return getattr(__import__("__main__"), "__prog__", "analyzer")


def tokenize(prompt=Unset, /):
    """
    Normalize a prompt into a list of raw tokens.

    Parameters
    - prompt:
      • Unset: read tokens from sys.argv[1:] (read once, at call time).
      • str: shell-like string; split via shlex.split.
      • Iterable[str]: pre-tokenized sequence, taken verbatim.

    Notes
    - Pre-tokenized items are not trimmed: an argument such as ' ==> ' is
      meaningful to the structured search parser and must reach it untouched.

    Raises
    - TypeError: when prompt is not Unset/str/Iterable[str], or when an
      iterable contains a non-string element.
    - ValueError: when a shell-like string cannot be split (unbalanced quotes,
      trailing escape).
    """
    if prompt is Unset:
        return sys.argv[1:]
    if isinstance(prompt, str):
        return shlex.split(prompt)
    if isinstance(prompt, Iterable):
        tokens = list(prompt)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("tokenize() argument must be a string or an iterable of strings")
        return tokens
    raise TypeError("tokenize() argument must be a string or an iterable of strings")


__all__ = (
    # Functions
    "ordinal",
    "prog",
    "tokenize",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
