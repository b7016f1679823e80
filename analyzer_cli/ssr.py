"""
Default structured search descriptors.

The front end does not understand structured search syntax; it only needs
something to hand each free-form token to. These descriptors split a token
into its coarse shape and keep the text verbatim for the real matcher.
They are the defaults of `parse(rule=..., pattern=...)` and can be replaced
by any callable taking one string and raising ValueError on bad input.
"""
from dataclasses import dataclass

DELIMITER = "==>"


@dataclass(frozen=True, slots=True)
class Pattern:
    """a search pattern, e.g. `$a.foo($b)`."""
    text: str

    @classmethod
    def parse(cls, text, /):
        if not text.strip():
            raise ValueError("search pattern cannot be empty")
        return cls(text)

    def __str__(self):
        return self.text


@dataclass(frozen=True, slots=True)
class Rule:
    """a search/replace rule, e.g. `$a.foo($b) ==> bar($a, $b)`."""
    search: str
    replacement: str

    @classmethod
    def parse(cls, text, /):
        search, delimiter, replacement = text.partition(DELIMITER)
        if not delimiter:
            raise ValueError(f"cannot find delimiter `{DELIMITER}`")
        if DELIMITER in replacement:
            raise ValueError(f"found multiple `{DELIMITER}` delimiters")
        if not search.strip():
            raise ValueError("rule has an empty search pattern")
        return cls(search.strip(), replacement.strip())

    def __str__(self):
        return f"{self.search} {DELIMITER} {self.replacement}"


__all__ = (
    "Pattern",
    "Rule",
)
