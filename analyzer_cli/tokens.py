"""
Token consumer: a destructive cursor over the process argument list.

Every recognized flag is removed from the stream as it is looked up, in the
order the caller chooses; whatever is left when a scope is done is by
definition unrecognized input and is reported uniformly by finish().

Primitives
- contains(*names)            presence-only flag, any alias (removes it)
- value(*names, type=str)     option value, '--name value' or '--name=value'
- subcommand()                first token, unless it looks like a flag
- remaining(type=str)         lazily converts and consumes every token left
- positional(count, ...)      consumes all positional tokens, exact arity
- finish()                    fails when anything is left

Each token remembers its 1-based ordinal position in the original argument
list so faults can point at it (“at third position”).
"""
import difflib

from .faults import (
    ArityMismatchError,
    MalformedValueError,
    MissingValueError,
    UnrecognizedArgumentsError,
)
from .utils import ordinal, prog


def _isflag(token):
    # "-" alone is a value (stdin)
    return token.startswith("-") and token != "-"


class Arguments:
    """
    Mutable view over not-yet-consumed tokens.

    The cursor has a single owner (the resolver) for the duration of a parse
    and is discarded afterwards.
    """

    def __init__(self, tokens=(), /):
        self._tokens = [(index, token) for index, token in enumerate(tokens, 1)]
        self._names = set()  # every alias looked up so far, for suggestions

    def __len__(self):
        return len(self._tokens)

    def __bool__(self):
        return bool(self._tokens)

    def __iter__(self):
        return iter(tuple(token for _, token in self._tokens))

    def __repr__(self):
        return f"Arguments({[token for _, token in self._tokens]!r})"

    def contains(self, *names):
        """
        Remove the first occurrence of any alias in `names`.

        Returns True when one was found. A repeated flag is consumed once;
        the repetition stays behind and is reported by finish().
        """
        self._names.update(names)
        for position, (_, token) in enumerate(self._tokens):
            if token in names:
                del self._tokens[position]
                return True
        return False

    def value(self, *names, type=str):
        """
        Remove and convert the value attached to the first alias in `names`.

        Both '--name value' and '--name=value' are accepted. Returns None when
        the option is absent.

        Raises
        - MissingValueError: the option is last, or its inline value is empty.
        - MalformedValueError: `type` rejected the value (ValueError/TypeError).
        """
        self._names.update(names)
        for position, (index, token) in enumerate(self._tokens):
            name, separator, inline = token.partition("=")
            if token in names:
                try:
                    _, value = self._tokens[position + 1]
                except IndexError:
                    raise MissingValueError(
                        "option %r at %s position requires a value" % (token, ordinal(index)),
                        option=token,
                        index=index,
                        hint="pass the value after a space (for example: %s <value>)" % token,
                    ) from None
                del self._tokens[position:position + 2]
                return self._convert(value, type, option=token, index=index)
            if separator and name in names:
                if not inline:
                    raise MissingValueError(
                        "option %r at %s position has an empty inline value" % (name, ordinal(index)),
                        option=name,
                        index=index,
                        hint="add a value after '=' (for example: %s=<value>)" % name,
                    )
                del self._tokens[position]
                return self._convert(inline, type, option=name, index=index)
        return None

    def subcommand(self):
        """
        Remove and return the first token when it does not look like a flag.
        """
        if self._tokens and not _isflag(token := self._tokens[0][1]):
            del self._tokens[0]
            return token
        return None

    def remaining(self, type=str):
        """
        Lazily consume every remaining token, converting each with `type`.

        Tokens are taken from the front one at a time, so a conversion
        failure leaves the tokens after the offending one untouched.
        """
        while self._tokens:
            index, token = self._tokens.pop(0)
            yield self._convert(token, type, index=index)

    def positional(self, count, /, metavar="PATH"):
        """
        Consume all remaining tokens as positionals; exactly `count` must exist.

        Raises
        - UnrecognizedArgumentsError: a flag-like token is still present.
        - ArityMismatchError: the number of positionals is not `count`.
        """
        if flags := [(index, token) for index, token in self._tokens if _isflag(token)]:
            raise self._unrecognized(flags)

        values = [token for _, token in self._tokens]
        self._tokens.clear()
        if len(values) != count:
            raise ArityMismatchError(
                "Invalid flags: expected %d <%s> argument%s, got %d%s" % (
                    count,
                    metavar,
                    "" if count == 1 else "s",
                    len(values),
                    " (%s)" % ", ".join(values) if values else "",
                ),
                expected=count,
                values=tuple(values),
                hint="pass exactly %d <%s>; run '%s --help' to see the expected usage" % (count, metavar, prog()),
            )
        return values

    def finish(self):
        """
        Fail when any token is still unconsumed; listing all of them.
        """
        if self._tokens:
            raise self._unrecognized(self._tokens)

    def _convert(self, value, type, *, index, option=None):
        try:
            return type(value)
        except (ValueError, TypeError) as error:
            where = "for %r at %s position" % (option, ordinal(index)) if option else "at %s position" % ordinal(index)
            raise MalformedValueError(
                "invalid value %r %s: %s" % (value, where, error),
                option=option,
                value=value,
                index=index,
                hint="run '%s --help' to see the accepted forms" % prog(),
            ) from error

    def _unrecognized(self, entries):
        tokens = [token for _, token in entries]
        index = entries[0][0]

        suggestions = []
        for token in tokens:
            if _isflag(token):
                suggestions = difflib.get_close_matches(token.partition("=")[0], sorted(self._names), 5)
                break
        try:
            hint = "did you mean %r? you can also run '%s --help' to see all options" % (suggestions[0], prog())
        except IndexError:
            hint = "remove the extra inputs; run '%s --help' to see valid forms" % prog()

        return UnrecognizedArgumentsError(
            "Invalid flags: %s" % ", ".join(tokens),
            tokens=tuple(tokens),
            index=index,
            suggestions=tuple(suggestions),
            hint=hint,
        )


__all__ = (
    "Arguments",
)
