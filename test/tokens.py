"""
Tests for the token consumer.

This module verifies the consumption primitives of `Arguments`:
- Presence flags are removed on lookup, one occurrence at a time.
- Option values are read in both '--name value' and '--name=value' forms.
- Positionals are taken with an exact arity; flags among them are rejected.
- Leftovers are reported by finish() with their positions and suggestions.
"""
import unittest
from unittest import TestCase

from analyzer_cli.faults import (
    ArityMismatchError,
    MalformedValueError,
    MissingValueError,
    UnrecognizedArgumentsError,
)
from analyzer_cli.tokens import Arguments


class ContainsTest(TestCase):

    def testFound(self) -> None:
        arguments = Arguments(["--parallel", "."])
        self.assertTrue(arguments.contains("--parallel"))
        self.assertEqual(list(arguments), ["."])

    def testAbsent(self) -> None:
        arguments = Arguments(["."])
        self.assertFalse(arguments.contains("--parallel"))
        self.assertEqual(len(arguments), 1)

    def testAnyAlias(self) -> None:
        arguments = Arguments(["--quiet"])
        self.assertTrue(arguments.contains("-q", "--quiet"))
        self.assertFalse(arguments)

    def testRepeatedFlagConsumedOnce(self) -> None:
        arguments = Arguments(["-v", "-v"])
        self.assertTrue(arguments.contains("-v"))
        self.assertEqual(list(arguments), ["-v"])

    def testExactMatchOnly(self) -> None:
        # '-vv' is not two '-v'
        arguments = Arguments(["-vv"])
        self.assertFalse(arguments.contains("-v"))
        self.assertTrue(arguments.contains("-vv"))


class ValueTest(TestCase):

    def testSpaced(self) -> None:
        arguments = Arguments(["--only", "foo", "."])
        self.assertEqual(arguments.value("-o", "--only"), "foo")
        self.assertEqual(list(arguments), ["."])

    def testInline(self) -> None:
        arguments = Arguments([".", "--only=foo=bar"])
        self.assertEqual(arguments.value("--only"), "foo=bar")
        self.assertEqual(list(arguments), ["."])

    def testAbsent(self) -> None:
        self.assertIsNone(Arguments(["."]).value("--only"))

    def testValueMayLookLikeAFlag(self) -> None:
        arguments = Arguments(["--debug", "-x"])
        self.assertEqual(arguments.value("--debug"), "-x")

    def testConversion(self) -> None:
        self.assertEqual(Arguments(["--depth", "3"]).value("--depth", type=int), 3)

    def testMissingValue(self) -> None:
        arguments = Arguments(["parse", "--log-file"])
        with self.assertRaises(MissingValueError) as context:
            arguments.value("--log-file")
        error = context.exception
        self.assertEqual(str(error), "option '--log-file' at second position requires a value")
        self.assertEqual(error.options["index"], 2)
        self.assertEqual(error.options["title"], "missing value")

    def testEmptyInlineValue(self) -> None:
        with self.assertRaises(MissingValueError) as context:
            Arguments(["--only="]).value("--only")
        self.assertEqual(context.exception.options["option"], "--only")

    def testMissingValueIsMalformed(self) -> None:
        self.assertTrue(issubclass(MissingValueError, MalformedValueError))

    def testConversionFailure(self) -> None:
        arguments = Arguments(["x", "--depth", "deep"])
        with self.assertRaises(MalformedValueError) as context:
            arguments.value("--depth", type=int)
        error = context.exception
        self.assertIn("'--depth' at second position", str(error))
        self.assertEqual(error.options["value"], "deep")
        self.assertIsInstance(error.__cause__, ValueError)


class SubcommandTest(TestCase):

    def testFirstToken(self) -> None:
        arguments = Arguments(["symbols", "--x"])
        self.assertEqual(arguments.subcommand(), "symbols")
        self.assertEqual(list(arguments), ["--x"])

    def testFlagIsNotASubcommand(self) -> None:
        arguments = Arguments(["--x", "symbols"])
        self.assertIsNone(arguments.subcommand())
        self.assertEqual(len(arguments), 2)

    def testEmpty(self) -> None:
        self.assertIsNone(Arguments().subcommand())


class RemainingTest(TestCase):

    def testConsumesEverything(self) -> None:
        arguments = Arguments(["a", "--b", "c"])
        self.assertEqual(list(arguments.remaining()), ["a", "--b", "c"])
        self.assertFalse(arguments)

    def testLazy(self) -> None:
        arguments = Arguments(["1", "2"])
        values = arguments.remaining(int)
        self.assertEqual(len(arguments), 2)
        self.assertEqual(next(values), 1)
        self.assertEqual(list(arguments), ["2"])

    def testFailureReportsPosition(self) -> None:
        arguments = Arguments(["ssr", "1", "two", "3"])
        arguments.subcommand()
        with self.assertRaises(MalformedValueError) as context:
            list(arguments.remaining(int))
        self.assertIn("at third position", str(context.exception))
        self.assertIsNone(context.exception.options["option"])
        self.assertEqual(list(arguments), ["3"])


class PositionalTest(TestCase):

    def testExact(self) -> None:
        arguments = Arguments(["./project"])
        self.assertEqual(arguments.positional(1), ["./project"])
        self.assertFalse(arguments)

    def testTooFew(self) -> None:
        with self.assertRaises(ArityMismatchError) as context:
            Arguments().positional(1)
        self.assertEqual(str(context.exception), "Invalid flags: expected 1 <PATH> argument, got 0")
        self.assertEqual(context.exception.options["expected"], 1)

    def testTooMany(self) -> None:
        with self.assertRaises(ArityMismatchError) as context:
            Arguments(["a", "b"]).positional(1)
        self.assertEqual(str(context.exception), "Invalid flags: expected 1 <PATH> argument, got 2 (a, b)")
        self.assertEqual(context.exception.options["values"], ("a", "b"))

    def testFlagsAreUnrecognized(self) -> None:
        with self.assertRaises(UnrecognizedArgumentsError) as context:
            Arguments(["a", "--bogus"]).positional(1)
        self.assertEqual(context.exception.options["tokens"], ("--bogus",))
        self.assertEqual(context.exception.options["index"], 2)

    def testLoneDashIsPositional(self) -> None:
        arguments = Arguments(["-"])
        self.assertEqual(arguments.positional(1), ["-"])


class FinishTest(TestCase):

    def testNothingLeft(self) -> None:
        self.assertIsNone(Arguments().finish())

    def testListsEveryLeftover(self) -> None:
        arguments = Arguments(["parse", "--foo", "bar"])
        arguments.subcommand()
        with self.assertRaises(UnrecognizedArgumentsError) as context:
            arguments.finish()
        error = context.exception
        self.assertEqual(str(error), "Invalid flags: --foo, bar")
        self.assertEqual(error.options["tokens"], ("--foo", "bar"))
        self.assertEqual(error.options["index"], 2)

    def testSuggestsQueriedNames(self) -> None:
        arguments = Arguments(["--rainbw"])
        arguments.contains("--rainbow")
        with self.assertRaises(UnrecognizedArgumentsError) as context:
            arguments.finish()
        self.assertEqual(context.exception.options["suggestions"][0], "--rainbow")
        self.assertIn("--rainbow", context.exception.hint)

    def testNoSuggestionForPositionals(self) -> None:
        arguments = Arguments(["main.rs"])
        arguments.contains("--rainbow")
        with self.assertRaises(UnrecognizedArgumentsError) as context:
            arguments.finish()
        self.assertEqual(context.exception.options["suggestions"], ())


if __name__ == "__main__":
    unittest.main()
