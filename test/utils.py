"""
Tests for the shared helpers.

This module verifies:
- The Unset sentinel (singleton, falsy, final).
- Ordinal labels used in every position-first message.
- Prompt tokenization for the three accepted prompt shapes.
"""
import unittest
from unittest import TestCase
from unittest.mock import patch

from analyzer_cli.utils import *


class UnsetTest(TestCase):

    def testSingleton(self) -> None:
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self) -> None:
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self) -> None:
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})


class OrdinalTest(TestCase):

    def testWords(self) -> None:
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(3), "third")
        self.assertEqual(ordinal(10), "tenth")

    def testSuffixes(self) -> None:
        table = {11: "11th", 12: "12th", 13: "13th", 21: "21st", 22: "22nd", 23: "23rd", 101: "101st", 111: "111th"}
        for number, label in table.items():
            with self.subTest(number=number):
                self.assertEqual(ordinal(number), label)

    def testInvalid(self) -> None:
        for value, error in ((0, ValueError), (-1, ValueError), (True, TypeError), ("1", TypeError)):
            with self.subTest(value=value):
                with self.assertRaises(error):
                    ordinal(value)


class TokenizeTest(TestCase):

    def testArgv(self) -> None:
        with patch("sys.argv", ["analyzer", "-v", "symbols"]):
            self.assertEqual(tokenize(), ["-v", "symbols"])

    def testShellString(self) -> None:
        self.assertEqual(tokenize("ssr 'a ==> b'"), ["ssr", "a ==> b"])

    def testUnbalancedQuotes(self) -> None:
        with self.assertRaises(ValueError):
            tokenize("parse 'x")

    def testIterableIsVerbatim(self) -> None:
        self.assertEqual(tokenize(("ssr", " ==> ")), ["ssr", " ==> "])
        self.assertEqual(tokenize(iter([])), [])

    def testInvalid(self) -> None:
        for prompt in (None, 3, ["a", 1]):
            with self.subTest(prompt=prompt):
                with self.assertRaises(TypeError):
                    tokenize(prompt)


if __name__ == "__main__":
    unittest.main()
