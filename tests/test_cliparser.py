#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Functional test-suite for the *cliparser* classifier.

• Covers every classification branch and each of the six error kinds.
• Exercises the boundary tokens ('-', '--', '---', '--=x', '--k=').
• Checks immutability of results, fail-fast behaviour and re-serialisation.
"""
from __future__ import annotations

import os
import unittest
from pathlib import Path

# Dynamically ensure the src/ tree is importable
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in os.sys.path:
    os.sys.path.insert(0, str(SRC_ROOT))

import cliparser  # noqa: E402
from cliparser import (  # noqa: E402
    ArgumentClassifier,
    DashesMalformed,
    ErrorKind,
    FlagMalformed,
    FlagWithSign,
    PairBadSign,
    PairMalformed,
    PairMissingSign,
    ParseError,
    ParsedArguments,
    ParserOptions,
    TokenKind,
    classify_token,
    parse,
    try_parse,
)


class ParseBaseTest(unittest.TestCase):
    """Utility mix-in providing common assertions."""

    def assertParseError(self, tokens, err_cls, token: str) -> ParseError:
        with self.assertRaises(err_cls) as cm:
            parse(tokens)
        self.assertEqual(cm.exception.token, token)
        return cm.exception


# --------------------------------------------------------------------------- #
#  1. Token categories                                                        #
# --------------------------------------------------------------------------- #
class ClassifyTokenTests(unittest.TestCase):
    def test_prefix_decides_category(self) -> None:
        cases = {
            "file.txt": TokenKind.POSITIONAL,
            "": TokenKind.POSITIONAL,
            "a-b=c": TokenKind.POSITIONAL,
            "-v": TokenKind.FLAG,
            "-": TokenKind.FLAG,
            "--k=v": TokenKind.PAIR,
            "--": TokenKind.PAIR,
            "---": TokenKind.INVALID,
            "----x=y": TokenKind.INVALID,
        }
        for tok, kind in cases.items():
            with self.subTest(tok=tok):
                self.assertIs(classify_token(tok), kind)


# --------------------------------------------------------------------------- #
#  2. Positionals                                                             #
# --------------------------------------------------------------------------- #
class PositionalTests(unittest.TestCase):
    def test_single_positional_kept_verbatim(self) -> None:
        for tok in ("file.txt", "a=b", "x-y", "", "John Smith", "ñandú"):
            with self.subTest(tok=tok):
                parsed = parse([tok])
                self.assertEqual(parsed.positionals, (tok,))
                self.assertEqual(parsed.flags, frozenset())
                self.assertEqual(dict(parsed.pairs), {})

    def test_order_and_duplicates_preserved(self) -> None:
        parsed = parse(["b", "a", "b", "-x", "c"])
        self.assertEqual(parsed.positionals, ("b", "a", "b", "c"))

    def test_empty_input(self) -> None:
        self.assertEqual(parse([]), ParsedArguments())


# --------------------------------------------------------------------------- #
#  3. Flags                                                                   #
# --------------------------------------------------------------------------- #
class FlagTests(ParseBaseTest):
    def test_flag_name_after_dash(self) -> None:
        parsed = parse(["-verbose"])
        self.assertEqual(parsed.flags, frozenset({"verbose"}))
        self.assertTrue(parsed.has_flag("verbose"))
        self.assertFalse(parsed.has_flag("-verbose"))

    def test_repeated_flag_collapses(self) -> None:
        parsed = parse(["-q", "-q", "-q"])
        self.assertEqual(parsed.flags, frozenset({"q"}))

    def test_single_character_flag(self) -> None:
        self.assertEqual(parse(["-x"]).flags, frozenset({"x"}))

    def test_flag_with_equal_sign_rejected(self) -> None:
        self.assertParseError(["-bad=flag"], FlagWithSign, "-bad=flag")
        self.assertParseError(["-="], FlagWithSign, "-=")
        self.assertParseError(["-x="], FlagWithSign, "-x=")

    def test_bare_dash_reports_flag_with_sign(self) -> None:
        err = self.assertParseError(["-"], FlagWithSign, "-")
        self.assertIs(err.kind, ErrorKind.FLAG_WITH_SIGN)

    def test_bare_dash_strict_reports_malformed(self) -> None:
        classifier = ArgumentClassifier(ParserOptions(strict_flags=True))
        with self.assertRaises(FlagMalformed) as cm:
            classifier.parse(["-"])
        self.assertEqual(cm.exception.token, "-")

    def test_strict_mode_keeps_sign_error_for_equal_sign(self) -> None:
        classifier = ArgumentClassifier(ParserOptions(strict_flags=True))
        with self.assertRaises(FlagWithSign):
            classifier.parse(["-a=b"])


# --------------------------------------------------------------------------- #
#  4. Key-value pairs                                                         #
# --------------------------------------------------------------------------- #
class PairTests(ParseBaseTest):
    def test_basic_pair(self) -> None:
        parsed = parse(["--level=3"])
        self.assertEqual(dict(parsed.pairs), {"level": "3"})
        self.assertEqual(parsed.get("level"), "3")
        self.assertIsNone(parsed.get("missing"))
        self.assertEqual(parsed.get("missing", "d"), "d")

    def test_minimal_pair(self) -> None:
        self.assertEqual(dict(parse(["--k=v"]).pairs), {"k": "v"})

    def test_value_with_spaces(self) -> None:
        self.assertEqual(dict(parse(["--name=John Smith"]).pairs), {"name": "John Smith"})

    def test_split_at_first_equal_sign(self) -> None:
        self.assertEqual(dict(parse(["--key=a=b"]).pairs), {"key": "a=b"})
        self.assertEqual(dict(parse(["--k==v"]).pairs), {"k": "=v"})

    def test_last_write_wins(self) -> None:
        parsed = parse(["--k=v1", "x", "--k=v2"])
        self.assertEqual(dict(parsed.pairs), {"k": "v2"})

    def test_key_may_contain_dashes(self) -> None:
        self.assertEqual(dict(parse(["--dry-run=yes"]).pairs), {"dry-run": "yes"})

    def test_missing_sign(self) -> None:
        self.assertParseError(["--verbose"], PairMissingSign, "--verbose")

    def test_double_dash_alone(self) -> None:
        self.assertParseError(["--"], PairMissingSign, "--")

    def test_empty_key(self) -> None:
        self.assertParseError(["--=x"], PairBadSign, "--=x")
        self.assertParseError(["--=value"], PairBadSign, "--=value")
        self.assertParseError(["--="], PairBadSign, "--=")

    def test_empty_value(self) -> None:
        self.assertParseError(["--k="], PairBadSign, "--k=")
        self.assertParseError(["--key="], PairBadSign, "--key=")

    def test_equal_sign_position_checked_before_length(self) -> None:
        # All three are shorter than "--k=v"; the sign position decides the kind.
        for tok in ("--=", "--=x", "--k="):
            with self.subTest(tok=tok):
                self.assertParseError([tok], PairBadSign, tok)


# --------------------------------------------------------------------------- #
#  5. Dashes and fail-fast                                                    #
# --------------------------------------------------------------------------- #
class DashesTests(ParseBaseTest):
    def test_three_or_more_dashes(self) -> None:
        for tok in ("---", "---x", "---k=v", "-----"):
            with self.subTest(tok=tok):
                self.assertParseError([tok], DashesMalformed, tok)

    def test_first_error_wins(self) -> None:
        self.assertParseError(["-ok", "---bad", "-=x"], DashesMalformed, "---bad")
        self.assertParseError(["a", "--k", "---"], PairMissingSign, "--k")

    def test_try_parse_reports_error_without_result(self) -> None:
        result, err = try_parse(["-ok", "---bad"])
        self.assertIsNone(result)
        self.assertEqual(err, DashesMalformed("---bad"))

    def test_try_parse_success(self) -> None:
        result, err = try_parse(["-ok"])
        self.assertIsNone(err)
        self.assertEqual(result.flags, frozenset({"ok"}))

    def test_remaining_tokens_not_consumed(self) -> None:
        seen = []

        def gen():
            for tok in ("a", "---", "b"):
                seen.append(tok)
                yield tok

        with self.assertRaises(DashesMalformed):
            parse(gen())
        self.assertEqual(seen, ["a", "---"])

    def test_non_string_token_is_type_error(self) -> None:
        with self.assertRaises(TypeError):
            parse(["ok", 3])  # type: ignore[list-item]


# --------------------------------------------------------------------------- #
#  6. Scenarios                                                               #
# --------------------------------------------------------------------------- #
class ScenarioTests(unittest.TestCase):
    def test_program_style_argv(self) -> None:
        parsed = parse(["prog", "-verbose", "--level=3", "file.txt"])
        self.assertEqual(parsed.positionals, ("prog", "file.txt"))
        self.assertEqual(parsed.flags, frozenset({"verbose"}))
        self.assertEqual(dict(parsed.pairs), {"level": "3"})

    def test_classifier_is_reusable(self) -> None:
        classifier = ArgumentClassifier()
        first = classifier.parse(["-a", "--k=1"])
        second = classifier.parse(["b"])
        self.assertEqual(first.flags, frozenset({"a"}))
        self.assertEqual(second, ParsedArguments(positionals=["b"]))

    def test_package_exports_version(self) -> None:
        self.assertIsInstance(cliparser.__version__, str)


# --------------------------------------------------------------------------- #
#  7. Result container                                                        #
# --------------------------------------------------------------------------- #
class ParsedArgumentsTests(unittest.TestCase):
    def test_result_is_immutable(self) -> None:
        parsed = parse(["a", "-f", "--k=v"])
        with self.assertRaises(AttributeError):
            parsed.flags = frozenset()  # type: ignore[misc]
        with self.assertRaises(TypeError):
            parsed.pairs["k"] = "other"  # type: ignore[index]
        self.assertIsInstance(parsed.positionals, tuple)
        self.assertIsInstance(parsed.flags, frozenset)

    def test_constructor_copies_inputs(self) -> None:
        pairs = {"k": "v"}
        parsed = ParsedArguments(positionals=["a"], flags={"f"}, pairs=pairs)
        pairs["k"] = "changed"
        self.assertEqual(parsed.get("k"), "v")

    def test_reserialised_tokens_parse_to_same_result(self) -> None:
        original = parse(["prog", "-b", "x", "-a", "--k=a=b", "--name=John Smith", "-b"])
        tokens = original.to_tokens()
        self.assertEqual(tokens, ["prog", "x", "-a", "-b", "--k=a=b", "--name=John Smith"])
        self.assertEqual(parse(tokens), original)

    def test_as_dict_and_json(self) -> None:
        parsed = parse(["p", "-z", "-a", "--k=v"])
        self.assertEqual(
            parsed.as_dict(),
            {"positionals": ["p"], "flags": ["a", "z"], "pairs": {"k": "v"}},
        )
        self.assertEqual(
            parsed.to_json(indent=None),
            '{"positionals": ["p"], "flags": ["a", "z"], "pairs": {"k": "v"}}',
        )


# --------------------------------------------------------------------------- #
#  8. Error messages                                                          #
# --------------------------------------------------------------------------- #
class ErrorMessageTests(unittest.TestCase):
    def test_message_templates(self) -> None:
        cases = [
            (FlagWithSign("-a=b"),
             "Equal signs not allowed in flags: `-a=b`\nProper syntax: `./my_program -flag`"),
            (FlagMalformed("-"),
             "Malformed flag: `-`\nProper syntax: `./my_program -flag`"),
            (PairMissingSign("--k"),
             "Key-value pair arguments need an equal sign: `--k`\n"
             "Proper syntax: `./my_program --key=value`"),
            (PairBadSign("--k="),
             "Improper use of equal sign in key-value pair: `--k=`\n"
             "Proper syntax: `./my_program --key=value`"),
            (PairMalformed("--x"),
             "Malformed key-value pair: `--x`\nProper syntax: `./my_program --key=value`"),
            (DashesMalformed("---x"),
             "Arguments cannot start with 3 or more dash lines: `---x`"),
        ]
        for err, expected in cases:
            with self.subTest(kind=err.kind):
                self.assertEqual(str(err), expected)

    def test_describe_with_custom_program(self) -> None:
        err = PairBadSign("--=x")
        self.assertEqual(
            err.describe(prog="tool"),
            "Improper use of equal sign in key-value pair: `--=x`\nProper syntax: `tool --key=value`",
        )
        self.assertEqual(err.headline, "Improper use of equal sign in key-value pair: `--=x`")

    def test_errors_are_value_errors_without_cause(self) -> None:
        with self.assertRaises(ValueError) as cm:
            parse(["-a=b"])
        self.assertIsNone(cm.exception.__cause__)
        self.assertEqual(cm.exception.kind.value, "FlagWithSign")

    def test_error_equality_and_repr(self) -> None:
        self.assertEqual(FlagWithSign("-"), FlagWithSign("-"))
        self.assertNotEqual(FlagWithSign("-"), FlagMalformed("-"))
        self.assertNotEqual(FlagWithSign("-"), FlagWithSign("-x="))
        self.assertEqual(repr(PairBadSign("--k=")), "PairBadSign('--k=')")

    def test_six_kinds(self) -> None:
        self.assertEqual(len(ErrorKind), 6)

    def test_each_kind_has_one_exception_class(self) -> None:
        classes = ParseError.__subclasses__()
        self.assertEqual({cls.kind for cls in classes}, set(ErrorKind))
        self.assertEqual(len(classes), len(ErrorKind))
        for cls in classes:
            with self.subTest(kind=cls.kind):
                self.assertEqual(cls.__name__, cls.kind.value)
                self.assertIs(cls("tok").kind, cls.kind)


if __name__ == "__main__":
    unittest.main()
