# coding: utf-8
"""
    regex_lite.tests
    ~~~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD, see LICENSE.rst
"""
import io
import time
from unittest import TestCase, mock
from contextlib import contextmanager, redirect_stdout, redirect_stderr
from concurrent.futures import ThreadPoolExecutor

from regex_lite import is_match
from regex_lite.parser import (
    parse, Parser, ParserError, Language, DEFAULT_LANGUAGE
)
from regex_lite.ast import Literal, Wildcard, Pattern, INVALID
from regex_lite.matcher import TableMatcher, matches, code_points
from regex_lite.fa import StateSetMatcher
from regex_lite.__main__ import main


class TestAtoms(TestCase):
    def test_literal_equality(self):
        self.assertEqual(Literal("a"), Literal("a"))
        self.assertNotEqual(Literal("a"), Literal("b"))
        self.assertNotEqual(Literal("a"), Literal("a", repeatable=True))
        self.assertNotEqual(Literal("a"), Wildcard())
        self.assertEqual(hash(Literal("a")), hash(Literal("a")))

    def test_wildcard_equality(self):
        self.assertEqual(Wildcard(), Wildcard())
        self.assertNotEqual(Wildcard(), Wildcard(repeatable=True))

    def test_literal_requires_single_character(self):
        with self.assertRaises(ValueError):
            Literal("ab")
        with self.assertRaises(ValueError):
            Literal("")

    def test_immutable(self):
        atom = Literal("a")
        with self.assertRaises(AttributeError):
            atom.repeatable = True
        with self.assertRaises(AttributeError):
            Pattern().atoms = ()

    def test_repeated(self):
        self.assertEqual(Literal("a").repeated(), Literal("a", repeatable=True))
        self.assertEqual(Wildcard().repeated(), Wildcard(repeatable=True))

    def test_matches_all(self):
        self.assertEqual(Literal("a").matches_all("aba"), [True, False, True])
        self.assertEqual(Wildcard().matches_all("ab"), [True, True])

    def test_is_nullable(self):
        self.assertTrue(Pattern().is_nullable)
        self.assertTrue(parse("a*.*").is_nullable)
        self.assertFalse(parse("a*b").is_nullable)

    def test_invalid_is_not_a_pattern(self):
        self.assertNotEqual(Pattern(), INVALID)
        self.assertEqual(repr(INVALID), "INVALID")


class TestParser(TestCase):
    def test_empty(self):
        self.assertEqual(parse(""), Pattern())

    def test_literal(self):
        self.assertEqual(parse("a"), Pattern([Literal("a")]))

    def test_wildcard(self):
        self.assertEqual(parse("."), Pattern([Wildcard()]))

    def test_zero_or_more(self):
        self.assertEqual(
            parse("a*"),
            Pattern([Literal("a", repeatable=True)])
        )
        self.assertEqual(
            parse(".*"),
            Pattern([Wildcard(repeatable=True)])
        )

    def test_sequence(self):
        self.assertEqual(
            parse("ab*c"),
            Pattern([
                Literal("a"),
                Literal("b", repeatable=True),
                Literal("c")
            ])
        )

    def test_code_points(self):
        self.assertEqual(
            parse("🔥*."),
            Pattern([Literal("🔥", repeatable=True), Wildcard()])
        )

    def test_zero_or_more_missing_repeatable(self):
        with self.assertRaises(ParserError) as context:
            Parser().parse("*")
        exception = context.exception
        self.assertEqual(
            exception.reason,
            "* is not preceded by a repeatable expression"
        )
        self.assertEqual(exception.annotation, (
            "*\n"
            "^"
        ))

    def test_zero_or_more_stacked(self):
        with self.assertRaises(ParserError) as context:
            Parser().parse("a**")
        exception = context.exception
        self.assertEqual(exception.reason, "* is preceded by another *")
        self.assertEqual(exception.annotation, (
            "a**\n"
            "  ^"
        ))
        self.assertEqual(str(exception), (
            "* is preceded by another *\n"
            "a**\n"
            "  ^"
        ))

    def test_invalid(self):
        for pattern in ["*", "*a", "a**", "ab**c", ".***"]:
            self.assertIs(parse(pattern), INVALID, pattern)

    def test_stacked_zero_or_more_is_not_normalized(self):
        self.assertIs(parse("a**"), INVALID)
        self.assertIsNot(parse("a*"), INVALID)

    def test_invalid_is_logged(self):
        with self.assertLogs("regex_lite.parser", level="DEBUG") as logs:
            parse("*a")
        self.assertEqual(len(logs.records), 1)
        self.assertIn("rejected pattern '*a'", logs.output[0])

    def test_language(self):
        language = Language(any="?", zero_or_more="+")
        self.assertEqual(
            parse("a+?.", language),
            Pattern([
                Literal("a", repeatable=True),
                Wildcard(),
                Literal(".")
            ])
        )
        self.assertIs(parse("+", language), INVALID)
        self.assertIs(parse("a++", language), INVALID)

    def test_language_validation(self):
        with self.assertRaises(ValueError):
            Language(any="..")
        with self.assertRaises(ValueError):
            Language(zero_or_more="")
        with self.assertRaises(ValueError):
            Language(any="*", zero_or_more="*")

    def test_language_equality(self):
        self.assertEqual(Language(), DEFAULT_LANGUAGE)
        self.assertNotEqual(Language(any="?"), DEFAULT_LANGUAGE)

    def test_to_string(self):
        for string in ["", "a", ".", "ab*.c.*", "🔥*x"]:
            self.assertEqual(DEFAULT_LANGUAGE.to_string(parse(string)), string)

    def test_to_string_invalid(self):
        with self.assertRaises(ValueError):
            DEFAULT_LANGUAGE.to_string(INVALID)
        with self.assertRaises(ValueError):
            DEFAULT_LANGUAGE.to_string(Pattern([Literal("*")]))


class PatternTestWrapper(object):
    def __init__(self, pattern):
        self.pattern = pattern
        self.parsed = parse(pattern)

    @property
    def matchers(self):
        yield TableMatcher(self.parsed)
        yield StateSetMatcher(self.parsed)

    def assertMatches(self, string):
        assert is_match(self.pattern, string), (self.pattern, string)
        for matcher in self.matchers:
            assert matcher.matches(string), (matcher, string)

    def assertMatchesAll(self, strings):
        for string in strings:
            self.assertMatches(string)

    def assertNotMatches(self, string):
        assert not is_match(self.pattern, string), (self.pattern, string)
        for matcher in self.matchers:
            assert not matcher.matches(string), (matcher, string)

    def assertNotMatchesAny(self, strings):
        for string in strings:
            self.assertNotMatches(string)


class TestMatcher(TestCase):
    @contextmanager
    def pattern(self, pattern):
        yield PatternTestWrapper(pattern)

    def test_empty(self):
        with self.pattern("") as pattern:
            pattern.assertMatches("")
            pattern.assertNotMatchesAny(["a", " ", "🔥"])

    def test_literal(self):
        with self.pattern("abc") as pattern:
            pattern.assertMatches("abc")
            pattern.assertNotMatchesAny(["ab", "abcd", "", "abd"])

    def test_full_match(self):
        with self.pattern("a") as pattern:
            pattern.assertNotMatchesAny(["ba", "ab"])
        with self.pattern(".*a") as pattern:
            pattern.assertMatches("ba")
        with self.pattern("a.*") as pattern:
            pattern.assertMatches("ab")

    def test_wildcard(self):
        with self.pattern(".") as pattern:
            pattern.assertMatches("x")
            pattern.assertNotMatchesAny(["", "xy"])
        with self.pattern("..") as pattern:
            pattern.assertMatches("xy")

    def test_zero_or_more(self):
        with self.pattern("a*") as pattern:
            pattern.assertMatchesAll(["", "a", "aaaa"])
            pattern.assertNotMatchesAny(["b", "aab"])

    def test_wildcard_zero_or_more(self):
        with self.pattern(".*") as pattern:
            pattern.assertMatchesAll(["", "abc", "🔥"])
        with self.pattern(".*.*.*") as pattern:
            pattern.assertMatchesAll(["", "abc"])

    def test_sequence(self):
        with self.pattern("ab*c") as pattern:
            pattern.assertMatchesAll(["ac", "abc", "abbbc"])
            pattern.assertNotMatchesAny(["abbd", "ab", "bc"])

    def test_classic(self):
        with self.pattern("c*a*b") as pattern:
            pattern.assertMatches("aab")
        with self.pattern("mis*is*p*.") as pattern:
            pattern.assertNotMatches("mississippi")
        with self.pattern("mis*is*ip*.") as pattern:
            pattern.assertMatches("mississippi")

    def test_greedy_and_minimal(self):
        with self.pattern("a.*b") as pattern:
            pattern.assertMatchesAll(["aXXXb", "ab"])
        with self.pattern("a.*b.*c") as pattern:
            pattern.assertMatches("aXbYc")

    def test_zero_or_more_at_ends(self):
        with self.pattern("abc.*") as pattern:
            pattern.assertMatchesAll(["abc", "abcdef"])
        with self.pattern(".*abc") as pattern:
            pattern.assertMatchesAll(["abc", "xyzabc"])
            pattern.assertNotMatches("abcx")

    def test_alternating_zero_or_more(self):
        with self.pattern(".*a.*a.*a.*a.*a") as pattern:
            pattern.assertMatchesAll(["xaxaxaxaxa", "aaaaa"])
            pattern.assertNotMatchesAny(["xaxaxaxaxax", "aaaa"])

    def test_invalid(self):
        with self.pattern("*") as pattern:
            pattern.assertNotMatches("")
        with self.pattern("*a") as pattern:
            pattern.assertNotMatchesAny(["a", "*a"])
        with self.pattern("a**") as pattern:
            pattern.assertNotMatchesAny(["", "a", "aa"])

    def test_code_points(self):
        with self.pattern("..") as pattern:
            pattern.assertMatches("🔥a")
            pattern.assertNotMatches("🔥")
        with self.pattern("🔥*.") as pattern:
            pattern.assertMatchesAll(["a", "🔥🔥a", "🔥"])
            pattern.assertNotMatches("")

    def test_bytes(self):
        self.assertTrue(is_match(".", "🔥".encode("utf-8")))
        self.assertTrue(is_match("..".encode("utf-8"), "é!".encode("utf-8")))
        self.assertFalse(is_match("....", "🔥".encode("utf-8")))
        self.assertTrue(StateSetMatcher(parse(".")).matches("é".encode("utf-8")))

    def test_code_points_type(self):
        self.assertEqual(code_points(b"\xc3\xa9"), "é")
        with self.assertRaises(TypeError):
            is_match(".", 1)
        with self.assertRaises(UnicodeDecodeError):
            is_match(".", b"\xff")

    def test_matches(self):
        self.assertTrue(matches(parse("a*b"), "aab"))
        self.assertFalse(matches(INVALID, ""))
        self.assertTrue(matches(Pattern(), ""))


class TestTableMatcher(TestCase):
    def test_first_row(self):
        matcher = TableMatcher(parse("a"))
        self.assertEqual(
            matcher.next_row(Literal("a"), [True, False, False], "aa"),
            [False, True, False]
        )

    def test_repeatable_row(self):
        matcher = TableMatcher(parse("a*"))
        self.assertEqual(
            matcher.next_row(
                Literal("a", repeatable=True),
                [True, False, False, False],
                "aab"
            ),
            [True, True, True, False]
        )

    def test_empty_string_column(self):
        for string, expected in [("a*b*.*", True), ("a*b", False)]:
            self.assertEqual(TableMatcher(parse(string)).matches(""), expected)

    def test_empty_string_is_decided_by_nullability(self):
        with mock.patch.object(
            Pattern, "is_nullable", new_callable=mock.PropertyMock,
            return_value=True
        ) as is_nullable:
            self.assertTrue(TableMatcher(parse("a")).matches(""))
        self.assertTrue(is_nullable.called)
        self.assertFalse(TableMatcher(parse("a")).matches(""))


class TestStateSetMatcher(TestCase):
    def test_epsilon_closure(self):
        matcher = StateSetMatcher(parse("a*b*c"))
        self.assertEqual(matcher.epsilon_closure([0]), frozenset([0, 1, 2]))
        self.assertEqual(matcher.epsilon_closure([2]), frozenset([2]))

    def test_transition(self):
        matcher = StateSetMatcher(parse("a*b"))
        states = matcher.epsilon_closure([0])
        self.assertEqual(matcher.transition(states, "a"), frozenset([0, 1]))
        self.assertEqual(matcher.transition(states, "b"), frozenset([2]))
        self.assertEqual(matcher.transition(states, "c"), frozenset())
        self.assertIn((states, "a"), matcher.movements)

    def test_invalid(self):
        self.assertFalse(StateSetMatcher(INVALID).matches(""))

    def test_movements_are_per_call(self):
        matcher = StateSetMatcher(parse(".*"))
        self.assertTrue(matcher.matches("abc"))
        self.assertEqual(len(matcher.movements), 3)
        self.assertTrue(matcher.matches("xy"))
        self.assertEqual(
            set(character for _, character in matcher.movements),
            set("xy")
        )


class TestComplexity(TestCase):
    def assertFast(self, pattern, string, expected, limit=0.1):
        start = time.perf_counter()
        result = is_match(pattern, string)
        elapsed = time.perf_counter() - start
        self.assertEqual(result, expected)
        self.assertLess(elapsed, limit)

    def test_chained_zero_or_more(self):
        pattern = "a*" * 10 + "a" * 10
        self.assertFast(pattern, "a" * 20000, True)
        self.assertFast(pattern, "a" * 19999 + "b", False)
        self.assertFast(pattern, "a" * 9, False)

    def test_chained_wildcard_zero_or_more(self):
        pattern = ".*" * 10 + "b" * 10
        self.assertFast(pattern, "a" * 30000, False)
        self.assertFast(pattern, "a" * 29990 + "b" * 10, True)

    def test_nested_zero_or_more(self):
        pattern = PatternTestWrapper("a*" * 25 + "b")
        pattern.assertNotMatches("a" * 25)
        pattern.assertMatches("a" * 25 + "b")

    def test_wildcard_zero_or_more(self):
        pattern = PatternTestWrapper(".*" * 20 + "b")
        pattern.assertNotMatches("a" * 40)
        pattern.assertMatches("a" * 40 + "b")

    def test_long_string(self):
        string = "".join(chr(ord("a") + i % 26) for i in range(10000))
        self.assertFast(".*", string, True)
        self.assertTrue(StateSetMatcher(parse(".*")).matches(string))

    def test_many_zero_or_more(self):
        pattern = PatternTestWrapper("a*b*c*d*e*f*g*h*i*j*")
        pattern.assertMatches("aabbccddeeffgghhiijj")
        pattern.assertNotMatches("ba")
        pattern = "".join(chr(i) + "*" for i in range(ord("a"), ord("z")))
        self.assertFast(
            pattern + "z", "this is a test string without the pattern", False
        )

    def test_concurrent(self):
        cases = [("a*b", "aaab", True), (".*x", "abc", False)] * 50
        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(
                lambda case: is_match(case[0], case[1]) == case[2], cases
            ))
        self.assertTrue(all(results))


class TestMain(TestCase):
    def run_main(self, *args):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            status = main(["regex_lite"] + list(args))
        return status, stdout.getvalue(), stderr.getvalue()

    def test_match(self):
        self.assertEqual(self.run_main("match", "a*", "aaa"), (0, "true\n", ""))

    def test_no_match(self):
        self.assertEqual(self.run_main("match", "a*", "b"), (1, "false\n", ""))

    def test_verbose_explains_invalid_pattern(self):
        with mock.patch("logging.basicConfig") as basic_config:
            status, stdout, stderr = self.run_main(
                "match", "--verbose", "a**", ""
            )
        self.assertEqual(status, 1)
        self.assertEqual(stdout, "false\n")
        self.assertIn("* is preceded by another *", stderr)
        self.assertIn("a**\n  ^", stderr)
        self.assertTrue(basic_config.called)

    def test_verbose_logs_parsed_pattern(self):
        with mock.patch("logging.basicConfig"):
            with self.assertLogs("regex_lite.__main__", level="DEBUG") as logs:
                status, stdout, stderr = self.run_main(
                    "match", "--verbose", "a*.", "aab"
                )
        self.assertEqual((status, stdout, stderr), (0, "true\n", ""))
        self.assertIn("parsed pattern a*.", logs.output[0])

    def test_text_starting_with_dash(self):
        self.assertEqual(
            self.run_main("match", "--", "-.*", "-x"), (0, "true\n", "")
        )
        self.assertEqual(
            self.run_main("match", "--", ".", "-x"), (1, "false\n", "")
        )
