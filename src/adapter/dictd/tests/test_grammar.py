"""Tests for DICT body grammars and field helpers."""

import unittest

from adapter.dictd.grammar import (
    DatabaseListConsumer,
    DefinitionListConsumer,
    InfoConsumer,
    MatchListConsumer,
    StrategyListConsumer,
    parse_definition_count,
    parse_definition_header,
    split_record,
    strip_quotes,
)
from adapter.dictd.reply import StatusLine
from domain.model.dictionary import Database, Definition, MatchingStrategy
from domain.model.errors import ProtocolError, ProtocolFailure


def _feed(consumer, *lines):
    for line in lines:
        if line == ".":
            consumer.end_block()
        else:
            consumer.feed(line)
    return consumer


class TestStripQuotes(unittest.TestCase):
    """Test quote removal."""

    def test_removes_all_quotes(self):
        self.assertEqual(strip_quotes('"Database A"'), "Database A")
        self.assertEqual(strip_quotes('say "hi" "there"'), "say hi there")

    def test_idempotent(self):
        """Test stripping twice equals stripping once."""
        for text in ('"a"', 'x"y', '""', 'plain', ''):
            with self.subTest(text=text):
                once = strip_quotes(text)
                self.assertEqual(strip_quotes(once), once)

    def test_unquoted_unchanged(self):
        self.assertEqual(strip_quotes("no quotes here"), "no quotes here")


class TestSplitRecord(unittest.TestCase):
    """Test first-space record splitting."""

    def test_splits_on_first_space(self):
        self.assertEqual(split_record('wn "WordNet (r) 3.0"'), ("wn", '"WordNet (r) 3.0"'))

    def test_no_space(self):
        self.assertIsNone(split_record("malformed"))
        self.assertIsNone(split_record(""))

    def test_trailing_space(self):
        self.assertEqual(split_record("wn "), ("wn", ""))


class TestDefinitionHeader(unittest.TestCase):
    """Test 151 header parsing."""

    def test_unquoted_word(self):
        self.assertEqual(
            parse_definition_header('151 hello dbA "Database A"'), ("hello", "dbA"),
        )

    def test_quoted_word_with_spaces(self):
        self.assertEqual(
            parse_definition_header('151 "ice cream" wn "WordNet (r) 3.0"'),
            ("ice cream", "wn"),
        )

    def test_without_description(self):
        self.assertEqual(parse_definition_header("151 hello dbA"), ("hello", "dbA"))

    def test_wrong_code(self):
        with self.assertRaises(ProtocolError) as ctx:
            parse_definition_header('152 hello dbA "x"')
        self.assertEqual(ctx.exception.kind, ProtocolFailure.MALFORMED_RECORD)

    def test_missing_database(self):
        for line in ("151 hello", '151 "hello"', '151 "unterminated dbA'):
            with self.subTest(line=line):
                with self.assertRaises(ProtocolError):
                    parse_definition_header(line)


class TestDefinitionCount(unittest.TestCase):
    """Test reading n from the 150 status."""

    def test_count(self):
        status = StatusLine.parse("150 3 definitions retrieved")
        self.assertEqual(parse_definition_count(status), 3)

    def test_bad_count(self):
        status = StatusLine.parse("150 some definitions retrieved")
        with self.assertRaises(ProtocolError) as ctx:
            parse_definition_count(status)
        self.assertEqual(ctx.exception.kind, ProtocolFailure.MALFORMED_RECORD)
        self.assertEqual(ctx.exception.raw, "150 some definitions retrieved")


class TestDefinitionListConsumer(unittest.TestCase):
    """Test multi-record definition bodies."""

    def test_records_split_at_terminators(self):
        """Test each body holds exactly the lines between 151 and '.'."""
        consumer = _feed(
            DefinitionListConsumer("hello", 2),
            '151 hello dbA "Database A"', "line one", "  indented  ", ".",
            '151 hello dbB "Database B"', "other", ".",
        )
        self.assertTrue(consumer.complete)
        self.assertEqual(consumer.result(), [
            Definition("hello", "dbA", ("line one", "  indented  ")),
            Definition("hello", "dbB", ("other",)),
        ])

    def test_zero_count_complete_immediately(self):
        self.assertTrue(DefinitionListConsumer("x", 0).complete)

    def test_incomplete_until_count_reached(self):
        consumer = _feed(DefinitionListConsumer("x", 2), "151 x db", "body", ".")
        self.assertFalse(consumer.complete)

    def test_empty_body(self):
        consumer = _feed(DefinitionListConsumer("x", 1), "151 x db", ".")
        self.assertEqual(consumer.result(), [Definition("x", "db", ())])

    def test_terminator_without_header(self):
        with self.assertRaises(ProtocolError) as ctx:
            _feed(DefinitionListConsumer("x", 1), ".")
        self.assertEqual(ctx.exception.kind, ProtocolFailure.MALFORMED_RECORD)

    def test_body_line_without_header(self):
        with self.assertRaises(ProtocolError):
            _feed(DefinitionListConsumer("x", 1), "not a header")


class TestMatchListConsumer(unittest.TestCase):
    """Test match bodies."""

    def test_words_in_order_deduplicated(self):
        consumer = _feed(
            MatchListConsumer(),
            'dbA "foo"', 'dbB "foobar"', 'dbB "foo"', "dbC plain", ".",
        )
        self.assertEqual(consumer.result(), ["foo", "foobar", "plain"])

    def test_malformed_lines_skipped(self):
        consumer = _feed(MatchListConsumer(), "nospace", 'dbA "ok"', ".")
        self.assertEqual(consumer.result(), ["ok"])

    def test_multiword_headword(self):
        consumer = _feed(MatchListConsumer(), 'wn "ice cream"', ".")
        self.assertEqual(consumer.result(), ["ice cream"])


class TestListConsumers(unittest.TestCase):
    """Test database and strategy listings."""

    def test_databases_last_wins(self):
        consumer = _feed(
            DatabaseListConsumer(),
            'dbA "First"', 'dbB "Second"', 'dbA "Replaced"', "junk", ".",
        )
        result = consumer.result()
        self.assertEqual(list(result), ["dbA", "dbB"])
        self.assertEqual(result["dbA"], Database("dbA", "Replaced"))

    def test_strategies_in_order_deduplicated(self):
        consumer = _feed(
            StrategyListConsumer(),
            'exact "Match headwords exactly"', "junk", 'prefix "Match prefixes"',
            'exact "Match headwords exactly"', ".",
        )
        self.assertEqual(consumer.result(), [
            MatchingStrategy("exact", "Match headwords exactly"),
            MatchingStrategy("prefix", "Match prefixes"),
        ])

    def test_info_lines_joined(self):
        consumer = _feed(InfoConsumer(), "a", "b", ".")
        self.assertTrue(consumer.complete)
        self.assertEqual(consumer.result(), "a\nb\n")


if __name__ == '__main__':
    unittest.main()
