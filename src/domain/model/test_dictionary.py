"""Unit tests for dictionary domain models and protocol errors.

Tests focus on behavior other components rely on:
- Definition identity is (headword, source_database)
- reserved database names
- error attributes read by the CLI and tests
"""

import unittest
from dataclasses import FrozenInstanceError

from domain.model.dictionary import (
    ALL_DATABASES,
    FIRST_MATCH,
    Database,
    Definition,
    MatchingStrategy,
)
from domain.model.errors import (
    ConnectFailure,
    DictConnectionError,
    DictError,
    DomainError,
    ProtocolError,
    ProtocolFailure,
    RemoteRejectedError,
)


class TestDefinition(unittest.TestCase):
    """Tests for Definition value semantics."""

    def test_same_headword_different_database_not_equal(self):
        """Definitions of one headword from two databases stay distinct."""
        a = Definition("parrot", "wn", ("a bird",))
        b = Definition("parrot", "gcide", ("a bird",))
        self.assertNotEqual(a, b)
        self.assertEqual(len({a, b}), 2)

    def test_text_joins_body(self):
        self.assertEqual(Definition("x", "db", ("one", "", "three")).text, "one\n\nthree")

    def test_immutable(self):
        definition = Definition("x", "db")
        with self.assertRaises(FrozenInstanceError):
            definition.headword = "y"


class TestReservedDatabases(unittest.TestCase):
    """Tests for the wildcard databases."""

    def test_names(self):
        self.assertEqual(ALL_DATABASES.name, "*")
        self.assertEqual(FIRST_MATCH.name, "!")

    def test_is_reserved(self):
        self.assertTrue(ALL_DATABASES.is_reserved)
        self.assertTrue(Database("!").is_reserved)
        self.assertFalse(Database("wn", "WordNet").is_reserved)

    def test_strategies_hashable(self):
        self.assertEqual(
            len({MatchingStrategy("exact", "x"), MatchingStrategy("exact", "x")}), 1,
        )


class TestErrors(unittest.TestCase):
    """Tests for the DictError family."""

    def test_hierarchy(self):
        for error in (
            DictConnectionError(ConnectFailure.REFUSED, "h", 1),
            ProtocolError(ProtocolFailure.UNEXPECTED_ENDING, "251"),
            RemoteRejectedError("550", "invalid database"),
        ):
            with self.subTest(error=type(error).__name__):
                self.assertIsInstance(error, DictError)
                self.assertIsInstance(error, DomainError)

    def test_connection_error_message(self):
        error = DictConnectionError(ConnectFailure.UNRESOLVED_HOST, "nowhere", 2628, "not known")
        self.assertEqual(str(error), "Cannot connect to nowhere:2628 (unresolved_host): not known")

    def test_remote_rejected_message(self):
        self.assertEqual(str(RemoteRejectedError("550", "invalid database")), "550 invalid database")


if __name__ == '__main__':
    unittest.main()
