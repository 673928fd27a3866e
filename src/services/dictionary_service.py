"""Dictionary lookup service — orchestrates lookups over a DictionaryPort.

Pipeline: DEFINE → (no definitions) → MATCH for suggestions.
Name resolution for databases and strategies goes through the server's
own listings, except for the reserved wildcard databases.
"""

import logging
from dataclasses import dataclass

from domain.model.dictionary import (
    ALL_DATABASES,
    FIRST_MATCH,
    PREFIX,
    Database,
    Definition,
    MatchingStrategy,
)
from domain.model.errors import NotFoundError, ValidationError
from port.dictionary import DictionaryPort

logger = logging.getLogger(__name__)

_RESERVED = {db.name: db for db in (ALL_DATABASES, FIRST_MATCH)}


@dataclass(frozen=True)
class LookupResult:
    """Definitions for a word, or suggestions when there are none."""
    word: str
    definitions: tuple[Definition, ...] = ()
    suggestions: tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.definitions)


class DictionaryService:
    """Lookups and name resolution on top of a dictionary port."""

    def __init__(self, dictionary: DictionaryPort):
        self.dictionary = dictionary

    def lookup(
        self,
        word: str,
        database: Database = ALL_DATABASES,
        strategy: MatchingStrategy = PREFIX,
    ) -> LookupResult:
        """Define a word; fall back to matching headwords as suggestions.

        Raises:
            ValidationError: word is empty or blank.
        """
        word = _require_word(word)
        definitions = self.dictionary.define(word, database)
        if definitions:
            logger.info("Word defined", extra={
                "word": word, "database": database.name, "count": len(definitions),
            })
            return LookupResult(word=word, definitions=tuple(definitions))

        suggestions = self.dictionary.match(word, strategy, database)
        logger.info("No definitions, returning suggestions", extra={
            "word": word, "database": database.name,
            "strategy": strategy.name, "suggestions": len(suggestions),
        })
        return LookupResult(word=word, suggestions=tuple(suggestions))

    def match(
        self,
        word: str,
        database: Database = ALL_DATABASES,
        strategy: MatchingStrategy = PREFIX,
    ) -> list[str]:
        return self.dictionary.match(_require_word(word), strategy, database)

    def resolve_database(self, name: str) -> Database:
        """Map a database name to a Database.

        Raises:
            NotFoundError: the server does not offer the database.
        """
        if name in _RESERVED:
            return _RESERVED[name]
        database = self.dictionary.list_databases().get(name)
        if database is None:
            raise NotFoundError(f"Unknown database: {name}")
        return database

    def resolve_strategy(self, name: str) -> MatchingStrategy:
        for strategy in self.dictionary.list_strategies():
            if strategy.name == name:
                return strategy
        raise NotFoundError(f"Unknown strategy: {name}")

    def describe_database(self, name: str) -> str:
        return self.dictionary.database_info(self.resolve_database(name))


def _require_word(word: str) -> str:
    word = word.strip()
    if not word:
        raise ValidationError("Word must not be empty")
    return word
