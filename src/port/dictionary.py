"""Dictionary port — outbound interface for DICT-style definition servers."""

from typing import Protocol

from domain.model.dictionary import Database, Definition, MatchingStrategy


class DictionaryPort(Protocol):
    """Port for querying a dictionary server.

    Benign "nothing found" replies come back as empty containers; only real
    failures raise (see domain.model.errors.DictError).
    """

    def define(self, word: str, database: Database) -> list[Definition]: ...

    def match(
        self, word: str, strategy: MatchingStrategy, database: Database,
    ) -> list[str]:
        """Return matched headwords, deduplicated in the order received."""
        ...

    def list_databases(self) -> dict[str, Database]: ...

    def list_strategies(self) -> list[MatchingStrategy]: ...

    def database_info(self, database: Database) -> str: ...

    def close(self) -> None:
        """Release the connection. Never raises; safe to call twice."""
        ...
