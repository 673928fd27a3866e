"""In-memory implementation of DictionaryPort for testing."""

from domain.model.dictionary import Database, Definition, MatchingStrategy
from domain.model.errors import RemoteRejectedError


class FakeDictionaryAdapter:
    """Fake dictionary adapter that answers from preconfigured data."""

    def __init__(
        self,
        definitions: list[Definition] | None = None,
        headwords: list[str] | None = None,
        databases: dict[str, Database] | None = None,
        strategies: list[MatchingStrategy] | None = None,
        info: dict[str, str] | None = None,
    ):
        self.definitions = definitions or []
        self.headwords = headwords or []
        self.databases = databases or {}
        self.strategies = strategies or []
        self.info = info or {}
        self.calls: list[tuple] = []
        self.closed = False

    def define(self, word: str, database: Database) -> list[Definition]:
        self.calls.append(("define", word, database.name))
        return [
            d for d in self.definitions
            if d.headword == word
            and (database.is_reserved or d.source_database == database.name)
        ]

    def match(
        self, word: str, strategy: MatchingStrategy, database: Database,
    ) -> list[str]:
        self.calls.append(("match", word, strategy.name, database.name))
        if strategy.name == "exact":
            return [w for w in self.headwords if w == word]
        return [w for w in self.headwords if w.startswith(word)]

    def list_databases(self) -> dict[str, Database]:
        self.calls.append(("list_databases",))
        return dict(self.databases)

    def list_strategies(self) -> list[MatchingStrategy]:
        self.calls.append(("list_strategies",))
        return list(self.strategies)

    def database_info(self, database: Database) -> str:
        self.calls.append(("database_info", database.name))
        if database.name not in self.info:
            raise RemoteRejectedError("550", "Invalid database")
        return self.info[database.name]

    def close(self) -> None:
        self.closed = True
