"""DICT protocol adapter.

Implements DictionaryPort over a DictSession. Each operation formats one
command, runs it through the reply engine with its own status table and
body consumer, and returns a typed result.

Status codes used (RFC 2229):
    110/111/112/150/152  body follows
    550 invalid database, 551 invalid strategy, 552 no match,
    554 no databases, 555 no strategies
"""

import logging
import os

from adapter.dictd.grammar import (
    DatabaseListConsumer,
    DefinitionListConsumer,
    InfoConsumer,
    MatchListConsumer,
    StrategyListConsumer,
    parse_definition_count,
)
from adapter.dictd.reply import Outcome, exchange
from adapter.dictd.session import DictSession
from adapter.tcp.line_transport import SocketLineTransport
from domain.model.dictionary import Database, Definition, MatchingStrategy
from port.line_transport import LineTransportPort

logger = logging.getLogger(__name__)

DEFAULT_PORT = 2628

# Connection settings from environment
DICT_HOST = os.getenv('DICT_HOST', 'dict.org')
DICT_PORT = int(os.getenv('DICT_PORT', str(DEFAULT_PORT)))
DICT_CONNECT_TIMEOUT = float(os.getenv('DICT_CONNECT_TIMEOUT', '10'))
DICT_READ_TIMEOUT = float(os.environ['DICT_READ_TIMEOUT']) if os.getenv('DICT_READ_TIMEOUT') else None


# ── Status tables ────────────────────────────────────────────

DEFINE_STATUS = {
    "150": Outcome.BODY,
    "550": Outcome.EMPTY,
    "552": Outcome.EMPTY,
}

MATCH_STATUS = {
    "152": Outcome.BODY,
    "550": Outcome.EMPTY,
    "551": Outcome.EMPTY,
    "552": Outcome.EMPTY,
}

SHOW_DB_STATUS = {
    "110": Outcome.BODY,
    "554": Outcome.EMPTY,
}

SHOW_STRAT_STATUS = {
    "111": Outcome.BODY,
    "555": Outcome.EMPTY,
}

# An info request names one caller-chosen database, so 550 is a hard failure.
SHOW_INFO_STATUS = {
    "112": Outcome.BODY,
    "550": Outcome.REJECT,
}


class DictClientAdapter:
    """DictionaryPort backed by a live DICT session.

    Usable as a context manager; leaving the block closes the session.
    """

    def __init__(self, session: DictSession):
        self.session = session

    @classmethod
    def from_transport(cls, transport: LineTransportPort) -> "DictClientAdapter":
        """Perform the handshake on an already open transport."""
        return cls(DictSession(transport))

    def __enter__(self) -> "DictClientAdapter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ── DictionaryPort implementation ────────────────────────

    def define(self, word: str, database: Database) -> list[Definition]:
        definitions = exchange(
            self.session,
            f"DEFINE {database.name} {word}",
            DEFINE_STATUS,
            lambda status: DefinitionListConsumer(word, parse_definition_count(status)),
        )
        if definitions is None:
            return []
        logger.debug(
            "Definitions retrieved",
            extra={"word": word, "database": database.name, "count": len(definitions)},
        )
        return definitions

    def match(
        self, word: str, strategy: MatchingStrategy, database: Database,
    ) -> list[str]:
        matches = exchange(
            self.session,
            f"MATCH {database.name} {strategy.name} {word}",
            MATCH_STATUS,
            lambda status: MatchListConsumer(),
        )
        return matches if matches is not None else []

    def list_databases(self) -> dict[str, Database]:
        databases = exchange(
            self.session, "SHOW DB", SHOW_DB_STATUS, lambda status: DatabaseListConsumer(),
        )
        return databases if databases is not None else {}

    def list_strategies(self) -> list[MatchingStrategy]:
        strategies = exchange(
            self.session, "SHOW STRAT", SHOW_STRAT_STATUS, lambda status: StrategyListConsumer(),
        )
        return strategies if strategies is not None else []

    def database_info(self, database: Database) -> str:
        info = exchange(
            self.session,
            f"SHOW INFO {database.name}",
            SHOW_INFO_STATUS,
            lambda status: InfoConsumer(),
        )
        return info if info is not None else ""

    def close(self) -> None:
        self.session.close()


def connect(
    host: str | None = None,
    port: int | None = None,
    timeout: float | None = None,
) -> DictClientAdapter:
    """Open a DICT connection and perform the greeting handshake.

    Missing arguments fall back to DICT_HOST, DICT_PORT and
    DICT_CONNECT_TIMEOUT.

    Raises:
        DictConnectionError: the connection could not be established.
        ProtocolError: the server did not greet with 220.
    """
    host = host or DICT_HOST
    port = port or DICT_PORT
    timeout = timeout if timeout is not None else DICT_CONNECT_TIMEOUT

    transport = SocketLineTransport.connect(host, port, timeout=timeout, read_timeout=DICT_READ_TIMEOUT)
    client = DictClientAdapter.from_transport(transport)
    logger.info("Connected to DICT server", extra={"host": host, "port": port})
    return client
