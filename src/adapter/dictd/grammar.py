"""Body grammars for DICT replies.

Each consumer turns the raw body lines of one reply into a typed result.
Field handling is deliberately simple: records are split on the first
space and quote characters are removed rather than unescaped.

A body line consisting of a single "." cannot be told apart from the
block terminator; well-formed servers never send one unescaped.
"""

from adapter.dictd.reply import StatusLine
from domain.model.dictionary import Database, Definition, MatchingStrategy
from domain.model.errors import ProtocolError, ProtocolFailure

DEFINITION_HEADER_CODE = "151"


# ── Field helpers ────────────────────────────────────────────


def strip_quotes(text: str) -> str:
    """Remove every double-quote character. Idempotent."""
    return text.replace('"', "")


def split_record(line: str) -> tuple[str, str] | None:
    """Split "<name> <rest>" on the first space; None when there is none."""
    name, sep, rest = line.partition(" ")
    if not sep:
        return None
    return name, rest


def parse_definition_count(status: StatusLine) -> int:
    """Read n from "150 n definitions retrieved"."""
    count, _, _ = status.text.partition(" ")
    try:
        return int(count)
    except ValueError:
        raise ProtocolError(ProtocolFailure.MALFORMED_RECORD, status.raw) from None


def parse_definition_header(line: str) -> tuple[str, str]:
    """Return (word, database) from '151 "word" database "description"'.

    The word may be quoted and contain spaces.
    """
    if not line.startswith(DEFINITION_HEADER_CODE + " "):
        raise ProtocolError(ProtocolFailure.MALFORMED_RECORD, line)
    rest = line[len(DEFINITION_HEADER_CODE) + 1:]

    if rest.startswith('"'):
        end = rest.find('"', 1)
        if end < 0:
            raise ProtocolError(ProtocolFailure.MALFORMED_RECORD, line)
        word, rest = rest[1:end], rest[end + 1:].lstrip(" ")
    else:
        word, _, rest = rest.partition(" ")

    database, _, _ = rest.partition(" ")
    if not database:
        raise ProtocolError(ProtocolFailure.MALFORMED_RECORD, line)
    return word, database


# ── Consumers ────────────────────────────────────────────────


class _SingleBlockConsumer:
    """Body made of one block of lines ended by the first terminator."""

    def __init__(self):
        self._complete = False

    @property
    def complete(self) -> bool:
        return self._complete

    def end_block(self) -> None:
        self._complete = True


class MatchListConsumer(_SingleBlockConsumer):
    """`<database> "<word>"` lines → headwords, deduplicated in order.

    The database field is discarded.
    """

    def __init__(self):
        super().__init__()
        self._words: dict[str, None] = {}

    def feed(self, line: str) -> None:
        record = split_record(line)
        if record is None:
            return
        _, word = record
        self._words[strip_quotes(word)] = None

    def result(self) -> list[str]:
        return list(self._words)


class DatabaseListConsumer(_SingleBlockConsumer):
    """`<name> "<description>"` lines → {name: Database}; last one wins."""

    def __init__(self):
        super().__init__()
        self._databases: dict[str, Database] = {}

    def feed(self, line: str) -> None:
        record = split_record(line)
        if record is None:
            return
        name, description = record
        self._databases[name] = Database(name, strip_quotes(description))

    def result(self) -> dict[str, Database]:
        return self._databases


class StrategyListConsumer(_SingleBlockConsumer):
    """`<name> "<description>"` lines → strategies, deduplicated in order."""

    def __init__(self):
        super().__init__()
        self._strategies: dict[MatchingStrategy, None] = {}

    def feed(self, line: str) -> None:
        record = split_record(line)
        if record is None:
            return
        name, description = record
        self._strategies[MatchingStrategy(name, strip_quotes(description))] = None

    def result(self) -> list[MatchingStrategy]:
        return list(self._strategies)


class InfoConsumer(_SingleBlockConsumer):
    """Free text; each line is kept verbatim and followed by a newline."""

    def __init__(self):
        super().__init__()
        self._lines: list[str] = []

    def feed(self, line: str) -> None:
        self._lines.append(line)

    def result(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)


class DefinitionListConsumer:
    """`count` records, each a 151 header, body lines, then a terminator.

    Body lines are kept verbatim. The headword of every Definition is the
    word that was asked for.
    """

    def __init__(self, word: str, count: int):
        self._word = word
        self._count = count
        self._database: str | None = None
        self._body: list[str] = []
        self._definitions: list[Definition] = []

    @property
    def complete(self) -> bool:
        return len(self._definitions) >= self._count

    def feed(self, line: str) -> None:
        if self._database is None:
            _, self._database = parse_definition_header(line)
            self._body = []
        else:
            self._body.append(line)

    def end_block(self) -> None:
        if self._database is None:
            raise ProtocolError(ProtocolFailure.MALFORMED_RECORD, ".")
        self._definitions.append(
            Definition(self._word, self._database, tuple(self._body))
        )
        self._database = None
        self._body = []

    def result(self) -> list[Definition]:
        return self._definitions
