"""DICT reply engine.

Every command follows the same exchange:

    1. send the command line
    2. read the status line and classify it against a status table
    3. for body-bearing replies, feed body lines to a consumer until it
       reports completion; "." lines end a block and are never fed
    4. read the closing status, which must start with 250
    5. return what the consumer built

Only the status table and the body consumer vary between commands.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Protocol

from adapter.dictd.session import DictSession
from domain.model.errors import ProtocolError, ProtocolFailure, RemoteRejectedError

logger = logging.getLogger(__name__)

TERMINATOR = "."
COMPLETE_CODE = "250"


class Outcome(str, Enum):
    """How a status code is handled."""

    BODY = "body"        # a multi-line body follows
    EMPTY = "empty"      # benign "nothing found"; no body, no closing status
    REJECT = "reject"    # hard failure reported by the server


@dataclass(frozen=True)
class StatusLine:
    code: str
    text: str
    raw: str

    @classmethod
    def parse(cls, line: str) -> "StatusLine | None":
        """Split "<3-digit code> <text>"; None when the line has no code."""
        code = line[:3]
        if len(code) != 3 or not code.isdigit():
            return None
        return cls(code=code, text=line[4:] if len(line) > 3 else "", raw=line)


class BodyConsumer(Protocol):
    """Receives the body lines of one reply.

    `complete` turns True once the consumer has seen the logical end of the
    body; the engine stops reading at that point.
    """

    @property
    def complete(self) -> bool: ...

    def feed(self, line: str) -> None: ...

    def end_block(self) -> None:
        """Called for each terminator line."""
        ...

    def result(self) -> Any: ...


ConsumerFactory = Callable[[StatusLine], BodyConsumer]


def exchange(
    session: DictSession,
    command: str,
    table: Mapping[str, Outcome],
    make_consumer: ConsumerFactory,
) -> Any | None:
    """Run one command/reply cycle on the session.

    Args:
        session: Open session; its lock is held for the whole exchange.
        command: Command line without terminator (e.g. "SHOW DB").
        table: Status code to Outcome. Codes missing from it are protocol
            errors.
        make_consumer: Builds the body consumer from the status line.

    Returns:
        The consumer's result, or None for a benign-empty status.

    Raises:
        RemoteRejectedError: status mapped to Outcome.REJECT.
        ProtocolError: missing/unknown status, premature end of stream,
            or a closing line that is not 250.
    """
    with session.lock:
        session.send_line(command)
        logger.debug("Command sent", extra={"command": command})

        line = session.read_line()
        status = StatusLine.parse(line) if line is not None else None
        outcome = table.get(status.code) if status else None

        if outcome is Outcome.EMPTY:
            logger.debug("Empty result", extra={"command": command, "status": status.code})
            return None
        if outcome is Outcome.REJECT:
            logger.info(
                "Command rejected by server",
                extra={"command": command, "status": status.code},
            )
            raise RemoteRejectedError(status.code, status.text)
        if outcome is not Outcome.BODY:
            logger.warning("Unexpected status", extra={"command": command, "line": line})
            raise ProtocolError(ProtocolFailure.UNEXPECTED_STATUS, line)

        consumer = make_consumer(status)
        read_body(session, consumer)

        closing = session.read_line()
        if closing is None or not closing.startswith(COMPLETE_CODE):
            logger.warning("Unexpected ending", extra={"command": command, "line": closing})
            raise ProtocolError(ProtocolFailure.UNEXPECTED_ENDING, closing)

        return consumer.result()


def read_body(session: DictSession, consumer: BodyConsumer) -> None:
    """Feed body lines to the consumer until it is complete."""
    while not consumer.complete:
        line = session.read_line()
        if line is None:
            raise ProtocolError(ProtocolFailure.PREMATURE_EOF)
        if line == TERMINATOR:
            consumer.end_block()
        else:
            consumer.feed(line)
