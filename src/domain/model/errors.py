"""Domain-level exceptions.

Services raise the generic errors to express rule violations.
The protocol client raises the DictError family; the command-line
front end catches them and maps them to an exit status.
"""

from enum import Enum


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class ValidationError(DomainError):
    """Input violates a validation rule."""


# ── Protocol client errors ───────────────────────────────────


class DictError(DomainError):
    """Base class for failures talking to a DICT server."""


class ConnectFailure(str, Enum):
    """Why a connection could not be established."""

    TIMEOUT = "timeout"
    UNRESOLVED_HOST = "unresolved_host"
    REFUSED = "refused"
    OTHER = "other"


class ProtocolFailure(str, Enum):
    """Which part of the reply grammar was violated."""

    UNEXPECTED_GREETING = "unexpected_greeting"
    UNEXPECTED_STATUS = "unexpected_status"
    UNEXPECTED_ENDING = "unexpected_ending"
    PREMATURE_EOF = "premature_eof"
    MALFORMED_RECORD = "malformed_record"
    IO_FAILURE = "io_failure"


class DictConnectionError(DictError):
    """The stream connection to the server could not be opened."""

    def __init__(self, reason: ConnectFailure, host: str, port: int, detail: str = ""):
        self.reason = reason
        self.host = host
        self.port = port
        self.detail = detail
        message = f"Cannot connect to {host}:{port} ({reason.value})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ProtocolError(DictError):
    """Received data does not conform to the expected reply grammar.

    The session should be treated as unusable afterwards.
    """

    def __init__(self, kind: ProtocolFailure, raw: str | None = None):
        self.kind = kind
        self.raw = raw
        super().__init__(f"{kind.value}: {raw!r}")


class RemoteRejectedError(DictError):
    """A well-formed status line reported a server-side failure."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"{code} {message}".strip())


class SessionClosedError(DictError):
    """A command was issued on a session that has already been closed."""
