"""In-memory implementation of LineTransportPort for testing."""

from collections import deque


class FakeLineTransport:
    """Replays scripted server lines and records what the client sends.

    When the script runs out, read_line() returns None (end of stream).
    """

    def __init__(self, lines: list[str] | None = None):
        self.lines: deque[str] = deque(lines or [])
        self.sent: list[str] = []
        self.reads = 0
        self.closed = False
        self.fail_on_write: Exception | None = None
        self.fail_on_close: Exception | None = None

    @classmethod
    def from_reply(cls, *chunks: str) -> "FakeLineTransport":
        """Build from raw CRLF-delimited text, e.g. "220 hi\\r\\n"."""
        lines: list[str] = []
        for chunk in chunks:
            lines.extend(chunk.replace("\r\n", "\n").split("\n")[:-1])
        return cls(lines)

    def read_line(self) -> str | None:
        self.reads += 1
        if self.lines:
            return self.lines.popleft()
        return None

    def write_line(self, text: str) -> None:
        if self.fail_on_write:
            raise self.fail_on_write
        self.sent.append(text)

    def close(self) -> None:
        self.closed = True
        if self.fail_on_close:
            raise self.fail_on_close
