"""Line transport port — outbound interface for a line-oriented byte stream."""

from typing import Protocol


class LineTransportPort(Protocol):
    """Duplex line stream to a server.

    read_line() strips the line terminator (CRLF or bare LF) and returns
    None once the peer has closed the stream, so an empty line ("") stays
    distinguishable from end-of-stream.
    """

    def read_line(self) -> str | None: ...

    def write_line(self, text: str) -> None:
        """Write text followed by CRLF and flush."""
        ...

    def close(self) -> None: ...
