"""TCP implementation of LineTransportPort.

Opens a single blocking socket connection and exposes line-based read and
write over it. Lines are written with CRLF; reads accept CRLF or bare LF.
No retry: one connection attempt per call to connect().
"""

import logging
import socket

from domain.model.errors import (
    ConnectFailure,
    DictConnectionError,
    ProtocolError,
    ProtocolFailure,
)

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class SocketLineTransport:
    def __init__(self, sock: socket.socket):
        self._sock = sock
        self._reader = sock.makefile("rb")

    @classmethod
    def connect(
        cls,
        host: str,
        port: int,
        timeout: float | None = None,
        read_timeout: float | None = None,
    ) -> "SocketLineTransport":
        """Open a stream connection to host:port.

        Args:
            host: Server host name or address.
            port: Server TCP port.
            timeout: Connect timeout in seconds (None blocks).
            read_timeout: Timeout for later reads (None blocks).

        Raises:
            DictConnectionError: with the reason the connect failed.
        """
        try:
            sock = socket.create_connection((host, port), timeout=timeout)
        except socket.gaierror as e:
            raise DictConnectionError(ConnectFailure.UNRESOLVED_HOST, host, port, str(e)) from e
        except ConnectionRefusedError as e:
            raise DictConnectionError(ConnectFailure.REFUSED, host, port, str(e)) from e
        except TimeoutError as e:
            raise DictConnectionError(ConnectFailure.TIMEOUT, host, port, str(e)) from e
        except OSError as e:
            raise DictConnectionError(ConnectFailure.OTHER, host, port, str(e)) from e

        sock.settimeout(read_timeout)
        logger.debug("Connected", extra={"host": host, "port": port})
        return cls(sock)

    # ── LineTransportPort implementation ─────────────────────

    def read_line(self) -> str | None:
        try:
            raw = self._reader.readline()
        except OSError as e:
            raise ProtocolError(ProtocolFailure.IO_FAILURE, str(e)) from e
        if not raw:
            return None
        line = raw.decode(ENCODING, errors="replace")
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line

    def write_line(self, text: str) -> None:
        try:
            self._sock.sendall(f"{text}\r\n".encode(ENCODING))
        except OSError as e:
            raise ProtocolError(ProtocolFailure.IO_FAILURE, str(e)) from e

    def close(self) -> None:
        try:
            self._reader.close()
        finally:
            self._sock.close()
