"""DICT transport session.

Owns one line transport, performs the greeting handshake on construction,
and serializes access so that only one command is in flight at a time.
"""

import logging
import threading

from domain.model.errors import ProtocolError, ProtocolFailure, SessionClosedError
from port.line_transport import LineTransportPort

logger = logging.getLogger(__name__)

GREETING_CODE = "220"
QUIT_COMMAND = "QUIT"


class DictSession:
    """One live connection to a DICT server.

    The lock guards the whole send-then-read sequence of a command; the
    protocol has no request identifiers, so interleaved replies would be
    unparseable.
    """

    def __init__(self, transport: LineTransportPort):
        self._transport = transport
        self._closed = False
        self.lock = threading.RLock()
        try:
            self.greeting = self._handshake()
        except Exception:
            self._closed = True
            try:
                transport.close()
            except Exception as e:
                logger.debug("Ignoring error closing transport", extra={"error": str(e)})
            raise

    def _handshake(self) -> str:
        greeting = self._transport.read_line()
        if greeting is None or not greeting.startswith(GREETING_CODE):
            logger.warning("Unexpected greeting", extra={"greeting": greeting})
            raise ProtocolError(ProtocolFailure.UNEXPECTED_GREETING, greeting)
        logger.debug("Server greeting received", extra={"greeting": greeting})
        return greeting

    @property
    def closed(self) -> bool:
        return self._closed

    def send_line(self, text: str) -> None:
        if self._closed:
            raise SessionClosedError("Session is closed")
        self._transport.write_line(text)

    def read_line(self) -> str | None:
        """Next line without its terminator, or None at end of stream."""
        if self._closed:
            raise SessionClosedError("Session is closed")
        return self._transport.read_line()

    def close(self) -> None:
        """Send QUIT, read one reply line, and close the transport.

        Best-effort: every error is swallowed. A second call is a no-op.
        """
        with self.lock:
            if self._closed:
                return
            self._closed = True
            try:
                self._transport.write_line(QUIT_COMMAND)
                reply = self._transport.read_line()
                logger.debug("Session closed", extra={"reply": reply})
            except Exception as e:
                logger.debug("Ignoring error during QUIT", extra={"error": str(e)})
            finally:
                try:
                    self._transport.close()
                except Exception as e:
                    logger.debug("Ignoring error closing transport", extra={"error": str(e)})
