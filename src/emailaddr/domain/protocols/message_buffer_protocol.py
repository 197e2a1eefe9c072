"""Protocols for the host's byte-oriented message buffers.

The binary codec reads and writes self-delimited string records through these
protocols, so a host can hand over its own buffer objects as long as they
offer the same calls. ``emailaddr.infrastructure.wire.message_buffer`` holds
the bundled implementation.
"""

from typing import Protocol

from emailaddr.core.result import Result
from emailaddr.domain.errors import DecodeError


class MessageReaderProtocol(Protocol):
    """Sequential reader over a received message."""

    def get_string(self) -> Result[bytes, DecodeError]:
        """Read one NUL-terminated record, without its terminator.

        Returns:
            Success(record bytes) or Failure(DecodeError) when no terminator
            remains in the buffer.
        """
        ...

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        ...


class MessageWriterProtocol(Protocol):
    """Append-only writer for an outgoing message."""

    def send_string(self, record: bytes) -> None:
        """Append one record followed by its terminator."""
        ...

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        ...
