"""In-memory message buffers for NUL-terminated string records.

Implementation intentionally does NOT inherit from the message buffer
protocols (PEP 544 structural subtyping).
"""

from __future__ import annotations

from emailaddr.core.constants import RECORD_TERMINATOR
from emailaddr.core.result import Failure, Result, Success
from emailaddr.domain.errors import DecodeError, EmailAddressMessages


class MessageReader:
    """Reads string records from a received payload.

    Args:
        data: Complete message payload.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._cursor = 0

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self._cursor

    def get_string(self) -> Result[bytes, DecodeError]:
        """Read one record up to (and consuming) its terminator.

        Returns:
            Success(record bytes), or Failure(DecodeError) when the buffer is
            exhausted or the rest of it has no terminator. The cursor does
            not move on failure.
        """
        if self.remaining == 0:
            return Failure(
                error=DecodeError.because(EmailAddressMessages.DECODE_MISSING_RECORD)
            )

        end = self._data.find(RECORD_TERMINATOR, self._cursor)
        if end == -1:
            return Failure(
                error=DecodeError.because(EmailAddressMessages.DECODE_TRUNCATED)
            )

        record = self._data[self._cursor : end]
        self._cursor = end + len(RECORD_TERMINATOR)
        return Success(value=record)

    def ensure_consumed(self) -> Result[None, DecodeError]:
        """Check that the whole payload has been read.

        Returns:
            Success(None), or Failure(DecodeError) when unread bytes remain.
        """
        if self.remaining:
            return Failure(
                error=DecodeError.because(EmailAddressMessages.DECODE_TRAILING_BYTES)
            )
        return Success(value=None)


class MessageWriter:
    """Accumulates string records for an outgoing payload."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def send_string(self, record: bytes) -> None:
        """Append ``record`` and its terminator.

        Raises:
            ValueError: If the record itself contains the terminator.
        """
        if RECORD_TERMINATOR in record:
            raise ValueError("String record cannot contain a NUL byte")
        self._buffer += record
        self._buffer += RECORD_TERMINATOR

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)
