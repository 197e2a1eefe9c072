"""Host binding for the email address type.

Groups the entry points a host registers for the type (text input/output,
binary receive/send, comparison, operators) and applies the host's configured
grammar level and field bound.

Flow (input):
1. Parse text with the configured grammar and bound
2. Log the outcome (debug on success, warning on rejection)
3. Return the Result unchanged

Architecture:
- Application layer imports domain functions and the wire codec
- Logger is injected via LoggerProtocol (no structlog import here)
- Rejected input is logged by length and violation, never verbatim
"""

from emailaddr.application import operators
from emailaddr.core.constants import MAX_FIELD_LENGTH
from emailaddr.core.enums import GrammarLevel
from emailaddr.core.result import Failure, Result, Success
from emailaddr.domain.errors import (
    EmailAddressError,
    EmailAddressValueError,
    InvalidFormatError,
)
from emailaddr.domain.parser import format_address, parse
from emailaddr.domain.protocols import (
    LoggerProtocol,
    MessageReaderProtocol,
    MessageWriterProtocol,
)
from emailaddr.domain.value_objects import EmailAddress
from emailaddr.infrastructure.wire import MessageWriter, decode, receive, send


class EmailTypeHandler:
    """Entry points the host binds for the email address type.

    Stateless apart from its configuration, so one instance can serve any
    number of concurrent callers.
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        *,
        grammar: GrammarLevel = GrammarLevel.MINIMAL,
        max_length: int = MAX_FIELD_LENGTH,
    ) -> None:
        """Initialize handler with its logger and limits.

        Args:
            logger: Structured logger for accept/reject events.
            grammar: Format rules applied to text input.
            max_length: Per-field bound for text and wire input.
        """
        self._logger = logger.bind(component="email_type")
        self._grammar = grammar
        self._max_length = max_length

    @property
    def grammar(self) -> GrammarLevel:
        return self._grammar

    @property
    def max_length(self) -> int:
        return self._max_length

    # -------------------------------------------------------------------------
    # Text I/O
    # -------------------------------------------------------------------------

    def input(self, text: str | bytes) -> Result[EmailAddress, EmailAddressError]:
        """Parse host-supplied text.

        Args:
            text: Raw input (str, or NUL-terminated bytes).

        Returns:
            Success(EmailAddress) or Failure(EmailAddressError).
        """
        result = parse(text, grammar=self._grammar, max_length=self._max_length)
        self._log_outcome("text_input", result, input_length=len(text))
        return result

    def input_or_raise(self, text: str | bytes) -> EmailAddress:
        """Parse host-supplied text, raising on rejection.

        Raises:
            EmailAddressValueError: If the text is rejected.
        """
        return self._unwrap(self.input(text))

    def output(self, value: EmailAddress) -> str:
        """Render a value for the host."""
        return format_address(value)

    # -------------------------------------------------------------------------
    # Binary I/O
    # -------------------------------------------------------------------------

    def receive(
        self, message: bytes | MessageReaderProtocol
    ) -> Result[EmailAddress, EmailAddressError]:
        """Read a value from a wire payload or a host message reader.

        Args:
            message: Complete payload (must hold exactly two records), or a
                reader positioned at the value (trailing data left unread).

        Returns:
            Success(EmailAddress) or Failure(EmailAddressError).
        """
        if isinstance(message, (bytes, bytearray, memoryview)):
            payload = bytes(message)
            result = decode(payload, max_length=self._max_length)
            self._log_outcome("wire_input", result, input_length=len(payload))
        else:
            result = receive(message, max_length=self._max_length)
            self._log_outcome("wire_input", result)
        return result

    def receive_or_raise(self, message: bytes | MessageReaderProtocol) -> EmailAddress:
        """Read a value from the wire, raising on malformed data.

        Raises:
            EmailAddressValueError: If the payload is rejected.
        """
        return self._unwrap(self.receive(message))

    def send(
        self, value: EmailAddress, writer: MessageWriterProtocol | None = None
    ) -> bytes:
        """Write a value to the wire.

        Args:
            value: Address to serialize.
            writer: Host message writer; a fresh buffer when omitted.

        Returns:
            Everything held by the writer after the value was appended.
        """
        target = writer if writer is not None else MessageWriter()
        send(value, target)
        return target.getvalue()

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, a: EmailAddress, b: EmailAddress) -> int:
        """B-tree support function (-1, 0, 1)."""
        return operators.btree_support(a, b)

    def apply_operator(self, symbol: str, a: EmailAddress, b: EmailAddress) -> bool:
        """Evaluate a registered operator.

        Raises:
            KeyError: If the symbol is not registered.
        """
        return operators.apply_operator(symbol, a, b)

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _log_outcome(
        self,
        operation: str,
        result: Result[EmailAddress, EmailAddressError],
        **context: int,
    ) -> None:
        if isinstance(result, Success):
            self._logger.debug("Email address accepted", operation=operation, **context)
            return

        error = result.error
        if isinstance(error, InvalidFormatError):
            context_fields: dict[str, object] = {"violation": error.violation.value}
        else:
            context_fields = {}
        self._logger.warning(
            "Email address rejected",
            operation=operation,
            error_code=error.code.value,
            **context_fields,
            **context,
        )

    @staticmethod
    def _unwrap(result: Result[EmailAddress, EmailAddressError]) -> EmailAddress:
        if isinstance(result, Failure):
            raise EmailAddressValueError(result.error)
        return result.value
