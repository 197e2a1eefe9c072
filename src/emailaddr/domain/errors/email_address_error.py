"""Email address domain errors.

Defines the three failure kinds of the email address type plus the message
catalog used to describe them.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Returned in Failure (railway-oriented programming), never raised
    - EmailAddressValueError is the single exception type, used only by
      convenience helpers that unwrap a Result

Usage:
    from emailaddr.core.result import Failure
    from emailaddr.domain.errors import CapacityExceededError

    return Failure(error=CapacityExceededError.for_field(AddressPart.LOCAL, 200, 127))
"""

from dataclasses import dataclass

from emailaddr.core.enums import ErrorCode
from emailaddr.core.errors import DomainError
from emailaddr.domain.enums import AddressPart, FormatViolation


class EmailAddressMessages:
    """Email address message constants.

    Error Categories:
        - Text input: INVALID_FORMAT plus one detail per FormatViolation
        - Capacity: CAPACITY_EXCEEDED
        - Wire input: DECODE_* reasons
    """

    # -------------------------------------------------------------------------
    # Text Input
    # -------------------------------------------------------------------------

    INVALID_FORMAT = 'invalid input syntax for email address: "{text}"'
    """Headline shared by every invalid-format failure."""

    VIOLATION_DETAILS: dict[FormatViolation, str] = {
        FormatViolation.UNSPECIFIED: "The value is not a valid email address.",
        FormatViolation.EMPTY_LOCAL: "The local part before '@' is empty.",
        FormatViolation.EMPTY_DOMAIN: "The domain part after '@' is empty.",
        FormatViolation.MISSING_SEPARATOR: "The value has no '@' separator.",
        FormatViolation.MULTIPLE_SEPARATORS: "Only one '@' separator is allowed.",
        FormatViolation.INVALID_CHARACTER: (
            "Only letters, digits, '.' and '-' are allowed."
        ),
        FormatViolation.LOCAL_NOT_LETTER_START: (
            "The local part must start with a letter."
        ),
        FormatViolation.LOCAL_GRAMMAR: (
            "The local part must be letter-led words joined by single '.' or '-'."
        ),
        FormatViolation.DOMAIN_GRAMMAR: (
            "The domain must be two or more dot-separated host labels."
        ),
    }

    # -------------------------------------------------------------------------
    # Capacity
    # -------------------------------------------------------------------------

    CAPACITY_EXCEEDED = "email address {part} part is too long ({length} > {limit})"

    # -------------------------------------------------------------------------
    # Direct Construction
    # -------------------------------------------------------------------------

    FIELD_EMPTY = "email address {part} part is empty"
    FIELD_HAS_SEPARATOR = "email address {part} part contains '@'"
    FIELD_INVALID_CHARACTER = "email address {part} part contains invalid character {char!r}"

    # -------------------------------------------------------------------------
    # Wire Input
    # -------------------------------------------------------------------------

    DECODE_FAILED = "invalid binary data for email address: {reason}"
    DECODE_TRUNCATED = "record is missing its terminator"
    DECODE_MISSING_RECORD = "expected 2 string records"
    DECODE_TRAILING_BYTES = "unexpected bytes after the domain record"
    DECODE_NOT_ASCII = "{part} record is not ASCII text"
    DECODE_EMPTY_FIELD = "{part} record is empty"
    DECODE_SEPARATOR_IN_FIELD = "{part} record contains '@'"
    DECODE_INVALID_CHARACTER = (
        "{part} record contains a character other than letters, digits, '.' or '-'"
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidFormatError(DomainError):
    """Textual input is not an acceptable email address.

    Attributes:
        code: Always ErrorCode.INVALID_FORMAT.
        message: Headline naming the offending text.
        input_text: The rejected input, verbatim.
        violation: Which rule rejected it.
    """

    input_text: str
    violation: FormatViolation = FormatViolation.UNSPECIFIED

    @property
    def detail(self) -> str:
        """Human-readable explanation of the violation."""
        return EmailAddressMessages.VIOLATION_DETAILS[self.violation]


@dataclass(frozen=True, slots=True, kw_only=True)
class CapacityExceededError(DomainError):
    """A field is longer than the storage bound.

    Attributes:
        part: Which field overflowed.
        length: Actual field length.
        limit: Configured bound.
    """

    part: AddressPart
    length: int
    limit: int

    @classmethod
    def for_field(
        cls, part: AddressPart, length: int, limit: int
    ) -> "CapacityExceededError":
        """Build the error with its standard message."""
        return cls(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message=EmailAddressMessages.CAPACITY_EXCEEDED.format(
                part=part.value, length=length, limit=limit
            ),
            part=part,
            length=length,
            limit=limit,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class DecodeError(DomainError):
    """Binary payload could not be read back into an email address.

    Attributes:
        reason: Short description of what was wrong with the bytes.
    """

    reason: str

    @classmethod
    def because(cls, reason: str) -> "DecodeError":
        """Build the error with its standard message."""
        return cls(
            code=ErrorCode.DECODE_ERROR,
            message=EmailAddressMessages.DECODE_FAILED.format(reason=reason),
            reason=reason,
        )


type EmailAddressError = InvalidFormatError | CapacityExceededError | DecodeError


class EmailAddressValueError(ValueError):
    """Raised by helpers that unwrap a failed email address Result."""

    def __init__(self, error: DomainError) -> None:
        """Initialize from the underlying domain error.

        Args:
            error: The DomainError carried by the Failure.
        """
        super().__init__(error.message)
        self.error = error
