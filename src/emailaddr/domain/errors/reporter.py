"""Central reporting path for invalid-format failures.

Every scanner and validator rejection goes through ``report`` so the headline
and error code stay identical whichever rule fired.
"""

from emailaddr.core.enums import ErrorCode
from emailaddr.core.result import Failure
from emailaddr.domain.enums import FormatViolation
from emailaddr.domain.errors.email_address_error import (
    EmailAddressMessages,
    InvalidFormatError,
)


def report(
    text: str, violation: FormatViolation = FormatViolation.UNSPECIFIED
) -> Failure[InvalidFormatError]:
    """Wrap a rejected input in an INVALID_FORMAT failure.

    Args:
        text: The offending input, shown verbatim in the message.
        violation: Rule that rejected the input.

    Returns:
        Failure carrying an InvalidFormatError.

    Example:
        >>> report("@example.com", FormatViolation.EMPTY_LOCAL).error.message
        'invalid input syntax for email address: "@example.com"'
    """
    return Failure(
        error=InvalidFormatError(
            code=ErrorCode.INVALID_FORMAT,
            message=EmailAddressMessages.INVALID_FORMAT.format(text=text),
            input_text=text,
            violation=violation,
            details={"violation": violation.value},
        )
    )
