"""User-facing diagnostics for email address failures.

Converts domain errors into a Pydantic model a host can display or serialize
to JSON, in the spirit of RFC 9457 problem details.

Exports:
    Diagnostic: Structured diagnostic schema
    build_diagnostic: DomainError -> Diagnostic
"""

from pydantic import BaseModel, ConfigDict, Field

from emailaddr.core.enums import ErrorCode
from emailaddr.domain.errors import (
    CapacityExceededError,
    DecodeError,
    EmailAddressError,
    InvalidFormatError,
)

_TITLES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_FORMAT: "Invalid Email Address",
    ErrorCode.CAPACITY_EXCEEDED: "Email Address Too Long",
    ErrorCode.DECODE_ERROR: "Corrupt Email Address Data",
}


class Diagnostic(BaseModel):
    """Structured description of a rejected email address.

    Attributes:
        code: Machine-readable error code
        title: Short summary of the error kind
        message: Headline naming the offending value
        detail: Specific explanation of what was wrong
        input: Offending text, when the failure came from text input
        field: Address part at fault, when known

    Examples:
        >>> Diagnostic(
        ...     code="invalid_format",
        ...     title="Invalid Email Address",
        ...     message='invalid input syntax for email address: "alice@"',
        ...     detail="The domain part after '@' is empty.",
        ...     input="alice@",
        ... )
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Machine-readable error code")
    title: str = Field(..., description="Short, human-readable summary")
    message: str = Field(..., description="Headline naming the offending value")
    detail: str = Field(..., description="Explanation specific to this failure")
    input: str | None = Field(default=None, description="Rejected text input")
    field: str | None = Field(default=None, description="Address part at fault")


def build_diagnostic(error: EmailAddressError) -> Diagnostic:
    """Convert a domain error into a Diagnostic.

    Args:
        error: Error carried by a Failure from parse, construct or decode.

    Returns:
        Diagnostic ready for display or ``model_dump_json()``.
    """
    match error:
        case InvalidFormatError():
            detail = error.detail
            input_text: str | None = error.input_text
            field = None
        case CapacityExceededError():
            detail = f"At most {error.limit} characters are allowed per part."
            input_text = None
            field = error.part.value
        case DecodeError():
            detail = error.reason
            input_text = None
            field = None

    return Diagnostic(
        code=error.code.value,
        title=_TITLES[error.code],
        message=error.message,
        detail=detail,
        input=input_text,
        field=field,
    )
