"""Domain errors package.

Usage:
    from emailaddr.domain.errors import InvalidFormatError, DecodeError, report
"""

from emailaddr.domain.errors.email_address_error import (
    CapacityExceededError,
    DecodeError,
    EmailAddressError,
    EmailAddressMessages,
    EmailAddressValueError,
    InvalidFormatError,
)
from emailaddr.domain.errors.reporter import report

__all__ = [
    "CapacityExceededError",
    "DecodeError",
    "EmailAddressError",
    "EmailAddressMessages",
    "EmailAddressValueError",
    "InvalidFormatError",
    "report",
]
