"""Email address value type.

Parse, render, compare and serialize email addresses as a first-class scalar
value for a host data system.

Usage:
    from emailaddr import EmailAddress, decode, encode, parse

    address = EmailAddress.parse("Alice@Example.com")
    assert decode(encode(address)).value == address
"""

from emailaddr.core.enums import ErrorCode, GrammarLevel
from emailaddr.core.result import Failure, Result, Success
from emailaddr.domain.enums import AddressPart, FormatViolation, Ordering
from emailaddr.domain.errors import (
    CapacityExceededError,
    DecodeError,
    EmailAddressError,
    EmailAddressValueError,
    InvalidFormatError,
    report,
)
from emailaddr.domain.parser import format_address, parse
from emailaddr.domain.value_objects import (
    EmailAddress,
    compare,
    compare_domain_only,
    construct,
)
from emailaddr.infrastructure.wire import decode, encode

__version__ = "0.1.0"

__all__ = [
    "AddressPart",
    "CapacityExceededError",
    "DecodeError",
    "EmailAddress",
    "EmailAddressError",
    "EmailAddressValueError",
    "ErrorCode",
    "Failure",
    "FormatViolation",
    "GrammarLevel",
    "InvalidFormatError",
    "Ordering",
    "Result",
    "Success",
    "compare",
    "compare_domain_only",
    "construct",
    "decode",
    "encode",
    "format_address",
    "parse",
    "report",
]
