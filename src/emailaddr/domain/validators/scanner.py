"""Lexical scanner splitting raw input at the '@' separator.

Both scans return the exclusive end index of the part they walked, or the
FormatViolation that stopped them. Indexes are plain Python string offsets:

    "alice@example.com"
     ^    ^           ^
     0    5 (scan_local) 17 (scan_domain)
"""

from emailaddr.core.constants import SEPARATOR
from emailaddr.core.result import Failure, Result, Success
from emailaddr.domain.enums import FormatViolation
from emailaddr.domain.validators.character_class import is_valid_character


def scan_local(text: str) -> Result[int, FormatViolation]:
    """Find the end of the local part.

    Args:
        text: Complete raw input.

    Returns:
        Success with the index of the first '@', or Failure with
        EMPTY_LOCAL, INVALID_CHARACTER or MISSING_SEPARATOR.
    """
    for index, c in enumerate(text):
        if c == SEPARATOR:
            if index == 0:
                return Failure(error=FormatViolation.EMPTY_LOCAL)
            return Success(value=index)
        if not is_valid_character(c):
            return Failure(error=FormatViolation.INVALID_CHARACTER)

    if not text:
        return Failure(error=FormatViolation.EMPTY_LOCAL)
    return Failure(error=FormatViolation.MISSING_SEPARATOR)


def scan_domain(start: int, text: str) -> Result[int, FormatViolation]:
    """Find the end of the domain part.

    Args:
        start: Index just past the separator.
        text: Complete raw input.

    Returns:
        Success with ``len(text)``, or Failure with EMPTY_DOMAIN,
        MULTIPLE_SEPARATORS or INVALID_CHARACTER.
    """
    if start >= len(text):
        return Failure(error=FormatViolation.EMPTY_DOMAIN)

    for c in text[start:]:
        if c == SEPARATOR:
            return Failure(error=FormatViolation.MULTIPLE_SEPARATORS)
        if not is_valid_character(c):
            return Failure(error=FormatViolation.INVALID_CHARACTER)

    return Success(value=len(text))
