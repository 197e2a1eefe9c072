"""Reasons a textual email address is rejected.

All of these surface under the same ErrorCode.INVALID_FORMAT; the violation
only selects the diagnostic detail shown to the user.
"""

from enum import Enum


class FormatViolation(str, Enum):
    """Sub-kind of an invalid-format failure."""

    UNSPECIFIED = "unspecified"
    EMPTY_LOCAL = "empty_local"
    EMPTY_DOMAIN = "empty_domain"
    MISSING_SEPARATOR = "missing_separator"
    MULTIPLE_SEPARATORS = "multiple_separators"
    INVALID_CHARACTER = "invalid_character"
    LOCAL_NOT_LETTER_START = "local_not_letter_start"
    LOCAL_GRAMMAR = "local_grammar"
    DOMAIN_GRAMMAR = "domain_grammar"
