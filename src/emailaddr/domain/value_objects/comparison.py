"""Domain-major ordering of email addresses.

Both fields compare case-insensitively using ASCII folding only, the same rule
in both steps, so the order agrees with the accepted alphabet and never
depends on locale.

Usage:
    from emailaddr.domain.value_objects.comparison import compare

    compare(a, b)               # Ordering.LESS / EQUAL / GREATER
    compare_domain_only(a, b)   # same, domains only
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from emailaddr.domain.enums import Ordering

if TYPE_CHECKING:
    from emailaddr.domain.value_objects.email_address import EmailAddress

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold(text: str) -> str:
    """Lower-case ASCII letters only; every other character is unchanged."""
    return text.translate(_ASCII_FOLD)


def compare(a: EmailAddress, b: EmailAddress) -> Ordering:
    """Order by domain first, then by local part.

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        Ordering of ``a`` relative to ``b``.

    Example:
        >>> compare(EmailAddress("Zed", "a.com"), EmailAddress("Alice", "b.com"))
        <Ordering.LESS: -1>
    """
    by_domain = compare_domain_only(a, b)
    if by_domain is not Ordering.EQUAL:
        return by_domain
    return Ordering.of(fold(a.local), fold(b.local))


def compare_domain_only(a: EmailAddress, b: EmailAddress) -> Ordering:
    """Order by domain alone (same mail host test)."""
    return Ordering.of(fold(a.domain), fold(b.domain))


# -----------------------------------------------------------------------------
# Derived predicates
# -----------------------------------------------------------------------------


def lt(a: EmailAddress, b: EmailAddress) -> bool:
    return compare(a, b) < 0


def le(a: EmailAddress, b: EmailAddress) -> bool:
    return compare(a, b) <= 0


def eq(a: EmailAddress, b: EmailAddress) -> bool:
    return compare(a, b) == 0


def ne(a: EmailAddress, b: EmailAddress) -> bool:
    return compare(a, b) != 0


def ge(a: EmailAddress, b: EmailAddress) -> bool:
    return compare(a, b) >= 0


def gt(a: EmailAddress, b: EmailAddress) -> bool:
    return compare(a, b) > 0


def domain_eq(a: EmailAddress, b: EmailAddress) -> bool:
    """True when both addresses share a mail host (``~``)."""
    return compare_domain_only(a, b) == 0


def domain_ne(a: EmailAddress, b: EmailAddress) -> bool:
    """True when the addresses have different mail hosts (``!~``)."""
    return compare_domain_only(a, b) != 0
