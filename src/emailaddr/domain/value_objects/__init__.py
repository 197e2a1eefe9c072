"""Domain value objects.

Immutable value objects that enforce the email address invariants.
"""

from emailaddr.domain.value_objects.comparison import (
    compare,
    compare_domain_only,
    domain_eq,
    domain_ne,
    eq,
    fold,
    ge,
    gt,
    le,
    lt,
    ne,
)
from emailaddr.domain.value_objects.email_address import EmailAddress, construct

__all__ = [
    "EmailAddress",
    "construct",
    "compare",
    "compare_domain_only",
    "fold",
    "lt",
    "le",
    "eq",
    "ne",
    "ge",
    "gt",
    "domain_eq",
    "domain_ne",
]
