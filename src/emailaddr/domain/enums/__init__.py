"""Domain enums package.

Usage:
    from emailaddr.domain.enums import AddressPart, FormatViolation, Ordering
"""

from emailaddr.domain.enums.address_part import AddressPart
from emailaddr.domain.enums.format_violation import FormatViolation
from emailaddr.domain.enums.ordering import Ordering

__all__ = ["AddressPart", "FormatViolation", "Ordering"]
