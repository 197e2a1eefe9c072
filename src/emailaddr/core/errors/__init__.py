"""Core errors package.

Usage:
    from emailaddr.core.errors import DomainError, ErrorCode
"""

from emailaddr.core.enums import ErrorCode
from emailaddr.core.errors.domain_error import DomainError

__all__ = ["DomainError", "ErrorCode"]
