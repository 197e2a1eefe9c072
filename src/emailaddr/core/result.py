"""Result types for railway-oriented programming.

Every core operation (parse, construct, decode) reports failure as data instead
of raising. Callers pattern-match on the outcome:

Usage:
    from emailaddr.core.result import Failure, Success
    from emailaddr.domain.parser import parse

    match parse("alice@example.com"):
        case Success(value=address):
            print(address.domain)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
