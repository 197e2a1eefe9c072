"""Immutable email address value object.

The canonical in-memory form of an email address: a (local, domain) pair,
each bounded in length and free of the '@' separator. Instances come from the
parser (text) or the binary codec (wire bytes); both go through ``construct``
so the capacity bound is always checked.

Equality, hashing and ordering follow the domain-major, case-insensitive
comparator. Display keeps the stored case.

Usage:
    from emailaddr.domain.value_objects import EmailAddress

    address = EmailAddress.parse("Alice@Example.com")
    address.domain                     # 'Example.com'
    address == EmailAddress.parse("alice@example.COM")   # True
"""

from dataclasses import dataclass

from emailaddr.core.constants import MAX_FIELD_LENGTH, SEPARATOR
from emailaddr.core.enums import GrammarLevel
from emailaddr.core.result import Failure, Result, Success
from emailaddr.domain.enums import AddressPart, Ordering
from emailaddr.domain.errors import (
    CapacityExceededError,
    EmailAddressMessages,
    EmailAddressValueError,
)
from emailaddr.domain.validators.character_class import is_valid_character
from emailaddr.domain.value_objects.comparison import compare, compare_domain_only, fold


@dataclass(frozen=True, slots=True, eq=False)
class EmailAddress:
    """Email address as a comparable, hashable value.

    Attributes:
        local: Text before the separator, case preserved.
        domain: Text after the separator, case preserved.

    Ordering:
        Domain first, then local part, both ASCII case-insensitive.
        ``EmailAddress("Bob", "Example.com") == EmailAddress("bob", "EXAMPLE.COM")``.

    Example:
        >>> sorted([EmailAddress("zed", "a.com"), EmailAddress("amy", "b.com")])
        [EmailAddress(local='zed', domain='a.com'), EmailAddress(local='amy', domain='b.com')]
    """

    local: str
    domain: str

    def __post_init__(self) -> None:
        """Validate field types and content.

        The length bound is applied by ``construct``, not here.

        Raises:
            TypeError: If either field is not a str.
            ValueError: If a field is empty, contains '@', or holds a
                character outside letters, digits, '.' and '-'.
        """
        if not isinstance(self.local, str) or not isinstance(self.domain, str):
            raise TypeError("EmailAddress fields must be strings")

        fields = ((AddressPart.LOCAL, self.local), (AddressPart.DOMAIN, self.domain))
        for part, value in fields:
            if not value:
                raise ValueError(
                    EmailAddressMessages.FIELD_EMPTY.format(part=part.value)
                )
            if SEPARATOR in value:
                raise ValueError(
                    EmailAddressMessages.FIELD_HAS_SEPARATOR.format(part=part.value)
                )
            for char in value:
                if not is_valid_character(char):
                    raise ValueError(
                        EmailAddressMessages.FIELD_INVALID_CHARACTER.format(
                            part=part.value, char=char
                        )
                    )

    # -------------------------------------------------------------------------
    # Comparison Operations
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return compare(self, other) is Ordering.EQUAL

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return compare(self, other) is not Ordering.EQUAL

    def __lt__(self, other: "EmailAddress") -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: "EmailAddress") -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: "EmailAddress") -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: "EmailAddress") -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return compare(self, other) is not Ordering.LESS

    def __hash__(self) -> int:
        # Must agree with __eq__, which ignores ASCII case
        return hash(self.sort_key)

    @property
    def sort_key(self) -> tuple[str, str]:
        """Folded (domain, local) pair matching the comparator's order."""
        return (fold(self.domain), fold(self.local))

    def same_domain(self, other: "EmailAddress") -> bool:
        """Check whether ``other`` is on the same mail host.

        Args:
            other: Address to compare against.

        Returns:
            True if the domains are equal ignoring ASCII case.
        """
        return compare_domain_only(self, other) is Ordering.EQUAL

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def parse(
        cls,
        text: str | bytes,
        *,
        grammar: GrammarLevel = GrammarLevel.MINIMAL,
        max_length: int = MAX_FIELD_LENGTH,
    ) -> "EmailAddress":
        """Parse text, raising instead of returning a Result.

        Args:
            text: Raw ``local@domain`` input.
            grammar: Format rules to apply after scanning.
            max_length: Per-field bound.

        Returns:
            The parsed address.

        Raises:
            EmailAddressValueError: If the text is rejected.
        """
        from emailaddr.domain.parser import parse

        match parse(text, grammar=grammar, max_length=max_length):
            case Success(value=address):
                return address
            case Failure(error=error):
                raise EmailAddressValueError(error)

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """Return the ``local@domain`` form, case preserved."""
        from emailaddr.domain.parser import format_address

        return format_address(self)

    def __repr__(self) -> str:
        return f"EmailAddress(local={self.local!r}, domain={self.domain!r})"


def construct(
    local: str, domain: str, *, max_length: int = MAX_FIELD_LENGTH
) -> Result[EmailAddress, CapacityExceededError]:
    """Build an EmailAddress from validated fields, checking capacity.

    Args:
        local: Validated local part.
        domain: Validated domain part.
        max_length: Per-field bound in characters.

    Returns:
        Success with the address, or Failure with CapacityExceededError naming
        the first field that is too long. Fields are never truncated.
    """
    for part, value in ((AddressPart.LOCAL, local), (AddressPart.DOMAIN, domain)):
        if len(value) > max_length:
            return Failure(
                error=CapacityExceededError.for_field(part, len(value), max_length)
            )
    return Success(value=EmailAddress(local, domain))
