"""Text input and output for email addresses.

Flow (parse):
1. Normalize input (bytes are read as a C string: up to the first NUL, ASCII)
2. Scan the local part up to the first '@'
3. Scan the domain part to the end of input
4. Apply the registered format rules for the active grammar level
5. Strict level only: run the email-validator syntax check
6. Construct the value (capacity check)

Every rejection in steps 1-5 becomes the same INVALID_FORMAT failure through
the error reporter; step 6 yields CAPACITY_EXCEEDED.
"""

from emailaddr.core.constants import MAX_FIELD_LENGTH, RECORD_TERMINATOR, SEPARATOR
from emailaddr.core.enums import GrammarLevel
from emailaddr.core.result import Failure, Result
from emailaddr.domain.enums import AddressPart, FormatViolation
from emailaddr.domain.errors import EmailAddressError, report
from emailaddr.domain.validators import (
    get_rules_for,
    scan_domain,
    scan_local,
    validate_address_strict,
)
from emailaddr.domain.value_objects.email_address import EmailAddress, construct


def parse(
    text: str | bytes,
    *,
    grammar: GrammarLevel = GrammarLevel.MINIMAL,
    max_length: int = MAX_FIELD_LENGTH,
) -> Result[EmailAddress, EmailAddressError]:
    """Parse ``local@domain`` text into an EmailAddress.

    Args:
        text: Raw input. ``bytes`` are treated as a NUL-terminated string and
            must be ASCII.
        grammar: Format rules to apply after scanning.
        max_length: Per-field bound in characters.

    Returns:
        Success(EmailAddress), Failure(InvalidFormatError) or
        Failure(CapacityExceededError).

    Example:
        >>> parse("Alice@Example.com")
        Success(value=EmailAddress(local='Alice', domain='Example.com'))
        >>> parse("alice@@example.com").error.violation
        <FormatViolation.MULTIPLE_SEPARATORS: 'multiple_separators'>
    """
    if isinstance(text, bytes):
        raw = text.split(RECORD_TERMINATOR, 1)[0]
        try:
            text = raw.decode("ascii")
        except UnicodeDecodeError:
            return report(
                raw.decode("ascii", errors="replace"),
                FormatViolation.INVALID_CHARACTER,
            )

    local_scan = scan_local(text)
    if isinstance(local_scan, Failure):
        return report(text, local_scan.error)
    at_index = local_scan.value

    domain_scan = scan_domain(at_index + 1, text)
    if isinstance(domain_scan, Failure):
        return report(text, domain_scan.error)

    local = text[:at_index]
    domain = text[at_index + 1 : domain_scan.value]

    for part, value in ((AddressPart.LOCAL, local), (AddressPart.DOMAIN, domain)):
        for rule in get_rules_for(part, grammar):
            if not rule.predicate(value):
                return report(text, rule.violation)

    if grammar is GrammarLevel.STRICT and not validate_address_strict(local, domain):
        return report(text, FormatViolation.UNSPECIFIED)

    return construct(local, domain, max_length=max_length)


def format_address(value: EmailAddress) -> str:
    """Render an address as ``local@domain`` with the stored case.

    Example:
        >>> format_address(EmailAddress("Alice", "Example.com"))
        'Alice@Example.com'
    """
    return f"{value.local}{SEPARATOR}{value.domain}"
