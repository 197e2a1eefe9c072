"""Structural rules applied to scanned local and domain parts.

Validators are pure predicates over text the scanner already accepted.

The minimal rules are always applied. The strict rules are an opt-in
extension (GrammarLevel.STRICT): they tighten both parts to a label grammar
and additionally run the email-validator syntax check on the whole address,
without any DNS or deliverability lookups.
"""

import re

from email_validator import EmailNotValidError, validate_email

from emailaddr.core.constants import SEPARATOR
from emailaddr.domain.validators.character_class import is_letter

LOCAL_STRICT_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*(?:[.-][A-Za-z0-9]+)*")
DOMAIN_LABEL_PATTERN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?")


def validate_local(text: str) -> bool:
    """Check the local part starts with a letter (either case).

    Example:
        >>> validate_local("alice"), validate_local("1alice")
        (True, False)
    """
    return bool(text) and is_letter(text[0])


def validate_domain(text: str) -> bool:
    """Accept any domain the scanner passed."""
    return bool(text)


def validate_local_strict(text: str) -> bool:
    """Check the local part is letter-led words joined by single '.' or '-'.

    Example:
        >>> validate_local_strict("mary-jane.doe"), validate_local_strict("a..b")
        (True, False)
    """
    return LOCAL_STRICT_PATTERN.fullmatch(text) is not None


def validate_domain_strict(text: str) -> bool:
    """Check the domain is at least two dot-separated host labels.

    Example:
        >>> validate_domain_strict("mail.example.com"), validate_domain_strict("localhost")
        (True, False)
    """
    labels = text.split(".")
    if len(labels) < 2:
        return False
    return all(DOMAIN_LABEL_PATTERN.fullmatch(label) for label in labels)


def validate_address_strict(local: str, domain: str) -> bool:
    """Run the email-validator syntax check on the reassembled address.

    Args:
        local: Scanned local part.
        domain: Scanned domain part.

    Returns:
        True if email-validator accepts the address as syntactically valid.
    """
    try:
        validate_email(f"{local}{SEPARATOR}{domain}", check_deliverability=False)
    except EmailNotValidError:
        return False
    return True
