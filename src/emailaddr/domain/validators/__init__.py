"""Validators package exports.

Exports:
    - Character classifier (from character_class.py)
    - Scanner (from scanner.py)
    - Format rules (from format_rules.py)
    - Registry components (from registry.py)
"""

from emailaddr.domain.validators.character_class import (
    ALLOWED_CHARACTERS,
    CharacterRange,
    is_letter,
    is_valid_character,
)
from emailaddr.domain.validators.format_rules import (
    validate_address_strict,
    validate_domain,
    validate_domain_strict,
    validate_local,
    validate_local_strict,
)
from emailaddr.domain.validators.registry import (
    VALIDATION_RULES_REGISTRY,
    ValidationRuleMetadata,
    get_all_validation_rules,
    get_rules_for,
    get_statistics,
    get_validation_rule,
)
from emailaddr.domain.validators.scanner import scan_domain, scan_local

__all__ = [
    # Character classifier
    "ALLOWED_CHARACTERS",
    "CharacterRange",
    "is_letter",
    "is_valid_character",
    # Scanner
    "scan_local",
    "scan_domain",
    # Format rules
    "validate_local",
    "validate_domain",
    "validate_local_strict",
    "validate_domain_strict",
    "validate_address_strict",
    # Registry
    "VALIDATION_RULES_REGISTRY",
    "ValidationRuleMetadata",
    "get_validation_rule",
    "get_all_validation_rules",
    "get_rules_for",
    "get_statistics",
]
