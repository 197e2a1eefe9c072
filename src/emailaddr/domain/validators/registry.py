"""Validation Rules Registry.

Single source of truth for the structural rules applied after scanning.
The parser asks the registry which rules apply to a part at a given grammar
level, so adding a rule here is enough to enforce it.

Pattern: Registry Pattern with metadata catalog and helper functions.
"""

from dataclasses import dataclass
from typing import Callable

from emailaddr.core.enums import GrammarLevel
from emailaddr.domain.enums import AddressPart, FormatViolation
from emailaddr.domain.validators.format_rules import (
    validate_domain,
    validate_domain_strict,
    validate_local,
    validate_local_strict,
)


@dataclass(frozen=True, kw_only=True)
class ValidationRuleMetadata:
    """Metadata for a single validation rule.

    Attributes:
        rule_name: Unique identifier for the rule (e.g., 'local_letter_start').
        part: Field the rule inspects.
        level: Lowest grammar level at which the rule is enforced.
        predicate: Callable returning True when the text passes.
        violation: FormatViolation reported when the predicate fails.
        description: Human-readable description of the requirement.
        examples: Values that pass the rule.

    Example:
        >>> rule = get_validation_rule("local_letter_start")
        >>> rule.predicate("alice")
        True
    """

    rule_name: str
    part: AddressPart
    level: GrammarLevel
    predicate: Callable[[str], bool]
    violation: FormatViolation
    description: str
    examples: list[str]

    def applies_at(self, level: GrammarLevel) -> bool:
        """Check whether the rule is enforced at ``level``."""
        return self.level is GrammarLevel.MINIMAL or level is GrammarLevel.STRICT


# =============================================================================
# Validation Rules Registry
# =============================================================================

VALIDATION_RULES_REGISTRY: dict[str, ValidationRuleMetadata] = {
    "local_letter_start": ValidationRuleMetadata(
        rule_name="local_letter_start",
        part=AddressPart.LOCAL,
        level=GrammarLevel.MINIMAL,
        predicate=validate_local,
        violation=FormatViolation.LOCAL_NOT_LETTER_START,
        description="Local part begins with an ASCII letter",
        examples=["alice", "Bob.Smith", "x-1"],
    ),
    "domain_scanned": ValidationRuleMetadata(
        rule_name="domain_scanned",
        part=AddressPart.DOMAIN,
        level=GrammarLevel.MINIMAL,
        predicate=validate_domain,
        violation=FormatViolation.UNSPECIFIED,
        description="Domain part accepted as scanned",
        examples=["example.com", "localhost", "10.0.0.1"],
    ),
    "local_words": ValidationRuleMetadata(
        rule_name="local_words",
        part=AddressPart.LOCAL,
        level=GrammarLevel.STRICT,
        predicate=validate_local_strict,
        violation=FormatViolation.LOCAL_GRAMMAR,
        description="Letter-led words joined by single '.' or '-'",
        examples=["alice", "mary-jane.doe", "j2.smith"],
    ),
    "domain_labels": ValidationRuleMetadata(
        rule_name="domain_labels",
        part=AddressPart.DOMAIN,
        level=GrammarLevel.STRICT,
        predicate=validate_domain_strict,
        violation=FormatViolation.DOMAIN_GRAMMAR,
        description="Two or more dot-separated host labels",
        examples=["example.com", "mail.example.co.uk"],
    ),
}


# =============================================================================
# Helper Functions
# =============================================================================


def get_validation_rule(rule_name: str) -> ValidationRuleMetadata | None:
    """Get validation rule metadata by name.

    Args:
        rule_name: Name of the validation rule.

    Returns:
        ValidationRuleMetadata if found, None otherwise.
    """
    return VALIDATION_RULES_REGISTRY.get(rule_name)


def get_all_validation_rules() -> list[ValidationRuleMetadata]:
    """Get all validation rules in the registry."""
    return list(VALIDATION_RULES_REGISTRY.values())


def get_rules_for(
    part: AddressPart, level: GrammarLevel = GrammarLevel.MINIMAL
) -> list[ValidationRuleMetadata]:
    """Get the rules enforced on ``part`` at ``level``, in registry order.

    Args:
        part: Field being validated.
        level: Active grammar level.

    Returns:
        Rules to apply, minimal rules first.

    Example:
        >>> [r.rule_name for r in get_rules_for(AddressPart.LOCAL, GrammarLevel.STRICT)]
        ['local_letter_start', 'local_words']
    """
    return [
        rule
        for rule in VALIDATION_RULES_REGISTRY.values()
        if rule.part is part and rule.applies_at(level)
    ]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dictionary with:
        - total_rules: Total number of rules
        - by_level: Count of rules per grammar level
        - by_part: Count of rules per address part
    """
    rules = list(VALIDATION_RULES_REGISTRY.values())
    by_level: dict[str, int] = {}
    by_part: dict[str, int] = {}

    for rule in rules:
        by_level[rule.level.value] = by_level.get(rule.level.value, 0) + 1
        by_part[rule.part.value] = by_part.get(rule.part.value, 0) + 1

    return {
        "total_rules": len(rules),
        "by_level": by_level,
        "by_part": by_part,
    }
