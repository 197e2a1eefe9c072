"""Grammar levels for local-part and domain-part validation.

Levels:
- MINIMAL: local part starts with a letter, domain accepted as scanned
- STRICT: label-based grammar plus email-validator syntax check (opt-in)
"""

from enum import Enum


class GrammarLevel(str, Enum):
    """How strictly the format rules are applied after scanning."""

    MINIMAL = "minimal"
    STRICT = "strict"
