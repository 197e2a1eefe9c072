"""Machine-readable error codes for email address failures.

Codes follow the ENTITY_REASON naming convention and are carried by every
DomainError returned inside a Failure.

Categories:
- Text input failures (INVALID_FORMAT)
- Capacity failures (CAPACITY_EXCEEDED)
- Wire input failures (DECODE_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Parse / validation of text input
    INVALID_FORMAT = "invalid_format"

    # A field is longer than the configured bound
    CAPACITY_EXCEEDED = "capacity_exceeded"

    # Malformed binary payload
    DECODE_ERROR = "decode_error"
