"""Three-way comparison outcome."""

from enum import IntEnum


class Ordering(IntEnum):
    """Result of comparing two email addresses.

    Integer values match the sign convention of a B-tree support function,
    so ``int(ordering)`` can be handed to a host index directly.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: str, right: str) -> "Ordering":
        """Order two already-folded strings.

        Args:
            left: Left operand.
            right: Right operand.

        Returns:
            Ordering of left relative to right.
        """
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL
