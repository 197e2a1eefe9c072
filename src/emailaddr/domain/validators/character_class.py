"""Character classifier for email address tokens.

The accepted alphabet is declared once, as named ranges, so it can be reviewed
in a single place. The separator '@' is deliberately absent: the scanner
handles it before asking this module.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class CharacterRange:
    """Inclusive range of accepted characters.

    Attributes:
        name: Label used in documentation and tests.
        first: Lowest character in the range.
        last: Highest character in the range.
    """

    name: str
    first: str
    last: str

    def __contains__(self, c: object) -> bool:
        return isinstance(c, str) and len(c) == 1 and self.first <= c <= self.last

    def characters(self) -> str:
        """Every character of the range, in code point order."""
        return "".join(chr(cp) for cp in range(ord(self.first), ord(self.last) + 1))


DIGITS = CharacterRange(name="digits", first="0", last="9")
UPPERCASE_LETTERS = CharacterRange(name="uppercase letters", first="A", last="Z")
LOWERCASE_LETTERS = CharacterRange(name="lowercase letters", first="a", last="z")
DOT = CharacterRange(name="dot", first=".", last=".")
HYPHEN = CharacterRange(name="hyphen", first="-", last="-")

ACCEPTED_RANGES: tuple[CharacterRange, ...] = (
    DIGITS,
    UPPERCASE_LETTERS,
    LOWERCASE_LETTERS,
    DOT,
    HYPHEN,
)

LETTER_RANGES: tuple[CharacterRange, ...] = (UPPERCASE_LETTERS, LOWERCASE_LETTERS)

ALLOWED_CHARACTERS: frozenset[str] = frozenset(
    "".join(r.characters() for r in ACCEPTED_RANGES)
)


def is_valid_character(c: str) -> bool:
    """Check whether ``c`` may appear in a local or domain part.

    Args:
        c: A single character. Anything else (empty string, longer strings,
            non-str values) is rejected rather than raising.

    Returns:
        True for ASCII letters, digits, '.' and '-'; False otherwise.

    Example:
        >>> is_valid_character("a"), is_valid_character("@")
        (True, False)
    """
    return c in ALLOWED_CHARACTERS if isinstance(c, str) else False


def is_letter(c: str) -> bool:
    """Check whether ``c`` is an ASCII letter of either case."""
    return any(c in r for r in LETTER_RANGES)
