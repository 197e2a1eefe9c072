"""Operator catalog for the email address type.

Describes every relational operator a host registers for the type, together
with the commutator and negator it needs for query planning and the subset
that forms the B-tree operator class. All predicates are thin wrappers over
the same three-way comparators, so an index and the operators can never
disagree on ordering.

Pattern: Registry Pattern with metadata catalog and helper functions.
"""

from dataclasses import dataclass
from typing import Callable

from emailaddr.domain.value_objects import (
    EmailAddress,
    compare,
    domain_eq,
    domain_ne,
    eq,
    ge,
    gt,
    le,
    lt,
    ne,
)


@dataclass(frozen=True, kw_only=True)
class OperatorMetadata:
    """Metadata for one operator.

    Attributes:
        symbol: Operator as written in queries (e.g., '<=').
        function_name: Name the host binds the predicate under.
        predicate: Boolean function of two addresses.
        commutator: Symbol giving the same answer with swapped operands.
        negator: Symbol giving the opposite answer.
        btree_strategy: Strategy number in the B-tree operator class, or None
            when the operator is not indexable by ordering.
        description: Human-readable meaning.
    """

    symbol: str
    function_name: str
    predicate: Callable[[EmailAddress, EmailAddress], bool]
    commutator: str
    negator: str
    btree_strategy: int | None
    description: str


# =============================================================================
# Operator Registry
# =============================================================================

OPERATOR_REGISTRY: dict[str, OperatorMetadata] = {
    "<": OperatorMetadata(
        symbol="<",
        function_name="email_lt",
        predicate=lt,
        commutator=">",
        negator=">=",
        btree_strategy=1,
        description="Sorts before (domain first, then local part)",
    ),
    "<=": OperatorMetadata(
        symbol="<=",
        function_name="email_le",
        predicate=le,
        commutator=">=",
        negator=">",
        btree_strategy=2,
        description="Sorts before or equal",
    ),
    "=": OperatorMetadata(
        symbol="=",
        function_name="email_eq",
        predicate=eq,
        commutator="=",
        negator="<>",
        btree_strategy=3,
        description="Same address ignoring ASCII case",
    ),
    ">=": OperatorMetadata(
        symbol=">=",
        function_name="email_ge",
        predicate=ge,
        commutator="<=",
        negator="<",
        btree_strategy=4,
        description="Sorts after or equal",
    ),
    ">": OperatorMetadata(
        symbol=">",
        function_name="email_gt",
        predicate=gt,
        commutator="<",
        negator="<=",
        btree_strategy=5,
        description="Sorts after",
    ),
    "<>": OperatorMetadata(
        symbol="<>",
        function_name="email_ne",
        predicate=ne,
        commutator="<>",
        negator="=",
        btree_strategy=None,
        description="Different address ignoring ASCII case",
    ),
    "~": OperatorMetadata(
        symbol="~",
        function_name="email_de",
        predicate=domain_eq,
        commutator="~",
        negator="!~",
        btree_strategy=None,
        description="Same mail host",
    ),
    "!~": OperatorMetadata(
        symbol="!~",
        function_name="email_dne",
        predicate=domain_ne,
        commutator="!~",
        negator="~",
        btree_strategy=None,
        description="Different mail host",
    ),
}

BTREE_SUPPORT_FUNCTION = "email_cmp"


# =============================================================================
# Helper Functions
# =============================================================================


def get_operator(symbol: str) -> OperatorMetadata | None:
    """Get operator metadata by symbol.

    Args:
        symbol: Operator symbol (e.g., '~').

    Returns:
        OperatorMetadata if known, None otherwise.
    """
    return OPERATOR_REGISTRY.get(symbol)


def apply_operator(symbol: str, a: EmailAddress, b: EmailAddress) -> bool:
    """Evaluate ``a <symbol> b``.

    Raises:
        KeyError: If the symbol is not a registered operator.

    Example:
        >>> apply_operator("~", EmailAddress("a", "x.com"), EmailAddress("b", "X.COM"))
        True
    """
    return OPERATOR_REGISTRY[symbol].predicate(a, b)


def btree_support(a: EmailAddress, b: EmailAddress) -> int:
    """Three-way support function for the B-tree operator class (-1, 0, 1)."""
    return int(compare(a, b))


def btree_operators() -> list[OperatorMetadata]:
    """Operators of the B-tree class, ordered by strategy number."""
    return sorted(
        (op for op in OPERATOR_REGISTRY.values() if op.btree_strategy is not None),
        key=lambda op: op.btree_strategy or 0,
    )
