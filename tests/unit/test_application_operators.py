"""Unit tests for the operator catalog.

Tests cover:
- Registry consistency (commutators, negators, B-tree strategies)
- apply_operator on concrete values
- B-tree support function
"""

import itertools

import pytest

from emailaddr.application.operators import (
    BTREE_SUPPORT_FUNCTION,
    OPERATOR_REGISTRY,
    apply_operator,
    btree_operators,
    btree_support,
    get_operator,
)
from emailaddr.domain.value_objects import EmailAddress

SAMPLE = [
    EmailAddress("alice", "example.com"),
    EmailAddress("ALICE", "Example.com"),
    EmailAddress("bob", "example.com"),
    EmailAddress("zed", "a.org"),
]


@pytest.mark.unit
class TestOperatorRegistry:
    """Test registry consistency."""

    def test_all_symbols_registered(self):
        assert set(OPERATOR_REGISTRY) == {"<", "<=", "=", ">=", ">", "<>", "~", "!~"}

    def test_keys_match_symbols(self):
        for symbol, op in OPERATOR_REGISTRY.items():
            assert op.symbol == symbol

    def test_commutators_and_negators_are_registered(self):
        for op in OPERATOR_REGISTRY.values():
            assert op.commutator in OPERATOR_REGISTRY
            assert op.negator in OPERATOR_REGISTRY
            assert OPERATOR_REGISTRY[op.negator].negator == op.symbol
            assert OPERATOR_REGISTRY[op.commutator].commutator == op.symbol

    def test_commutator_swaps_operands(self):
        for op in OPERATOR_REGISTRY.values():
            swapped = OPERATOR_REGISTRY[op.commutator].predicate
            for a, b in itertools.product(SAMPLE, repeat=2):
                assert op.predicate(a, b) is swapped(b, a)

    def test_negator_inverts(self):
        for op in OPERATOR_REGISTRY.values():
            negated = OPERATOR_REGISTRY[op.negator].predicate
            for a, b in itertools.product(SAMPLE, repeat=2):
                assert op.predicate(a, b) is not negated(a, b)

    def test_btree_class(self):
        """Test the B-tree class holds the five ordering operators in order."""
        assert [op.symbol for op in btree_operators()] == ["<", "<=", "=", ">=", ">"]
        assert [op.btree_strategy for op in btree_operators()] == [1, 2, 3, 4, 5]
        assert BTREE_SUPPORT_FUNCTION == "email_cmp"

    def test_get_operator(self):
        op = get_operator("~")
        assert op is not None
        assert op.function_name == "email_de"
        assert get_operator("??") is None


@pytest.mark.unit
class TestApplyOperator:
    """Test apply_operator."""

    def test_equality_ignores_case(self):
        assert apply_operator("=", EmailAddress("A", "X.com"), EmailAddress("a", "x.COM"))

    def test_domain_match(self):
        a = EmailAddress("alice", "example.com")
        b = EmailAddress("bob", "EXAMPLE.com")
        assert apply_operator("~", a, b)
        assert not apply_operator("!~", a, b)
        assert apply_operator("<>", a, b)

    def test_ordering(self):
        a = EmailAddress("zed", "a.com")
        b = EmailAddress("alice", "b.com")
        assert apply_operator("<", a, b)
        assert apply_operator("<=", a, b)
        assert not apply_operator(">", a, b)

    def test_unknown_symbol(self):
        with pytest.raises(KeyError):
            apply_operator("===", SAMPLE[0], SAMPLE[1])


@pytest.mark.unit
class TestBtreeSupport:
    """Test the three-way support function."""

    def test_values(self):
        a = EmailAddress("alice", "example.com")
        assert btree_support(a, EmailAddress("ALICE", "example.com")) == 0
        assert btree_support(a, EmailAddress("bob", "example.com")) == -1
        assert btree_support(EmailAddress("bob", "example.com"), a) == 1

    def test_agrees_with_operators(self):
        for a, b in itertools.product(SAMPLE, repeat=2):
            c = btree_support(a, b)
            assert apply_operator("<", a, b) is (c < 0)
            assert apply_operator("=", a, b) is (c == 0)
            assert apply_operator(">", a, b) is (c > 0)
