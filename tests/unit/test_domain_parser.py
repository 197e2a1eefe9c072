"""Unit tests for text parsing and formatting.

Tests cover:
- Accepted inputs and case preservation
- Each rejection path and its FormatViolation
- Byte string input
- Capacity failures after a successful scan
- Strict grammar level
- Error reporter message format
"""

import pytest

from emailaddr.core.enums import ErrorCode, GrammarLevel
from emailaddr.core.result import Failure, Success
from emailaddr.domain.enums import AddressPart, FormatViolation
from emailaddr.domain.errors import CapacityExceededError, InvalidFormatError, report
from emailaddr.domain.parser import format_address, parse
from emailaddr.domain.value_objects import EmailAddress


def _violation(result) -> FormatViolation:
    assert isinstance(result, Failure)
    assert isinstance(result.error, InvalidFormatError)
    return result.error.violation


@pytest.mark.unit
class TestParseSuccess:
    """Test accepted inputs."""

    def test_simple_address(self):
        result = parse("alice@example.com")
        assert isinstance(result, Success)
        assert result.value.local == "alice"
        assert result.value.domain == "example.com"

    def test_case_preserved(self):
        result = parse("Alice@Example.COM")
        assert isinstance(result, Success)
        assert result.value.local == "Alice"
        assert result.value.domain == "Example.COM"

    @pytest.mark.parametrize(
        "text",
        ["a@b", "x-1@host", "a..b@c", "mary.jane-doe@mail.example.co.uk", "z@1.2.3.4", "a@-"],
    )
    def test_minimal_grammar_accepts(self, text):
        """Test the minimal grammar accepts any letter-led local part."""
        assert isinstance(parse(text), Success)

    def test_round_trip_through_format(self):
        text = "Bob.Smith@Example.org"
        result = parse(text)
        assert isinstance(result, Success)
        assert format_address(result.value) == text
        assert parse(format_address(result.value)) == result


@pytest.mark.unit
class TestParseRejections:
    """Test each rejection path."""

    @pytest.mark.parametrize(
        ("text", "violation"),
        [
            ("", FormatViolation.EMPTY_LOCAL),
            ("@example.com", FormatViolation.EMPTY_LOCAL),
            ("alice@", FormatViolation.EMPTY_DOMAIN),
            ("alice", FormatViolation.MISSING_SEPARATOR),
            ("alice@@example.com", FormatViolation.MULTIPLE_SEPARATORS),
            ("a@b@c", FormatViolation.MULTIPLE_SEPARATORS),
            ("al ice@example.com", FormatViolation.INVALID_CHARACTER),
            ("alice@exam_ple.com", FormatViolation.INVALID_CHARACTER),
            ("alice+tag@example.com", FormatViolation.INVALID_CHARACTER),
            ("jörg@example.com", FormatViolation.INVALID_CHARACTER),
            ("1alice@example.com", FormatViolation.LOCAL_NOT_LETTER_START),
            (".alice@example.com", FormatViolation.LOCAL_NOT_LETTER_START),
            ("-alice@example.com", FormatViolation.LOCAL_NOT_LETTER_START),
        ],
    )
    def test_violation(self, text, violation):
        assert _violation(parse(text)) is violation

    def test_failure_carries_input_and_code(self):
        result = parse("alice@")

        assert isinstance(result, Failure)
        error = result.error
        assert error.code == ErrorCode.INVALID_FORMAT
        assert error.input_text == "alice@"
        assert error.message == 'invalid input syntax for email address: "alice@"'
        assert error.details == {"violation": "empty_domain"}
        assert error.detail == "The domain part after '@' is empty."

    def test_all_rejections_share_headline(self):
        """Test the headline depends only on the input text."""
        for text in ("", "alice", "1a@b", "a@@b"):
            result = parse(text)
            assert isinstance(result, Failure)
            assert result.error.message == f'invalid input syntax for email address: "{text}"'


@pytest.mark.unit
class TestParseBytes:
    """Test byte string input."""

    def test_ascii_bytes(self):
        assert parse(b"alice@example.com") == Success(value=EmailAddress("alice", "example.com"))

    def test_stops_at_nul(self):
        """Test bytes are read as a C string."""
        result = parse(b"alice@example.com\x00garbage")
        assert isinstance(result, Success)
        assert result.value.domain == "example.com"

    def test_non_ascii_bytes(self):
        result = parse("jörg@example.com".encode("utf-8"))
        assert _violation(result) is FormatViolation.INVALID_CHARACTER
        assert "�" in result.error.input_text


@pytest.mark.unit
class TestParseCapacity:
    """Test capacity failures after scanning succeeds."""

    def test_local_too_long(self):
        result = parse("a" * 128 + "@example.com")

        assert isinstance(result, Failure)
        assert isinstance(result.error, CapacityExceededError)
        assert result.error.part is AddressPart.LOCAL

    def test_domain_too_long(self):
        result = parse("alice@" + "d" * 128)

        assert isinstance(result, Failure)
        assert isinstance(result.error, CapacityExceededError)
        assert result.error.part is AddressPart.DOMAIN

    def test_at_limit_accepted(self):
        assert isinstance(parse("a" * 127 + "@" + "d" * 127), Success)

    def test_format_error_reported_before_capacity(self):
        """Test an oversized but malformed input is a format error."""
        result = parse("1" + "a" * 200 + "@example.com")
        assert _violation(result) is FormatViolation.LOCAL_NOT_LETTER_START

    def test_custom_bound(self):
        result = parse("alice@example.com", max_length=5)
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CAPACITY_EXCEEDED


@pytest.mark.unit
class TestParseStrict:
    """Test the strict grammar level."""

    @pytest.mark.parametrize(
        "text", ["alice@example.com", "mary-jane.doe@mail.example.co.uk", "A1@x-y.net"]
    )
    def test_accepts_well_formed(self, text):
        assert isinstance(parse(text, grammar=GrammarLevel.STRICT), Success)

    @pytest.mark.parametrize(
        ("text", "violation"),
        [
            ("a..b@example.com", FormatViolation.LOCAL_GRAMMAR),
            ("alice.@example.com", FormatViolation.LOCAL_GRAMMAR),
            ("alice@localhost", FormatViolation.DOMAIN_GRAMMAR),
            ("alice@example..com", FormatViolation.DOMAIN_GRAMMAR),
            ("alice@-a.com", FormatViolation.DOMAIN_GRAMMAR),
        ],
    )
    def test_rejects_grammar(self, text, violation):
        assert _violation(parse(text, grammar=GrammarLevel.STRICT)) is violation

    def test_minimal_rules_still_apply(self):
        result = parse("1a@example.com", grammar=GrammarLevel.STRICT)
        assert _violation(result) is FormatViolation.LOCAL_NOT_LETTER_START

    def test_email_validator_rejection(self):
        """Test a DNS label over 63 characters is caught by email-validator."""
        result = parse("alice@" + "x" * 64 + ".com", grammar=GrammarLevel.STRICT)
        assert _violation(result) is FormatViolation.UNSPECIFIED

    def test_same_input_accepted_by_minimal(self):
        assert isinstance(parse("alice@localhost"), Success)


@pytest.mark.unit
class TestReport:
    """Test the error reporter."""

    def test_default_violation(self):
        result = report("nope")

        assert isinstance(result, Failure)
        assert result.error.violation is FormatViolation.UNSPECIFIED
        assert result.error.message == 'invalid input syntax for email address: "nope"'
        assert result.error.detail == "The value is not a valid email address."

    def test_str_includes_code(self):
        result = report("x", FormatViolation.MISSING_SEPARATOR)
        assert str(result.error) == 'invalid_format: invalid input syntax for email address: "x"'

    def test_every_violation_has_detail(self):
        for violation in FormatViolation:
            assert report("x", violation).error.detail
