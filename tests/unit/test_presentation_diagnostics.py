"""Unit tests for user-facing diagnostics."""

import json

import pytest
from pydantic import ValidationError

from emailaddr.domain.enums import AddressPart, FormatViolation
from emailaddr.domain.errors import CapacityExceededError, DecodeError, report
from emailaddr.domain.parser import parse
from emailaddr.presentation import Diagnostic, build_diagnostic


@pytest.mark.unit
class TestBuildDiagnostic:
    """Test conversion of each error kind."""

    def test_invalid_format(self):
        diagnostic = build_diagnostic(parse("alice@").error)

        assert diagnostic.code == "invalid_format"
        assert diagnostic.title == "Invalid Email Address"
        assert diagnostic.message == 'invalid input syntax for email address: "alice@"'
        assert diagnostic.detail == "The domain part after '@' is empty."
        assert diagnostic.input == "alice@"
        assert diagnostic.field is None

    def test_capacity_exceeded(self):
        error = CapacityExceededError.for_field(AddressPart.DOMAIN, 200, 127)
        diagnostic = build_diagnostic(error)

        assert diagnostic.code == "capacity_exceeded"
        assert diagnostic.title == "Email Address Too Long"
        assert diagnostic.detail == "At most 127 characters are allowed per part."
        assert diagnostic.field == "domain"
        assert diagnostic.input is None

    def test_decode_error(self):
        diagnostic = build_diagnostic(DecodeError.because("record is not ASCII text"))

        assert diagnostic.code == "decode_error"
        assert diagnostic.title == "Corrupt Email Address Data"
        assert diagnostic.detail == "record is not ASCII text"

    def test_json_serialization(self):
        error = report("bob", FormatViolation.MISSING_SEPARATOR).error
        payload = json.loads(build_diagnostic(error).model_dump_json())

        assert payload["code"] == "invalid_format"
        assert payload["detail"] == "The value has no '@' separator."
        assert payload["input"] == "bob"

    def test_diagnostic_is_frozen(self):
        diagnostic = build_diagnostic(DecodeError.because("x"))
        with pytest.raises(ValidationError):
            diagnostic.detail = "changed"  # type: ignore[misc]

    def test_direct_construction(self):
        diagnostic = Diagnostic(
            code="decode_error",
            title="Corrupt Email Address Data",
            message="invalid binary data for email address: x",
            detail="x",
        )
        assert diagnostic.input is None
        assert diagnostic.field is None
