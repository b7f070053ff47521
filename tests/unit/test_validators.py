"""
Unit tests for validation rules.

Includes property-based testing with hypothesis for validators.
"""

import re
from datetime import date

import pytest
from hypothesis import given
from hypothesis import strategies as st

from maid_ingest.core.validators import (
    ChoiceValidator,
    CustomValidator,
    DateValidator,
    ListValidator,
    RangeValidator,
    RegexValidator,
    RequiredFieldValidator,
    ValidationError,
)

TODAY = date(2025, 6, 15)


class TestRequiredFieldValidator:
    """Tests for RequiredFieldValidator"""

    def test_valid_required_field(self):
        """Test validation passes for present field"""
        validator = RequiredFieldValidator("fullName")
        record = {"fullName": "Tigist Alemu"}
        validator.validate(record["fullName"], record)  # Should not raise

    def test_missing_field_raises_error(self):
        """Test validation fails for missing field"""
        validator = RequiredFieldValidator("fullName")
        record = {"phone": "123"}

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(None, record)

        assert exc_info.value.message == "fullName is required"
        assert exc_info.value.field_name == "fullName"

    def test_null_and_blank_values_raise_error(self):
        validator = RequiredFieldValidator("fullName")

        for value in (None, "", "   "):
            with pytest.raises(ValidationError):
                validator.validate(value, {"fullName": value})

    def test_custom_message(self):
        validator = RequiredFieldValidator(
            "fullName", {"messages": {"missing": "Full name is required"}}
        )

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(None, {})

        assert exc_info.value.message == "Full name is required"

    def test_require_string_rejects_non_strings(self):
        validator = RequiredFieldValidator("fullName", {"require_string": True})

        with pytest.raises(ValidationError):
            validator.validate(12345, {"fullName": 12345})

    def test_non_string_allowed_by_default(self):
        validator = RequiredFieldValidator("dateOfBirth")
        validator.validate(date(1995, 3, 10), {"dateOfBirth": date(1995, 3, 10)})

    @given(st.text(min_size=1).filter(lambda s: s.strip() != ""))
    def test_property_any_nonempty_string_passes(self, value):
        """Property test: any non-empty, non-whitespace string should pass"""
        validator = RequiredFieldValidator("field")
        record = {"field": value}
        validator.validate(record["field"], record)  # Should not raise


class TestRegexValidator:
    """Tests for RegexValidator"""

    PHONE = r"^[+]?[\d\s\-()]+$"

    def test_valid_pattern_match(self):
        validator = RegexValidator("phone", {"pattern": self.PHONE})
        record = {"phone": "+251 (911) 234-567"}
        validator.validate(record["phone"], record)

    def test_pattern_mismatch_raises_error(self):
        validator = RegexValidator(
            "phone",
            {"pattern": self.PHONE, "messages": {"mismatch": "Invalid phone number format"}},
        )

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("call me maybe", {"phone": "call me maybe"})

        assert exc_info.value.message == "Invalid phone number format"

    def test_absent_value_is_skipped(self):
        validator = RegexValidator("phone", {"pattern": self.PHONE})
        validator.validate(None, {})
        validator.validate("", {"phone": ""})

    def test_non_string_value_fails(self):
        validator = RegexValidator("phone", {"pattern": self.PHONE})

        with pytest.raises(ValidationError):
            validator.validate(251911234567, {"phone": 251911234567})

    def test_whole_value_must_match(self):
        validator = RegexValidator("phone", {"pattern": self.PHONE})

        with pytest.raises(ValidationError):
            validator.validate("0911234567\n", {"phone": "0911234567\n"})

    def test_compiled_pattern_with_flags(self):
        validator = RegexValidator("code", {"pattern": re.compile(r"^[a-z]+$", re.IGNORECASE)})
        validator.validate("ABC", {"code": "ABC"})

    def test_missing_pattern_raises_value_error(self):
        with pytest.raises(ValueError, match="pattern"):
            RegexValidator("phone", {})

    def test_invalid_pattern_raises_value_error(self):
        with pytest.raises(ValueError, match="Invalid regex"):
            RegexValidator("phone", {"pattern": "[unclosed"})

    @given(st.from_regex(r"\A\+?[0-9]{6,15}\Z"))
    def test_property_digit_phones_match(self, value):
        """Property test: any optionally '+'-prefixed digit string is a valid phone"""
        validator = RegexValidator("phone", {"pattern": self.PHONE})
        validator.validate(value, {"phone": value})


class TestRangeValidator:
    """Tests for RangeValidator"""

    def test_value_within_range(self):
        validator = RangeValidator("experienceYears", {"min": 0, "max": 50})
        validator.validate(10, {"experienceYears": 10})
        validator.validate("50", {"experienceYears": "50"})

    def test_value_below_and_above_range(self):
        validator = RangeValidator(
            "experienceYears",
            {"min": 0, "max": 50, "messages": {"out_of_range": "Experience years must be between 0 and 50"}},
        )

        for value in (-1, 51):
            with pytest.raises(ValidationError) as exc_info:
                validator.validate(value, {"experienceYears": value})
            assert exc_info.value.message == "Experience years must be between 0 and 50"

    def test_unparseable_value_reports_range_message(self):
        validator = RangeValidator("experienceYears", {"min": 0, "max": 50})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("lots", {"experienceYears": "lots"})

        assert exc_info.value.message == "experienceYears must be between 0 and 50"

    def test_non_integral_value_fails(self):
        validator = RangeValidator("childrenCount", {"min": 0, "max": 20})

        with pytest.raises(ValidationError):
            validator.validate(2.5, {"childrenCount": 2.5})

    def test_none_is_skipped_but_blank_string_fails(self):
        validator = RangeValidator("preferredSalaryMin", {"min": 0})
        validator.validate(None, {})

        with pytest.raises(ValidationError):
            validator.validate("", {"preferredSalaryMin": ""})

    def test_only_min_bound(self):
        validator = RangeValidator("preferredSalaryMin", {"min": 0})
        validator.validate(10 ** 9, {"preferredSalaryMin": 10 ** 9})

    def test_requires_a_bound(self):
        with pytest.raises(ValueError, match="at least one"):
            RangeValidator("experienceYears", {})

    @given(st.integers(min_value=0, max_value=50))
    def test_property_values_in_range_pass(self, value):
        """Property test: all integers within [0, 50] pass"""
        validator = RangeValidator("experienceYears", {"min": 0, "max": 50})
        validator.validate(value, {"experienceYears": value})

    @given(st.integers().filter(lambda x: x < 0 or x > 50))
    def test_property_values_outside_range_fail(self, value):
        """Property test: all integers outside [0, 50] fail"""
        validator = RangeValidator("experienceYears", {"min": 0, "max": 50})

        with pytest.raises(ValidationError):
            validator.validate(value, {"experienceYears": value})


class TestChoiceValidator:
    """Tests for ChoiceValidator"""

    STATUSES = ["single", "married", "divorced", "widowed"]

    def test_allowed_value_passes(self):
        validator = ChoiceValidator("maritalStatus", {"choices": self.STATUSES})
        validator.validate("married", {"maritalStatus": "married"})

    def test_disallowed_value_lists_choices(self):
        validator = ChoiceValidator(
            "maritalStatus",
            {
                "choices": self.STATUSES,
                "messages": {"invalid_choice": "Invalid marital status. Must be one of: {choices}"},
            },
        )

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("complicated", {"maritalStatus": "complicated"})

        assert exc_info.value.message == (
            "Invalid marital status. Must be one of: single, married, divorced, widowed"
        )

    def test_match_is_case_sensitive(self):
        validator = ChoiceValidator("maritalStatus", {"choices": self.STATUSES})

        with pytest.raises(ValidationError):
            validator.validate("Single", {"maritalStatus": "Single"})

    def test_absent_value_is_skipped(self):
        validator = ChoiceValidator("maritalStatus", {"choices": self.STATUSES})
        validator.validate(None, {})

    def test_requires_choices(self):
        with pytest.raises(ValueError, match="choices"):
            ChoiceValidator("maritalStatus", {})


class TestDateValidator:
    """Tests for DateValidator"""

    def _age_validator(self):
        return DateValidator(
            "dateOfBirth",
            {
                "today": lambda: TODAY,
                "min_age": 18,
                "max_age": 65,
                "messages": {
                    "too_young": "Maid must be at least {min_age} years old",
                    "too_old": "Invalid age (maximum {max_age} years)",
                },
            },
        )

    def test_valid_date(self):
        self._age_validator().validate("1995-03-10", {})

    def test_invalid_date_reports_only_format(self):
        validator = self._age_validator()

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("10/03/1995", {})

        assert exc_info.value.message == "Invalid dateOfBirth format"

    def test_too_young(self):
        with pytest.raises(ValidationError) as exc_info:
            self._age_validator().validate("2007-06-16", {})

        assert exc_info.value.message == "Maid must be at least 18 years old"

    def test_too_old(self):
        with pytest.raises(ValidationError) as exc_info:
            self._age_validator().validate("1959-06-15", {})

        assert exc_info.value.message == "Invalid age (maximum 65 years)"

    def test_not_in_past(self):
        validator = DateValidator("passportExpiry", {"today": lambda: TODAY, "not_in_past": True})
        validator.validate("2025-06-15", {})
        validator.validate(date(2030, 1, 1), {})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("2025-06-14", {})

        assert exc_info.value.message == "passportExpiry is in the past"

    def test_absent_value_is_skipped(self):
        self._age_validator().validate(None, {})
        self._age_validator().validate("  ", {})


class TestListValidator:
    """Tests for ListValidator"""

    def test_non_empty_list_passes(self):
        ListValidator("skills").validate(["cooking"], {})

    def test_non_list_fails(self):
        validator = ListValidator("skills", {"messages": {"not_a_list": "Skills must be an array"}})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("cooking", {})

        assert exc_info.value.message == "Skills must be an array"

    def test_empty_list_fails_by_default(self):
        with pytest.raises(ValidationError) as exc_info:
            ListValidator("skill").validate([], {})

        assert exc_info.value.message == "At least one skill is required"

    def test_empty_list_allowed_when_configured(self):
        ListValidator("skills", {"non_empty": False}).validate([], {})

    def test_absent_value_is_skipped(self):
        ListValidator("skills").validate(None, {})


class TestCustomValidator:
    """Tests for CustomValidator"""

    def test_passing_function(self):
        validator = CustomValidator("x", {"validator_func": lambda value, record: None})
        validator.validate(1, {"x": 1})

    def test_failure_uses_exception_text(self):
        def must_be_even(value, record):
            if value % 2:
                raise ValueError("Value must be even: {not a placeholder}")

        validator = CustomValidator("x", {"validator_func": must_be_even})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(3, {"x": 3})

        assert exc_info.value.message == "Value must be even: {not a placeholder}"

    def test_error_message_overrides_exception_text(self):
        def always_fails(value, record):
            raise TypeError("boom")

        validator = CustomValidator("x", {"validator_func": always_fails, "error_message": "Bad x"})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(None, {})

        assert exc_info.value.message == "Bad x"

    def test_requires_callable(self):
        with pytest.raises(ValueError):
            CustomValidator("x", {})
        with pytest.raises(ValueError, match="callable"):
            CustomValidator("x", {"validator_func": "not callable"})
