"""
Profile validator: the single choke point between untyped rows and typed records.

Applies every profile rule to a raw row, collects all failures (not
fail-fast) and, when the row is clean, produces a SanitizedProfileRecord.
"""

from datetime import date, datetime, timezone
from typing import Any, Callable, Mapping

from pydantic import ValidationError as ModelValidationError

from maid_ingest.config import IngestSettings
from maid_ingest.core.models import ValidationResult
from maid_ingest.core.validators import (
    BaseValidator,
    ChoiceValidator,
    CustomValidator,
    DateValidator,
    ListValidator,
    RangeValidator,
    RegexValidator,
    RequiredFieldValidator,
    ValidationError,
)

from .profile_rules import build_profile_rules
from .sanitizer import sanitize_profile

Clock = Callable[[], datetime]


def utc_clock() -> datetime:
    return datetime.now(timezone.utc)


class ProfileValidator:
    """
    Orchestrates validation rules on raw profile rows.

    Rules are applied in order and every failing message is kept, so one
    pass tells the agency everything wrong with a row.
    """

    VALIDATOR_REGISTRY = {
        "required_field": RequiredFieldValidator,
        "regex": RegexValidator,
        "range": RangeValidator,
        "choice": ChoiceValidator,
        "date": DateValidator,
        "list": ListValidator,
        "custom": CustomValidator,
    }

    def __init__(
        self,
        settings: IngestSettings | None = None,
        clock: Clock = utc_clock,
        rules: list[dict[str, Any]] | None = None,
    ):
        """
        Initialize the validator.

        Args:
            settings: Age bounds and defaults (defaults to IngestSettings())
            clock: Returns "now"; age and passport expiry are judged against its date
            rules: Override the built-in profile rule set (mainly for tests)
        """
        self.settings = settings or IngestSettings()
        self.clock = clock
        self.rules = rules if rules is not None else build_profile_rules(self.settings, today=self.today)
        self.validators: list[tuple[str, BaseValidator]] = []
        self._build_validators()

    def today(self) -> date:
        return self.clock().date()

    def _build_validators(self) -> None:
        """Build validator instances from rule configurations."""
        for rule in self.rules:
            if not rule.get("enabled", True):
                continue

            rule_name = rule["rule_name"]
            rule_type = rule["rule_type"]

            validator_class = self.VALIDATOR_REGISTRY.get(rule_type)
            if not validator_class:
                raise ValueError(f"Unknown rule type: {rule_type}")

            try:
                validator = validator_class(rule["field_name"], rule.get("parameters", {}))
            except ValueError as e:
                raise ValueError(f"Failed to create validator for rule '{rule_name}': {e}")
            self.validators.append((rule_name, validator))

    def validate(self, raw: Any) -> ValidationResult:
        """
        Validate and normalize one raw row.

        Args:
            raw: Caller-supplied row; anything other than a mapping fails

        Returns:
            ValidationResult carrying either the sanitized record or every error
        """
        if not isinstance(raw, Mapping):
            return ValidationResult(
                passed=False,
                errors=["Profile data must be an object"],
                failed_rules=["row_shape"],
            )

        record = dict(raw)
        errors: list[str] = []
        failed_rules: list[str] = []

        for rule_name, validator in self.validators:
            try:
                validator.validate(record.get(validator.field_name), record)
            except ValidationError as e:
                errors.append(e.message)
                failed_rules.append(rule_name)

        if errors:
            return ValidationResult(passed=False, errors=errors, failed_rules=failed_rules)

        try:
            sanitized = sanitize_profile(record, self.settings)
        except ModelValidationError as e:
            return ValidationResult(
                passed=False,
                errors=[err["msg"] for err in e.errors()],
                failed_rules=["sanitize"],
            )

        return ValidationResult(passed=True, sanitized=sanitized)

    def get_rule_summary(self) -> dict[str, Any]:
        """Count active validators by rule type."""
        counts: dict[str, int] = {}
        for _, validator in self.validators:
            counts[validator.rule_type] = counts.get(validator.rule_type, 0) + 1
        return {"total_rules": len(self.validators), "rules_by_type": counts}
