"""Checks a single question record against the schema.

Every check runs independently and reports its own findings, so one call
surfaces every defect in the record instead of stopping at the first.
"""

from collections import Counter
from typing import Any, Mapping

from quizbank import schema
from quizbank.data_models import (
    AnswerNotInOptions,
    Finding,
    MalformedOptions,
    MalformedRecord,
    MissingExplanation,
    MissingField,
    RecordResult,
    UnknownDifficulty,
    ValidationConfig,
    WrongType,
)

DEFAULT_CONFIG = ValidationConfig()


def _type_name(value: Any) -> str:
    return type(value).__name__


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def lookup_field(record: Mapping[str, Any], field: str) -> Any:
    for key in schema.source_keys(field):
        if key in record:
            return record[key]
    return None


def check_required_fields(record: Mapping[str, Any]) -> tuple[dict[str, Any], list[Finding]]:
    """
    Returns (usable field values, findings).
    Only fields that are present and of the right type make it into the values, so
    the later checks can skip anything already reported here.
    """
    values: dict[str, Any] = {}
    findings: list[Finding] = []
    for field in schema.describe_required_fields():
        value = lookup_field(record, field)
        if is_blank(value):
            findings.append(MissingField(field=field))
        elif field == "options":
            if isinstance(value, (list, tuple)):
                values[field] = list(value)
            else:
                findings.append(MalformedOptions(reason=f"options must be a list of strings, got {_type_name(value)}"))
        elif not isinstance(value, str):
            findings.append(WrongType(field=field, expected="a string", actual=_type_name(value)))
        else:
            values[field] = value
    return values, findings


def check_options(options: list[Any], config: ValidationConfig) -> list[Finding]:
    findings: list[Finding] = []

    if len(options) < config.min_options:
        findings.append(
            MalformedOptions(reason=f"expected at least {config.min_options} options, got {len(options)}")
        )
    elif config.expected_num_options is not None and len(options) != config.expected_num_options:
        findings.append(
            MalformedOptions(reason=f"expected exactly {config.expected_num_options} options, got {len(options)}")
        )

    bad_positions = [i for i, option in enumerate(options) if not isinstance(option, str) or is_blank(option)]
    if bad_positions:
        findings.append(MalformedOptions(reason=f"options at positions {bad_positions} must be non-empty strings"))

    counts = Counter(option for option in options if isinstance(option, str))
    duplicated = [option for option, count in counts.items() if count > 1]
    if duplicated:
        findings.append(MalformedOptions(reason=f"duplicate options: {duplicated}"))

    return findings


def check_answer(answer: str, options: list[Any]) -> list[Finding]:
    # exact match only, no case folding or stripping
    if any(isinstance(option, str) and option == answer for option in options):
        return []
    return [AnswerNotInOptions(answer=answer)]


def check_difficulty(difficulty: str, config: ValidationConfig) -> list[Finding]:
    if schema.is_known_difficulty(difficulty, config.known_difficulties):
        return []
    return [UnknownDifficulty(value=difficulty)]


def check_optional_fields(record: Mapping[str, Any], config: ValidationConfig) -> list[Finding]:
    """Optional fields may be absent, but when present they must be strings."""
    findings: list[Finding] = []
    for field in schema.OPTIONAL_FIELDS:
        value = record.get(field)
        if value is not None and not isinstance(value, str):
            findings.append(WrongType(field=field, expected="a string", actual=_type_name(value)))
        elif field == "explanation" and config.warn_missing_explanation and is_blank(value):
            findings.append(MissingExplanation())
    return findings


def validate_one(record: Any, position: int | None = None, config: ValidationConfig | None = None) -> RecordResult:
    """Validates one candidate record. Never raises for malformed content."""
    if config is None:
        config = DEFAULT_CONFIG

    if not isinstance(record, Mapping):
        return RecordResult(position=position, findings=(MalformedRecord(actual=_type_name(record)),))

    values, findings = check_required_fields(record)
    if "options" in values:
        findings += check_options(values["options"], config)
        if "answer" in values:
            findings += check_answer(values["answer"], values["options"])
    if "difficulty" in values:
        findings += check_difficulty(values["difficulty"], config)
    findings += check_optional_fields(record, config)

    return RecordResult(position=position, record_id=values.get("id"), findings=tuple(findings))
