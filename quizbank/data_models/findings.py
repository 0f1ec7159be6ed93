"""Tagged finding values produced by validation.

Findings are returned as data, never raised, so a single broken record can't
abort a batch. Each finding carries a `kind` tag that pydantic uses to pick
the right class back out of serialized reports.
"""

from enum import Enum
from typing import Annotated, Literal, Union

import pydantic

from .hashable import HashableBaseModel


class Severity(str, Enum):
    error = "error"
    # warnings are surfaced but never make a record invalid
    warning = "warning"

    def __str__(self):
        return self.value


class Finding(HashableBaseModel):
    kind: str
    severity: Severity = Severity.error

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.error

    @property
    def message(self) -> str:
        return self.kind

    def __str__(self) -> str:
        return f"[{self.severity}] {self.kind}: {self.message}"


class MissingField(Finding):
    kind: Literal["MissingField"] = "MissingField"
    field: str

    @property
    def message(self) -> str:
        return f"required field '{self.field}' is missing or empty"


class WrongType(Finding):
    kind: Literal["WrongType"] = "WrongType"
    field: str
    expected: str
    actual: str

    @property
    def message(self) -> str:
        return f"field '{self.field}' must be {self.expected}, got {self.actual}"


class MalformedRecord(Finding):
    kind: Literal["MalformedRecord"] = "MalformedRecord"
    actual: str

    @property
    def message(self) -> str:
        return f"record must be a mapping of field names to values, got {self.actual}"


class MalformedOptions(Finding):
    kind: Literal["MalformedOptions"] = "MalformedOptions"
    reason: str

    @property
    def message(self) -> str:
        return self.reason


class AnswerNotInOptions(Finding):
    kind: Literal["AnswerNotInOptions"] = "AnswerNotInOptions"
    answer: str

    @property
    def message(self) -> str:
        return f"answer {self.answer!r} does not exactly match any option"


class UnknownDifficulty(Finding):
    kind: Literal["UnknownDifficulty"] = "UnknownDifficulty"
    severity: Severity = Severity.warning
    value: str

    @property
    def message(self) -> str:
        return f"difficulty {self.value!r} is not a known difficulty"


class MissingExplanation(Finding):
    kind: Literal["MissingExplanation"] = "MissingExplanation"
    severity: Severity = Severity.warning

    @property
    def message(self) -> str:
        return "question has no explanation"


class DuplicateId(Finding):
    kind: Literal["DuplicateId"] = "DuplicateId"
    id: str
    positions: tuple[int, ...]

    @property
    def message(self) -> str:
        return f"id {self.id!r} is shared by records at positions {list(self.positions)}"


AnyFinding = Annotated[
    Union[
        MissingField,
        WrongType,
        MalformedRecord,
        MalformedOptions,
        AnswerNotInOptions,
        UnknownDifficulty,
        MissingExplanation,
        DuplicateId,
    ],
    pydantic.Field(discriminator="kind"),
]
