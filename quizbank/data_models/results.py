from collections import Counter
from typing import Any, Sequence

import pydantic

from .findings import AnyFinding, Finding, Severity
from .hashable import HashableBaseModel
from .question import Question


class RecordResult(HashableBaseModel):
    position: int | None = None
    # None when the record has no usable id
    record_id: str | None = None
    findings: tuple[AnyFinding, ...] = ()

    @pydantic.computed_field
    @property
    def valid(self) -> bool:
        return not any(finding.is_error for finding in self.findings)

    @property
    def label(self) -> str:
        if self.record_id is not None:
            return self.record_id
        return f"#{self.position}" if self.position is not None else "#?"

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.error]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.warning]

    def with_findings(self, *findings: Finding) -> "RecordResult":
        return self.model_copy(update={"findings": self.findings + tuple(findings)})


class DuplicateGroup(HashableBaseModel):
    id: str
    positions: tuple[int, ...]


class CorpusResult(HashableBaseModel):
    records: tuple[RecordResult, ...] = ()
    duplicates: tuple[DuplicateGroup, ...] = ()

    @pydantic.computed_field
    @property
    def valid(self) -> bool:
        return all(record.valid for record in self.records) and len(self.duplicates) == 0

    def findings(self) -> list[tuple[RecordResult, Finding]]:
        return [(record, finding) for record in self.records for finding in record.findings]

    def errors(self) -> list[tuple[RecordResult, Finding]]:
        return [(record, finding) for record, finding in self.findings() if finding.is_error]

    def warnings(self) -> list[tuple[RecordResult, Finding]]:
        return [(record, finding) for record, finding in self.findings() if not finding.is_error]

    def count_by_kind(self) -> Counter:
        return Counter(finding.kind for _, finding in self.findings())

    def findings_by_kind(self) -> dict[str, list[tuple[RecordResult, Finding]]]:
        grouped: dict[str, list[tuple[RecordResult, Finding]]] = {}
        for record, finding in self.findings():
            grouped.setdefault(finding.kind, []).append((record, finding))
        return grouped

    def invalid_results(self) -> list[RecordResult]:
        return [record for record in self.records if not record.valid]

    def valid_records(self, records: Sequence[Any]) -> list[Any]:
        """
        Returns the raw records that passed validation.
        `records` must be the same sequence this result was computed from.
        """
        if len(records) != len(self.records):
            raise ValueError(f"Expected {len(self.records)} records, got {len(records)}")
        return [records[result.position] for result in self.records if result.valid]

    def valid_questions(self, records: Sequence[Any]) -> list[Question]:
        return [Question.model_validate(record) for record in self.valid_records(records)]
