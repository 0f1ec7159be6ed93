import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

import pandas as pd
from termcolor import cprint

from quizbank.data_models import CorpusResult, Severity
from quizbank.data_models.hashable import HashableBaseModel
from quizbank.utils import save_json

LOGGER = logging.getLogger(__name__)

PRINT_COLORS = {
    Severity.error: "red",
    Severity.warning: "yellow",
}
FINDING_COLUMNS = ["position", "id", "kind", "severity", "message"]
# labels the game never offers as a category
IGNORED_CATEGORIES = {"", "undefined"}


class ReportSummary(HashableBaseModel):
    valid: bool
    num_records: int
    num_valid: int
    num_invalid: int
    num_errors: int
    num_warnings: int
    num_duplicate_groups: int
    kinds: dict[str, int] = {}


def summarize(result: CorpusResult) -> ReportSummary:
    num_invalid = len(result.invalid_results())
    return ReportSummary(
        valid=result.valid,
        num_records=len(result.records),
        num_valid=len(result.records) - num_invalid,
        num_invalid=num_invalid,
        num_errors=len(result.errors()),
        num_warnings=len(result.warnings()),
        num_duplicate_groups=len(result.duplicates),
        kinds=dict(sorted(result.count_by_kind().items())),
    )


def log_report(result: CorpusResult, log_findings: bool = True) -> ReportSummary:
    summary = summarize(result)
    LOGGER.info(f"Corpus valid: {summary.valid}")
    LOGGER.info(f"Number of records: {summary.num_records}")
    LOGGER.info(f"Valid records: {summary.num_valid}")
    LOGGER.info(f"Invalid records: {summary.num_invalid}")
    LOGGER.info(f"Errors: {summary.num_errors}, warnings: {summary.num_warnings}")
    LOGGER.info(f"Duplicate id groups: {summary.num_duplicate_groups}")
    for kind, count in summary.kinds.items():
        LOGGER.info(f"  {kind}: {count}")

    if log_findings:
        for record, finding in result.findings():
            log_fn = LOGGER.error if finding.is_error else LOGGER.warning
            log_fn(f"{record.label} (position {record.position}): {finding}")
    return summary


def findings_frame(result: CorpusResult) -> pd.DataFrame:
    rows = [
        {
            "position": record.position,
            "id": record.record_id,
            "kind": finding.kind,
            "severity": str(finding.severity),
            "message": finding.message,
        }
        for record, finding in result.findings()
    ]
    return pd.DataFrame(rows, columns=FINDING_COLUMNS)


def print_report(result: CorpusResult, print_fn: Callable | None = None) -> None:
    if print_fn is None:
        print_fn = cprint

    for record in result.records:
        if not record.findings:
            continue
        print_fn(f"=={record.label} (position {record.position}):", "white")
        for finding in record.findings:
            print_fn(f"  {finding}", PRINT_COLORS[finding.severity])

    summary = summarize(result)
    status = "PASSED" if summary.valid else "FAILED"
    print_fn(
        f"Validation {status}: {summary.num_valid}/{summary.num_records} records valid, "
        f"{summary.num_errors} errors, {summary.num_warnings} warnings",
        "green" if summary.valid else "red",
        attrs=["bold"],
    )


def corpus_stats(records: Iterable[Any]) -> pd.DataFrame:
    """Question counts per category, broken down by difficulty."""
    rows = []
    for record in records:
        if not isinstance(record, Mapping):
            continue
        category = record.get("category")
        if not isinstance(category, str) or category.strip() in IGNORED_CATEGORIES:
            continue
        difficulty = record.get("difficulty")
        rows.append({"category": category, "difficulty": difficulty if isinstance(difficulty, str) else "unknown"})

    if not rows:
        return pd.DataFrame(columns=["total"])

    df = pd.DataFrame(rows)
    table = pd.crosstab(df["category"], df["difficulty"])
    table["total"] = table.sum(axis=1)
    table = table.reset_index().sort_values(["total", "category"], ascending=[False, True])
    return table.set_index("category")


def save_report(file_path: Path, result: CorpusResult) -> None:
    save_json(file_path, {"summary": summarize(result).model_dump(), **result.model_dump(mode="json")})
    LOGGER.info(f"Saved validation report to {file_path}")
