from pathlib import Path

import fire

from quizbank import schema
from quizbank.data_models import ValidationConfig
from quizbank.load.corpus import load_corpus
from quizbank.report import corpus_stats, print_report, save_report
from quizbank.utils import save_jsonl, setup_logging
from quizbank.validate.corpus import validate_corpus


def validate(
    corpus_path: str,
    output_path: str | None = None,
    num_workers: int = 1,
    expected_num_options: int | None = None,
    warn_missing_explanation: bool = False,
    logging_level: str = "warning",
) -> None:
    setup_logging(logging_level)
    config = ValidationConfig(
        num_workers=num_workers,
        expected_num_options=expected_num_options,
        warn_missing_explanation=warn_missing_explanation,
    )
    result = validate_corpus(load_corpus(corpus_path), config)
    print_report(result)
    if output_path is not None:
        save_report(Path(output_path), result)
    if not result.valid:
        raise SystemExit(1)


def show_stats(corpus_path: str, logging_level: str = "warning") -> None:
    setup_logging(logging_level)
    stats = corpus_stats(load_corpus(corpus_path))
    print(stats.to_markdown())


def export_valid(corpus_path: str, output_path: str, logging_level: str = "info") -> None:
    """Writes only the records that pass validation, as JSONL."""
    setup_logging(logging_level)
    records = load_corpus(corpus_path)
    result = validate_corpus(records)
    valid = result.valid_records(records)
    save_jsonl(Path(output_path), valid)
    print(f"Wrote {len(valid)}/{len(records)} valid records to {output_path}")


def required_fields() -> None:
    print(", ".join(schema.describe_required_fields()))


if __name__ == "__main__":
    fire.Fire()
