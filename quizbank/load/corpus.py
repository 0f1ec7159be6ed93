"""Loads a question corpus from disk into plain record mappings.

Loading never validates: whatever the file holds is handed to the validator
as-is, so malformed records show up as findings rather than load errors.
"""

import logging
import re
from pathlib import Path

import pandas as pd

from quizbank.utils import load_json, load_jsonl, load_yaml

LOGGER = logging.getLogger(__name__)

OPTION_COLUMN = re.compile(r"^option_?(\d+)$")
OPTIONS_SEPARATOR = " | "


def unwrap_records(payload, source: Path | str = "<payload>") -> list:
    """Accepts either a bare list of records or an object holding them under `questions`."""
    if isinstance(payload, dict) and "questions" in payload:
        payload = payload["questions"]
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of questions in {source}, got {type(payload).__name__}")
    return payload


def _row_to_record(row: dict, option_columns: list[str]) -> dict:
    record = {k: v for k, v in row.items() if k not in option_columns}
    if option_columns:
        options = [row[c] if row[c] is not None else "" for c in option_columns]
        # rows with fewer options than the widest row leave trailing cells empty
        while options and options[-1] == "":
            options.pop()
        record["options"] = options
    elif isinstance(record.get("options"), str):
        record["options"] = record["options"].split(OPTIONS_SEPARATOR)
    return record


def load_csv_records(path: Path) -> list[dict]:
    df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
    df = df.astype(object).where(df.notna(), None)

    option_columns = sorted(
        (c for c in df.columns if OPTION_COLUMN.match(c)),
        key=lambda c: int(OPTION_COLUMN.match(c).group(1)),
    )
    return [_row_to_record(row, option_columns) for row in df.to_dict(orient="records")]


def load_corpus(path: Path | str) -> list:
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        records = unwrap_records(load_json(path), path)
    elif suffix == ".jsonl":
        records = load_jsonl(path)
    elif suffix in (".yaml", ".yml"):
        records = unwrap_records(load_yaml(path), path)
    elif suffix == ".csv":
        records = load_csv_records(path)
    else:
        raise ValueError(f"Unsupported corpus format {suffix!r} for {path}")

    LOGGER.info(f"Loaded {len(records)} records from {path}")
    return records
