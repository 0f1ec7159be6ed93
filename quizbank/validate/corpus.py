import concurrent.futures
import logging
import math
from collections import defaultdict
from typing import Any, Iterable, Mapping

from quizbank.data_models import CorpusResult, DuplicateGroup, DuplicateId, RecordResult, ValidationConfig

from .record import DEFAULT_CONFIG, validate_one

LOGGER = logging.getLogger(__name__)


def materialize_records(records: Iterable[Any]) -> list[Any]:
    # a single record or a string is iterable but is never a corpus
    if isinstance(records, (str, bytes, Mapping)):
        raise TypeError(f"records must be a sequence of records, got {type(records).__name__}")
    try:
        return list(records)
    except TypeError as e:
        raise TypeError(f"records must be iterable, got {type(records).__name__}") from e


def _validate_partition(partition: list[tuple[int, Any]], config: ValidationConfig) -> list[RecordResult]:
    return [validate_one(record, position=position, config=config) for position, record in partition]


def validate_records(records: list[Any], config: ValidationConfig) -> list[RecordResult]:
    """
    Runs the per-record checks, optionally spread over a process pool. Results keep input order.
    The checks are CPU-bound, so partitions go to worker processes and records must be picklable
    when num_workers > 1.
    """
    indexed = list(enumerate(records))
    if config.num_workers <= 1 or len(indexed) < 2:
        return _validate_partition(indexed, config)

    num_partitions = min(config.num_workers, len(indexed))
    size = math.ceil(len(indexed) / num_partitions)
    partitions = [indexed[i : i + size] for i in range(0, len(indexed), size)]
    with concurrent.futures.ProcessPoolExecutor(max_workers=num_partitions) as executor:
        futures = [executor.submit(_validate_partition, partition, config) for partition in partitions]
        results = [result for future in futures for result in future.result()]
    return results


def find_duplicate_ids(results: Iterable[RecordResult]) -> list[DuplicateGroup]:
    positions = defaultdict(list)
    for result in results:
        if result.record_id is not None:
            positions[result.record_id].append(result.position)
    return [
        DuplicateGroup(id=record_id, positions=tuple(group))
        for record_id, group in positions.items()
        if len(group) > 1
    ]


def validate_corpus(records: Iterable[Any], config: ValidationConfig | None = None) -> CorpusResult:
    """
    Validates every record and the id uniqueness invariant across the corpus.
    Every record sharing an id gets its own DuplicateId finding.
    An empty corpus is valid.
    """
    if config is None:
        config = DEFAULT_CONFIG
    records = materialize_records(records)

    results = validate_records(records, config)
    duplicates = find_duplicate_ids(results)

    group_at = {position: group for group in duplicates for position in group.positions}
    results = [
        result.with_findings(DuplicateId(id=group_at[result.position].id, positions=group_at[result.position].positions))
        if result.position in group_at
        else result
        for result in results
    ]

    corpus_result = CorpusResult(records=tuple(results), duplicates=tuple(duplicates))
    LOGGER.debug(
        f"Validated {len(records)} records: {len(corpus_result.invalid_results())} invalid, "
        f"{len(duplicates)} duplicate id groups"
    )
    return corpus_result
