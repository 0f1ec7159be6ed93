from .config import ValidationConfig
from .findings import (
    AnswerNotInOptions,
    AnyFinding,
    DuplicateId,
    Finding,
    MalformedOptions,
    MalformedRecord,
    MissingExplanation,
    MissingField,
    Severity,
    UnknownDifficulty,
    WrongType,
)
from .question import Question
from .results import CorpusResult, DuplicateGroup, RecordResult

__all__ = [
    "ValidationConfig",
    "AnswerNotInOptions",
    "AnyFinding",
    "DuplicateId",
    "Finding",
    "MalformedOptions",
    "MalformedRecord",
    "MissingExplanation",
    "MissingField",
    "Severity",
    "UnknownDifficulty",
    "WrongType",
    "Question",
    "CorpusResult",
    "DuplicateGroup",
    "RecordResult",
]
