"""Canonical shape of one trivia question record.

This module is pure metadata: it names the fields a record must carry and the
advisory vocabularies, and leaves all failure reporting to the validator.
"""

from typing import Any, Iterable

REQUIRED_FIELDS = ("id", "prompt", "options", "answer", "category", "difficulty")
OPTIONAL_FIELDS = ("explanation",)

KNOWN_DIFFICULTIES = ("easy", "medium", "hard")
MIN_OPTIONS = 2

# The corpus stores the prompt text under `question`
SOURCE_KEYS = {
    "prompt": ("question", "prompt"),
}


def describe_required_fields() -> list[str]:
    """Returns the mandatory field names, in the order they are checked."""
    return list(REQUIRED_FIELDS)


def source_keys(field: str) -> tuple[str, ...]:
    """Returns the record keys a canonical field may be read from, most preferred first."""
    return SOURCE_KEYS.get(field, (field,))


def is_known_difficulty(value: Any, known: Iterable[str] = KNOWN_DIFFICULTIES) -> bool:
    return isinstance(value, str) and value in tuple(known)
