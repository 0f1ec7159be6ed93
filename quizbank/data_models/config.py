import pydantic

from quizbank.schema import KNOWN_DIFFICULTIES, MIN_OPTIONS

from .hashable import HashableBaseModel


class ValidationConfig(HashableBaseModel):
    known_difficulties: tuple[str, ...] = KNOWN_DIFFICULTIES
    min_options: int = MIN_OPTIONS
    # None accepts any option count >= min_options
    expected_num_options: int | None = None
    warn_missing_explanation: bool = False
    num_workers: int = 1

    model_config = pydantic.ConfigDict(extra="forbid")

    @pydantic.field_validator("min_options")
    def check_min_options(cls, v: int):
        if v < MIN_OPTIONS:
            raise ValueError(f"min_options must be at least {MIN_OPTIONS}, got {v}")
        return v

    @pydantic.field_validator("expected_num_options")
    def check_expected_num_options(cls, v: int | None):
        if v is not None and v < MIN_OPTIONS:
            raise ValueError(f"expected_num_options must be at least {MIN_OPTIONS}, got {v}")
        return v

    @pydantic.field_validator("num_workers")
    def check_num_workers(cls, v: int):
        if v < 1:
            raise ValueError(f"num_workers must be positive, got {v}")
        return v
