from typing import Self

import pydantic

from .hashable import HashableBaseModel


class Question(HashableBaseModel):
    id: str
    prompt: str = pydantic.Field(validation_alias=pydantic.AliasChoices("question", "prompt"))
    options: tuple[str, ...]
    answer: str
    category: str
    difficulty: str
    explanation: str | None = None

    model_config = pydantic.ConfigDict(extra="ignore")

    @pydantic.model_validator(mode="after")
    def check_answer_in_options(self) -> Self:
        if self.answer not in self.options:
            raise ValueError(f"Answer {self.answer!r} is not one of the options {list(self.options)}")
        return self

    @property
    def correct_index(self) -> int:
        return self.options.index(self.answer)

    def __str__(self) -> str:
        return f"{self.id} [{self.category}/{self.difficulty}]: {self.prompt}"
