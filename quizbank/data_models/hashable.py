import hashlib

import pydantic


def deterministic_hash(something: str) -> str:
    return hashlib.sha1(something.encode("utf-8")).hexdigest()


class HashableBaseModel(pydantic.BaseModel):
    """Frozen model that can be fingerprinted from its canonical JSON dump."""

    def fingerprint(self) -> str:
        return deterministic_hash(self.model_dump_json())

    model_config = pydantic.ConfigDict(frozen=True)
