from collections import Counter
from types import MappingProxyType
from typing import Mapping
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

def canonical_key(counts: Mapping[str, int]) -> str:
    return "".join(f"{ch}{counts[ch]}" for ch in sorted(counts))

class Signature(BaseModel):
    """
    Order-independent fingerprint of the letters in a word.

    The canonical key concatenates each distinct character (sorted by code
    point) with its count, e.g. "astonishment" -> "a1e1h1i1m1n2o1s2t2".
    Equality and hashing only look at the key.
    """
    model_config = ConfigDict(frozen=True)

    key: str                     # Canonical "<char><count>..." string
    counts: Mapping[str, int]    # char -> occurrences, always >= 1, read-only

    @field_validator("counts")
    @classmethod
    def _freeze_counts(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        for ch, count in value.items():
            if count < 1:
                raise ValueError(f"count for {ch!r} must be at least 1, got {count}")
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _check_key(self) -> "Signature":
        expected = canonical_key(self.counts)
        if self.key != expected:
            raise ValueError(f"key {self.key!r} does not match counts (expected {expected!r})")
        return self

    @classmethod
    def for_word(cls, word: str) -> "Signature":
        counts = Counter(word.lower())
        return cls(key=canonical_key(counts), counts=counts)

    @property
    def size(self) -> int:
        return sum(self.counts.values())

    def contains(self, other: "Signature") -> bool:
        """
        True if `other` can be spelled with a subset of this signature's letters.
        """
        if len(other.counts) > len(self.counts):
            return False
        for ch, count in other.counts.items():
            if self.counts.get(ch, 0) < count:
                return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"Sig:{self.key}"
