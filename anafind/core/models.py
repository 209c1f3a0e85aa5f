from pydantic import BaseModel, Field
from anafind.core.pattern import Pattern

class QueryOptions(BaseModel):
    length: int | None = Field(default=None, ge=1)  # Exact output length
    min_length: int = Field(default=3, ge=0)        # Shortest word reported
    pattern: str | None = None                      # Positional template, '.' is a wildcard

    @property
    def matcher(self) -> Pattern | None:
        if self.pattern is None:
            return None
        return Pattern(self.pattern)

    def accepts_length(self, n: int) -> bool:
        if n < self.min_length:
            return False
        return self.length is None or self.length == n
