"""Small shared data types."""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass
from typing import Any


class Indexer(enum.Enum):
    """Third-party indexing services."""

    HELIUS = "helius"
    THE_INDEX_IO = "the_index_io"

    @classmethod
    def parse(cls, value: str) -> "Indexer":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid method: {value}") from None

    def __str__(self) -> str:
        return self.value


@dataclass
class FoundError:
    """An error message looked up for a program domain."""

    domain: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FoundError":
        try:
            return cls(domain=str(data["domain"]), message=str(data["message"]))
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None