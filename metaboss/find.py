"""Detection of gaps in printed edition numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class EditionReport:
    """Printed edition numbers in order and those missing below the largest."""

    edition_numbers: tuple[int, ...]
    missing: tuple[int, ...]

    def __str__(self) -> str:
        return (
            f"Edition numbers: {list(self.edition_numbers)}\n"
            f"Missing numbers: {list(self.missing)}"
        )


def find_missing_editions(edition_numbers: Iterable[int]) -> EditionReport:
    """Find editions between 1 and the largest printed number that were never printed."""
    ordered = tuple(sorted(edition_numbers))
    present = set(ordered)
    largest = ordered[-1] if ordered else 0
    missing = tuple(n for n in range(1, largest + 1) if n not in present)
    return EditionReport(edition_numbers=ordered, missing=missing)