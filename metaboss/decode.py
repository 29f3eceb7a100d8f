"""Helpers and JSON shapes for decoding token metadata accounts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from metaboss.derive import EDITION_MARKER_BIT_SIZE
from metaboss.pubkey import Pubkey, find_program_address
from metaboss.settings import METADATA_PREFIX, METAPLEX_PROGRAM_ID


@dataclass
class JSONCreator:
    """A creator entry as written to decoded metadata files."""

    address: str
    verified: bool
    share: int

    def to_dict(self) -> dict[str, Any]:
        return {"address": self.address, "verified": self.verified, "share": self.share}


@dataclass
class JSONCollection:
    """A collection reference as written to decoded metadata files."""

    verified: bool
    key: str

    def to_dict(self) -> dict[str, Any]:
        return {"verified": self.verified, "key": self.key}


@dataclass
class JSONCollectionDetails:
    """Collection details; only the V1 layout exists."""

    size: int

    def to_dict(self) -> dict[str, Any]:
        return {"V1": {"size": self.size}}


@dataclass
class JSONUses:
    """Usage settings as written to decoded metadata files."""

    use_method: str
    remaining: int
    total: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "use_method": self.use_method,
            "remaining": self.remaining,
            "total": self.total,
        }


def get_metadata_pda(mint: Pubkey) -> Pubkey:
    """Address of the metadata account belonging to a mint."""
    program = Pubkey.from_string(METAPLEX_PROGRAM_ID)
    seeds = [METADATA_PREFIX.encode(), program, mint]
    return find_program_address(seeds, program)[0]


def resolve_edition_number(edition_num: Optional[int], marker_num: Optional[int]) -> int:
    """Edition number to look up, taken directly or from a marker number."""
    if edition_num is not None:
        return edition_num
    if marker_num is not None:
        return marker_num * EDITION_MARKER_BIT_SIZE
    raise ValueError("Edition or marker number is required")


def strip_null_padding(text: str) -> str:
    """Remove the NUL characters that pad fixed-width on-chain strings."""
    return text.replace("\0", "")


def is_only_one_option(first: Optional[object], second: Optional[object]) -> bool:
    """False only when both options are given."""
    return first is None or second is None