"""Derivation of token, metadata and candy machine addresses."""

from __future__ import annotations

from typing import Sequence

from metaboss.pubkey import Pubkey, Seed, find_program_address
from metaboss.settings import (
    MASTER_EDITION_PREFIX,
    METADATA_PREFIX,
    METAPLEX_PROGRAM_ID,
    USER_PREFIX,
)

TOKEN_METADATA_PROGRAM_ID = Pubkey.from_string(METAPLEX_PROGRAM_ID)
TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
TOKEN_2022_PROGRAM_ID = Pubkey.from_string("TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb")
ASSOCIATED_TOKEN_PROGRAM_ID = Pubkey.from_string("ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL")
CANDY_MACHINE_V2_PROGRAM_ID = Pubkey.from_string("cndy3Z4yapfJBmL3ShUp5exZKqR3z33thTzeNMm2gRZ")
CANDY_MACHINE_V3_PROGRAM_ID = Pubkey.from_string("CndyV3LdqHUfDLmE5naZjVN8rBZz4tqhdefbAnjHG3JR")

EDITION_MARKER_BIT_SIZE = 248

_METADATA = METADATA_PREFIX.encode()
_EDITION = MASTER_EDITION_PREFIX.encode()


def pubkey_or_bytes(seed: str) -> bytes:
    """Use the key bytes if the seed is a valid pubkey, else its UTF-8 bytes."""
    try:
        return bytes(Pubkey.from_string(seed))
    except ValueError:
        return seed.encode()


def parse_seeds(str_seeds: str) -> list[bytes]:
    """Split a comma-separated seed list into seed bytes."""
    return [pubkey_or_bytes(part) for part in str_seeds.split(",")]


def derive_generic_pda(seeds: Sequence[Seed], program_id: Pubkey) -> Pubkey:
    return find_program_address(seeds, program_id)[0]


def derive_token_account_pda(mint: Pubkey, owner: Pubkey, program_id: Pubkey) -> Pubkey:
    """Associated token account of an owner for a mint under a token program."""
    return find_program_address([owner, program_id, mint], ASSOCIATED_TOKEN_PROGRAM_ID)[0]


def derive_metadata_pda(mint: Pubkey) -> Pubkey:
    program = TOKEN_METADATA_PROGRAM_ID
    return find_program_address([_METADATA, program, mint], program)[0]


def derive_edition_pda(mint: Pubkey) -> Pubkey:
    program = TOKEN_METADATA_PROGRAM_ID
    return find_program_address([_METADATA, program, mint, _EDITION], program)[0]


def derive_edition_marker_pda(mint: Pubkey, edition_num: int) -> Pubkey:
    if edition_num < 0:
        raise ValueError("edition number must not be negative")
    program = TOKEN_METADATA_PROGRAM_ID
    marker = str(edition_num // EDITION_MARKER_BIT_SIZE).encode()
    return find_program_address([_METADATA, program, mint, _EDITION, marker], program)[0]


def derive_cmv2_pda(candy_machine: Pubkey) -> Pubkey:
    return find_program_address([b"candy_machine", candy_machine], CANDY_MACHINE_V2_PROGRAM_ID)[0]


def derive_cmv3_pda(candy_machine: Pubkey) -> Pubkey:
    return find_program_address([b"candy_machine", candy_machine], CANDY_MACHINE_V3_PROGRAM_ID)[0]


def derive_collection_authority_record(
    mint: Pubkey, collection_authority: Pubkey
) -> tuple[Pubkey, int]:
    program = TOKEN_METADATA_PROGRAM_ID
    seeds = [_METADATA, program, mint, b"collection_authority", collection_authority]
    return find_program_address(seeds, program)


def derive_use_authority_record(mint: Pubkey, use_authority: Pubkey) -> tuple[Pubkey, int]:
    program = TOKEN_METADATA_PROGRAM_ID
    seeds = [_METADATA, program, mint, USER_PREFIX.encode(), use_authority]
    return find_program_address(seeds, program)