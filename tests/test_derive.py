import pytest

from metaboss.derive import (
    derive_cmv2_pda,
    derive_cmv3_pda,
    derive_collection_authority_record,
    derive_edition_marker_pda,
    derive_edition_pda,
    derive_generic_pda,
    derive_metadata_pda,
    derive_token_account_pda,
    derive_use_authority_record,
    parse_seeds,
    pubkey_or_bytes,
)
from metaboss.pubkey import Pubkey

PK = Pubkey.from_string
MINT = PK("H9UJFx7HknQ9GUz7RBqqV9SRnht6XaVDh2cZS3Huogpf")
METADATA_PROGRAM = PK("metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s")


def test_derive_generic_pda():
    seeds = [b"metadata", bytes(METADATA_PROGRAM), bytes(MINT)]
    assert derive_generic_pda(seeds, METADATA_PROGRAM) == PK("99pKPWsqi7bZaXKMvmwkxWV4nJjb5BS5SgKSNhW26ZNq")


def test_generic_pda_from_seed_string():
    seeds = parse_seeds(
        "metadata,metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s,H9UJFx7HknQ9GUz7RBqqV9SRnht6XaVDh2cZS3Huogpf"
    )
    assert seeds[0] == b"metadata"
    assert seeds[2] == bytes(MINT)
    assert derive_generic_pda(seeds, METADATA_PROGRAM) == PK("99pKPWsqi7bZaXKMvmwkxWV4nJjb5BS5SgKSNhW26ZNq")


def test_pubkey_or_bytes():
    assert pubkey_or_bytes("candy_machine") == b"candy_machine"
    assert pubkey_or_bytes(str(MINT)) == bytes(MINT)


def test_derive_metadata_pda():
    assert derive_metadata_pda(MINT) == PK("99pKPWsqi7bZaXKMvmwkxWV4nJjb5BS5SgKSNhW26ZNq")


def test_derive_edition_pda():
    assert derive_edition_pda(MINT) == PK("2vNgLPdTtfZYMNBR14vL5WXp6jYAvumfHauEHNc1BQim")


def test_derive_cmv2_pda():
    machine = PK("3qt9aBBmTSMxyzFEcwzZnFeV4tCZzPkTYVqPP7Bw5zUh")
    assert derive_cmv2_pda(machine) == PK("8J9W44AfgWFMSwE4iYyZMNCWV9mKqovS5YHiVoKuuA2b")


def test_derive_cmv3_pda():
    machine = PK("2YkBXpx61ziscLL4aAdXYnjCsoHK5TF9rF9AgkhhLJAX")
    assert derive_cmv3_pda(machine) == PK("Ei45DbGouAM7NkN5Rk22ep415vbGrbVPEDG9tRfoHb5B")


def test_derive_token_account_pda():
    owner = PK("8LSSjDHrfzcf3GnyE41F6SxMifpRCBA7NKSnfAEYzU7q")
    keg_mint = PK("2D49Wa5zMu16p73KBoSyJ596Uf1ShboTGNF51abKU2VE")
    t22_mint = PK("CCFjUhgpDy2am8mqVM9ib8rszyU1bgpyDnLAJ7KjLAVy")
    keg_program = PK("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
    t22_program = PK("TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb")

    assert derive_token_account_pda(keg_mint, owner, keg_program) == PK(
        "z2pwPKE1vKSUq9gEjejj2Y9FFq3Unh2eF94LYFQPMES"
    )
    assert derive_token_account_pda(t22_mint, owner, t22_program) == PK(
        "87dZdrtQwbbBTSYbVN6DfQUhugx7YZmrha3ZNKhKarKa"
    )


def test_edition_marker_groups_by_248():
    first = derive_edition_marker_pda(MINT, 0)
    assert derive_edition_marker_pda(MINT, 247) == first
    assert derive_edition_marker_pda(MINT, 248) != first
    assert derive_edition_marker_pda(MINT, 248) == derive_edition_marker_pda(MINT, 495)
    assert first.is_on_curve() is False


def test_edition_marker_rejects_negative():
    with pytest.raises(ValueError):
        derive_edition_marker_pda(MINT, -1)


def test_authority_records_are_distinct_and_deterministic():
    authority = PK("8LSSjDHrfzcf3GnyE41F6SxMifpRCBA7NKSnfAEYzU7q")
    coll, coll_bump = derive_collection_authority_record(MINT, authority)
    use, use_bump = derive_use_authority_record(MINT, authority)
    assert derive_collection_authority_record(MINT, authority) == (coll, coll_bump)
    assert coll != use
    assert 0 <= coll_bump <= 255 and 0 <= use_bump <= 255
    assert coll.is_on_curve() is False and use.is_on_curve() is False