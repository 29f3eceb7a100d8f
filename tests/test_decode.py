import pytest

from metaboss.decode import (
    JSONCollection,
    JSONCollectionDetails,
    JSONCreator,
    JSONUses,
    get_metadata_pda,
    is_only_one_option,
    resolve_edition_number,
    strip_null_padding,
)
from metaboss.derive import derive_metadata_pda
from metaboss.pubkey import Pubkey

MINT = "H9UJFx7HknQ9GUz7RBqqV9SRnht6XaVDh2cZS3Huogpf"


def test_metadata_pda_known_value():
    mint = Pubkey.from_string(MINT)
    assert str(get_metadata_pda(mint)) == "99pKPWsqi7bZaXKMvmwkxWV4nJjb5BS5SgKSNhW26ZNq"


def test_metadata_pda_matches_derive():
    mint = Pubkey.from_string(MINT)
    assert get_metadata_pda(mint) == derive_metadata_pda(mint)


def test_edition_number_taken_directly():
    assert resolve_edition_number(7, None) == 7


def test_edition_number_preferred_over_marker():
    assert resolve_edition_number(7, 3) == 7


def test_marker_number_scaled():
    assert resolve_edition_number(None, 1) == 248
    assert resolve_edition_number(None, 0) == 0


def test_edition_or_marker_required():
    with pytest.raises(ValueError, match="Edition or marker number is required"):
        resolve_edition_number(None, None)


def test_strip_null_padding():
    assert strip_null_padding("Name\0\0\0") == "Name"
    assert strip_null_padding("plain") == "plain"


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("a", None, True),
        (None, "b", True),
        (None, None, True),
        ("a", "b", False),
    ],
)
def test_is_only_one_option(first, second, expected):
    assert is_only_one_option(first, second) is expected


def test_json_shapes():
    assert JSONCreator("addr", True, 100).to_dict() == {
        "address": "addr",
        "verified": True,
        "share": 100,
    }
    assert JSONCollection(False, "key").to_dict() == {"verified": False, "key": "key"}
    assert JSONCollectionDetails(size=5).to_dict() == {"V1": {"size": 5}}
    assert JSONUses("Burn", 1, 2).to_dict() == {"use_method": "Burn", "remaining": 1, "total": 2}