"""Collection item data shapes and membership checks."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

PARALLEL_LIMIT = 10
NO_COLLECTION = "none"


def _require(data: Mapping[str, Any], name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field {name!r}") from None


def _uint(data: Mapping[str, Any], name: str, bits: int) -> int:
    value = _require(data, name)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 2**bits:
        raise ValueError(f"invalid value for {name!r}: {value!r}")
    return value


def _bool(data: Mapping[str, Any], name: str) -> bool:
    value = _require(data, name)
    if not isinstance(value, bool):
        raise ValueError(f"invalid value for {name!r}: {value!r}")
    return value


def _str(data: Mapping[str, Any], name: str) -> str:
    value = _require(data, name)
    if not isinstance(value, str):
        raise ValueError(f"invalid value for {name!r}: {value!r}")
    return value


def _variant(enum_cls: type[enum.Enum], value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"unknown variant {value!r} for {enum_cls.__name__}") from None


class TokenStandard(enum.Enum):
    NON_FUNGIBLE = "NonFungible"
    FUNGIBLE = "Fungible"
    FUNGIBLE_ASSET = "FungibleAsset"
    NON_FUNGIBLE_EDITION = "NonFungibleEdition"
    PROGRAMMABLE_NON_FUNGIBLE = "ProgrammableNonFungible"


class UseMethod(enum.Enum):
    BURN = "Burn"
    MULTIPLE = "Multiple"
    SINGLE = "Single"


@dataclass
class Creator:
    address: str
    share: int
    verified: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Creator":
        return cls(
            address=_str(data, "address"),
            share=_uint(data, "share", 8),
            verified=_bool(data, "verified"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"address": self.address, "share": self.share, "verified": self.verified}


@dataclass
class Uses:
    use_method: UseMethod
    remaining: int
    total: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Uses":
        return cls(
            use_method=_variant(UseMethod, _require(data, "use_method")),
            remaining=_uint(data, "remaining", 64),
            total=_uint(data, "total", 64),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "use_method": self.use_method.value,
            "remaining": self.remaining,
            "total": self.total,
        }


@dataclass
class Collection:
    key: str
    verified: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Collection":
        return cls(key=_str(data, "key"), verified=_bool(data, "verified"))

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "verified": self.verified}


@dataclass
class CollectionMetadata:
    """Metadata of one collection item as returned by an indexer."""

    update_authority: str
    mint: str
    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int
    creators: Optional[list[Creator]]
    is_mutable: bool
    primary_sale_happened: bool
    token_standard: Optional[TokenStandard]
    uses: Optional[Uses]
    collection: Optional[Collection]
    pubkey: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CollectionMetadata":
        creators = _require(data, "creators")
        token_standard = _require(data, "token_standard")
        uses = _require(data, "uses")
        collection = _require(data, "collection")
        return cls(
            update_authority=_str(data, "update_authority"),
            mint=_str(data, "mint"),
            name=_str(data, "name"),
            symbol=_str(data, "symbol"),
            uri=_str(data, "uri"),
            seller_fee_basis_points=_uint(data, "seller_fee_basis_points", 16),
            creators=None if creators is None else [Creator.from_dict(c) for c in creators],
            is_mutable=_bool(data, "is_mutable"),
            primary_sale_happened=_bool(data, "primary_sale_happened"),
            token_standard=(
                None if token_standard is None else _variant(TokenStandard, token_standard)
            ),
            uses=None if uses is None else Uses.from_dict(uses),
            collection=None if collection is None else Collection.from_dict(collection),
            pubkey=_str(data, "pubkey"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "update_authority": self.update_authority,
            "mint": self.mint,
            "name": self.name,
            "symbol": self.symbol,
            "uri": self.uri,
            "seller_fee_basis_points": self.seller_fee_basis_points,
            "creators": (
                None if self.creators is None else [c.to_dict() for c in self.creators]
            ),
            "is_mutable": self.is_mutable,
            "primary_sale_happened": self.primary_sale_happened,
            "token_standard": None if self.token_standard is None else self.token_standard.value,
            "uses": None if self.uses is None else self.uses.to_dict(),
            "collection": None if self.collection is None else self.collection.to_dict(),
            "pubkey": self.pubkey,
        }


@dataclass
class JRPCRequest:
    """A JSON-RPC 2.0 request body."""

    method: str
    params: list[str] = field(default_factory=list)
    jsonrpc: str = "2.0"
    id: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "jsonrpc": self.jsonrpc,
            "params": list(self.params),
            "id": self.id,
        }


class GetCollectionItemsMethods(enum.Enum):
    THE_INDEX_IO = "the_index_io"

    @classmethod
    def parse(cls, value: str) -> "GetCollectionItemsMethods":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid method: {value}") from None

    def __str__(self) -> str:
        return self.value


class CollectionCheckError(Exception):
    """A mint list does not match the items of a collection."""

    def __init__(self, message: str, collection_mint: str, collections: Mapping[str, list[str]]):
        super().__init__(message)
        self.collection_mint = collection_mint
        self.collections = {key: list(mints) for key, mints in collections.items()}

    @property
    def debug_file_name(self) -> str:
        return f"{self.collection_mint}-debug-collections.json"

    def write_debug(self, directory: Union[str, Path] = ".") -> Path:
        """Write the mint grouping to a debug file and return its path."""
        path = Path(directory) / self.debug_file_name
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(self.collections, handle, indent=2)
        return path


def collect_collection_mints(response: Mapping[str, Any]) -> list[str]:
    """Sorted mints of the items in an indexer's collection response."""
    result = _require(response, "result")
    return sorted(
        CollectionMetadata.from_dict(_require(item, "metadata")).mint for item in result
    )


def group_mints_by_collection(
    results: Iterable[tuple[str, Union[Collection, str, None]]],
) -> dict[str, list[str]]:
    """Group mints under their collection key, or under "none" if they have none."""
    groups: dict[str, list[str]] = {}
    for mint, collection in results:
        if collection is None:
            key = NO_COLLECTION
        elif isinstance(collection, Collection):
            key = collection.key
        else:
            key = collection
        groups.setdefault(key, []).append(mint)
    return groups


def check_collection_items(
    collection_mint: str, collections: Mapping[str, list[str]], mint_list_length: int
) -> list[str]:
    """Check that every listed mint belongs to the given collection and no other."""
    mint_items = collections.get(collection_mint)
    if mint_items is None:
        raise CollectionCheckError(
            "No mints found for this parent. Run with --debug to see more details.",
            collection_mint,
            collections,
        )
    if len(collections) > 1:
        raise CollectionCheckError(
            "Not all mints from the list belong to this parent. "
            "Run with --debug to see more details.",
            collection_mint,
            collections,
        )
    if len(mint_items) != mint_list_length:
        raise CollectionCheckError(
            "Missed some mints from the list. Run with --debug to see more details.",
            collection_mint,
            collections,
        )
    return list(mint_items)