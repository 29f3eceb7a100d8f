"""Airdrop planning: priority fees, recipient lists and cache file names."""

from __future__ import annotations

import enum
import json
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Union

from metaboss.pubkey import Pubkey

# Test transactions take 3_150 compute units, padded a little.
AIRDROP_SOL_CU = 5_000

_U64_MAX = 2**64 - 1


class Priority(enum.Enum):
    """Transaction priority; higher priority costs more."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    MAX = "max"

    @classmethod
    def parse(cls, value: str) -> "Priority":
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid priority: {value}") from None

    def __str__(self) -> str:
        return self.value


_PRIORITY_FEES = {
    Priority.NONE: 200,
    Priority.LOW: 200_000,
    Priority.MEDIUM: 1_000_000,
    Priority.HIGH: 5_000_000,
    Priority.MAX: 20_000_000,
}


def priority_fee(priority: Priority) -> int:
    """Compute unit price (micro-lamports) used for a priority level."""
    return _PRIORITY_FEES[priority]


def _check_amount(address: str, amount: Any) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int) or not 0 <= amount <= _U64_MAX:
        raise ValueError(f"invalid amount for {address}: {amount!r}")
    return amount


@dataclass(frozen=True)
class Recipient:
    """One airdrop destination and the lamports it receives."""

    address: str
    amount: int

    def to_dict(self) -> dict[str, Any]:
        return {"address": self.address, "amount": self.amount}


@dataclass
class FailedTransaction:
    """A transaction that failed to land, kept for retrying."""

    transaction_accounts: list[str] = field(default_factory=list)
    recipients: dict[str, int] = field(default_factory=dict)
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "transaction_accounts": list(self.transaction_accounts),
            "recipients": dict(self.recipients),
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FailedTransaction":
        try:
            accounts = data["transaction_accounts"]
            recipients = data["recipients"]
            error = data["error"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        if not isinstance(accounts, list) or not all(isinstance(a, str) for a in accounts):
            raise ValueError("transaction_accounts must be a list of strings")
        if not isinstance(recipients, dict):
            raise ValueError("recipients must be an object")
        if not isinstance(error, str):
            raise ValueError("error must be a string")
        return cls(
            transaction_accounts=list(accounts),
            recipients={str(k): _check_amount(str(k), v) for k, v in recipients.items()},
            error=error,
        )


def load_recipient_list(path: Union[str, Path]) -> dict[str, int]:
    """Read a JSON object mapping addresses to lamport amounts."""
    with open(path, encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, dict):
        raise ValueError("recipient list must be a JSON object")
    return {address: _check_amount(address, amount) for address, amount in raw.items()}


def build_transfers(recipients: Mapping[str, int]) -> list[Recipient]:
    """Keep recipients with valid addresses, reporting and skipping the rest on stderr."""
    transfers = []
    for address, amount in recipients.items():
        try:
            Pubkey.from_string(address)
        except ValueError:
            print(f"Invalid address: {address}, skipping...", file=sys.stderr)
            continue
        transfers.append(Recipient(address=address, amount=_check_amount(address, amount)))
    return transfers


def airdrop_file_names(now: datetime | None = None) -> tuple[str, str]:
    """Names of the failure cache and the successful-signature file for a run."""
    moment = now if now is not None else datetime.now()
    timestamp = moment.strftime("%Y-%m-%d-%H-%M-%S")
    return (
        f"mb-cache-airdrop-{timestamp}.bin",
        f"mb-successful-airdrops-{timestamp}.json",
    )


def cache_json_path(cache_file: Union[str, Path]) -> Path:
    """Path of the readable JSON copy of a cache file."""
    return Path(cache_file).with_suffix(".json")