"""Public keys, base58 and program-derived addresses."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Iterable, Union

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {ch: i for i, ch in enumerate(_ALPHABET)}

PUBKEY_BYTES = 32
MAX_BASE58_LEN = 44
MAX_SEEDS = 16
MAX_SEED_LEN = 32
_PDA_MARKER = b"ProgramDerivedAddress"

_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P


class PDAError(Exception):
    """The seeds cannot produce a valid program-derived address."""


def b58encode(data: bytes) -> str:
    """Encode bytes with the Bitcoin base58 alphabet."""
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, rem = divmod(number, 58)
        digits.append(_ALPHABET[rem])
    leading = len(data) - len(data.lstrip(b"\0"))
    return "1" * leading + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode a Bitcoin-alphabet base58 string."""
    number = 0
    for ch in text:
        try:
            number = number * 58 + _INDEX[ch]
        except KeyError:
            raise ValueError(f"invalid base58 character: {ch!r}") from None
    leading = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * leading + body


def is_on_curve(data: bytes) -> bool:
    """Whether 32 bytes decompress to a point on the ed25519 curve."""
    if len(data) != PUBKEY_BYTES:
        return False
    y = (int.from_bytes(data, "little") & ((1 << 255) - 1)) % _P
    yy = y * y % _P
    u = (yy - 1) % _P
    v = (_D * yy + 1) % _P
    if u == 0:
        return True
    x2 = u * pow(v, _P - 2, _P) % _P
    return pow(x2, (_P - 1) // 2, _P) == 1


@dataclass(frozen=True, order=True)
class Pubkey:
    """A 32-byte account address."""

    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray)) or len(self.raw) != PUBKEY_BYTES:
            raise ValueError("Invalid pubkey length")
        object.__setattr__(self, "raw", bytes(self.raw))

    @classmethod
    def from_string(cls, value: str) -> "Pubkey":
        if len(value) > MAX_BASE58_LEN:
            raise ValueError(f"Invalid Base58 string: {value}")
        try:
            raw = b58decode(value)
        except ValueError as exc:
            raise ValueError(f"Invalid Base58 string: {value}") from exc
        if len(raw) != PUBKEY_BYTES:
            raise ValueError(f"Invalid pubkey length: {value}")
        return cls(raw)

    def is_on_curve(self) -> bool:
        return is_on_curve(self.raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return b58encode(self.raw)

    def __repr__(self) -> str:
        return f"Pubkey({self})"


Seed = Union[bytes, bytearray, Pubkey]


def _normalise_seeds(seeds: Iterable[Seed]) -> list[bytes]:
    result = [bytes(seed) for seed in seeds]
    if len(result) > MAX_SEEDS:
        raise PDAError("Length of the seed is too long for address generation")
    if any(len(seed) > MAX_SEED_LEN for seed in result):
        raise PDAError("Length of the seed is too long for address generation")
    return result


def _hash_address(seeds: list[bytes], program_id: Pubkey) -> bytes:
    digest = hashlib.sha256()
    for seed in seeds:
        digest.update(seed)
    digest.update(program_id.raw)
    digest.update(_PDA_MARKER)
    return digest.digest()


def create_program_address(seeds: Iterable[Seed], program_id: Pubkey) -> Pubkey:
    """Derive an address from exact seeds; raises PDAError if it lies on the curve."""
    normalised = _normalise_seeds(seeds)
    raw = _hash_address(normalised, program_id)
    if is_on_curve(raw):
        raise PDAError("Provided seeds do not result in a valid address")
    return Pubkey(raw)


def find_program_address(seeds: Iterable[Seed], program_id: Pubkey) -> tuple[Pubkey, int]:
    """Find the first off-curve address, trying bump seeds from 255 downwards."""
    normalised = _normalise_seeds(seeds)
    if len(normalised) >= MAX_SEEDS:
        raise PDAError("Length of the seed is too long for address generation")
    for bump in range(255, -1, -1):
        raw = _hash_address([*normalised, bytes([bump])], program_id)
        if not is_on_curve(raw):
            return Pubkey(raw), bump
    raise PDAError("Unable to find a viable program address bump seed")