"""Metaplex NFT helpers: address derivation, batch caches, rate limiting and checks."""

__version__ = "0.1.0"

__all__ = [
    "airdrop",
    "cache",
    "collections",
    "data",
    "decode",
    "derive",
    "errors",
    "find",
    "limiter",
    "pubkey",
    "settings",
]