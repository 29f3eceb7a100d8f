"""Program-wide constants and RPC connection settings."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 32
MAX_URI_LENGTH = 200
MAX_SYMBOL_LENGTH = 10
MAX_CREATOR_LEN = 32 + 1 + 1

METADATA_PREFIX = "metadata"
MASTER_EDITION_PREFIX = "edition"
USER_PREFIX = "user"
ERROR_FILES_DIR = ".error_files"

METAPLEX_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
CANDY_MACHINE_PROGRAM_ID = "cndyAnrLdpjq1Ssp1z8xxDsB8dxe7u4HL5Nxi2K5WXZ"

PUBLIC_RPC_URLS = (
    "https://api.devnet.solana.com",
    "https://api.testnet.solana.com",
    "https://api.mainnet-beta.solana.com",
    "https://solana-api.projectserum.com",
)

DEFAULT_RPC_DELAY_MS = 200
DEFAULT_RATE_LIMIT = 10
NANO_SECONDS_IN_SECOND = 1_000_000_000

RATE_LIMIT_DELAYS = {"https://ssc-dao.genesysgo.net": 25}

MINT_LAYOUT = 82

DEFAULT_RPC_URL = "https://devnet.genesysgo.net"


class Commitment(enum.Enum):
    """Confirmation level requested from the RPC node."""

    PROCESSED = "processed"
    CONFIRMED = "confirmed"
    FINALIZED = "finalized"

    @classmethod
    def parse(cls, value: str) -> "Commitment":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid commitment level: {value}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RateLimitSettings:
    """Whether requests are throttled and the delay between them."""

    use_rate_limit: bool = False
    rpc_delay_ns: int = DEFAULT_RPC_DELAY_MS * 1_000_000


def rate_limit_for_rpc(rpc: str) -> RateLimitSettings:
    """Choose the rate-limit settings appropriate for an RPC endpoint."""
    if rpc in PUBLIC_RPC_URLS:
        logger.warning(
            "Using a public RPC URL is not recommended for heavy tasks as you will "
            "be rate-limited and suffer a performance hit"
        )
        logger.warning("Please use a private RPC endpoint for best performance results.")
        return RateLimitSettings(use_rate_limit=True)
    if rpc in RATE_LIMIT_DELAYS:
        return RateLimitSettings(use_rate_limit=True, rpc_delay_ns=RATE_LIMIT_DELAYS[rpc])
    return RateLimitSettings()


def resolve_rpc(
    cli_rpc: str | None = None,
    config_url: str | None = None,
    config_commitment: str | None = None,
) -> tuple[str, Commitment]:
    """Pick the RPC URL and commitment from the command line, then the config file."""
    if cli_rpc:
        return cli_rpc, Commitment.CONFIRMED
    if config_url is not None:
        return config_url, Commitment.parse(config_commitment or "confirmed")
    logger.info(
        "Could not find a valid Solana-CLI config file. Defaulting to %s devnet node.",
        DEFAULT_RPC_URL,
    )
    return DEFAULT_RPC_URL, Commitment.CONFIRMED