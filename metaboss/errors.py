"""Exceptions raised across the package."""

from __future__ import annotations


class DecodeError(Exception):
    """Base class for failures while decoding on-chain accounts."""


class ClientError(DecodeError):
    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Client Error: '{kind}'")


class DecodeNetworkError(DecodeError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Network Error: '{detail}'")


class PubkeyParseFailed(DecodeError):
    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Pubkey Parsing Failed: '{address}'")


class DecodeMetadataFailed(DecodeError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Metadata Decode Failed: '{detail}'")


class _MintFailure(Exception):
    _template = "{error}"

    def __init__(self, mint_address: str, error: str) -> None:
        self.mint_address = mint_address
        self.error = error
        super().__init__(self._template.format(error=error))


class MigrateError(_MintFailure):
    """A collection migration failed for one mint."""

    _template = "Migration failed with error: {error}"


class UpdateError(_MintFailure):
    """An update failed for one mint."""

    _template = "Action failed with error: {error}"


class ActionError(_MintFailure):
    """A batch action failed for one mint."""

    _template = "Action failed with error: {error}"


class SolConfigError(Exception):
    """Base class for problems reading the Solana CLI configuration."""


class MissingHomeEnvVar(SolConfigError):
    def __init__(self) -> None:
        super().__init__("no home env var found")


class ConfigIOError(SolConfigError):
    def __init__(self, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__("failed to find or open Solana config file")


class ConfigYamlError(SolConfigError):
    def __init__(self, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__("failed to deserialize Solana config file")