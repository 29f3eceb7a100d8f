# metaboss

A pure-Python library for working with Metaplex NFT accounts without a
running node: deriving program-derived addresses, tracking failed batch
actions in cache files, rate-limiting work, and checking editions and
collection membership. It has no third-party dependencies.

## Installation

```
pip install metaboss
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "metaboss[test]"
pytest
```

## Deriving addresses

`metaboss.pubkey` provides `Pubkey` (a 32-byte address with base58
`from_string` and `str()`), `b58encode` / `b58decode`, `is_on_curve`,
`create_program_address` and `find_program_address`. Seeds that are too
many or too long raise `PDAError`.

`metaboss.derive` builds the common Metaplex addresses on top of it:

```python
from metaboss.pubkey import Pubkey
from metaboss.derive import (
    derive_metadata_pda,
    derive_edition_pda,
    derive_edition_marker_pda,
    derive_token_account_pda,
    derive_cmv2_pda,
    derive_cmv3_pda,
    TOKEN_PROGRAM_ID,
)

mint = Pubkey.from_string("H9UJFx7HknQ9GUz7RBqqV9SRnht6XaVDh2cZS3Huogpf")

print(derive_metadata_pda(mint))             # metadata account
print(derive_edition_pda(mint))              # master edition account
print(derive_edition_marker_pda(mint, 250))  # marker for editions 248..495

owner = Pubkey.from_string("8LSSjDHrfzcf3GnyE41F6SxMifpRCBA7NKSnfAEYzU7q")
print(derive_token_account_pda(mint, owner, TOKEN_PROGRAM_ID))
```

`derive_collection_authority_record` and `derive_use_authority_record`
return the address together with its bump seed.

Comma-separated seed strings are accepted by `parse_seeds`: each part that
parses as a public key is used as its 32 raw bytes, anything else as UTF-8
text (see `pubkey_or_bytes`).

```python
from metaboss.derive import derive_generic_pda, parse_seeds

seeds = parse_seeds(
    "metadata,metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s,"
    "H9UJFx7HknQ9GUz7RBqqV9SRnht6XaVDh2cZS3Huogpf"
)
program = Pubkey.from_string("metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s")
print(derive_generic_pda(seeds, program))
```

## Batch actions and caches

`metaboss.cache.Action` runs an operation over a list of mints. Subclass it,
set the `name` class attribute and implement the async `action` method;
a failure for one mint is reported by raising `metaboss.errors.ActionError`.

```python
import asyncio
from metaboss.cache import Action, BatchActionArgs
from metaboss.errors import ActionError

class Touch(Action):
    name = "touch"

    async def action(self, args):
        if args.mint_account.startswith("bad"):
            raise ActionError(args.mint_account, "rejected")

cache = asyncio.run(
    Touch().run(BatchActionArgs(client=None, keypair=None,
                                mint_list=["good1", "bad1"], retries=1))
)
print(dict(cache))
```

`run` paces the calls with a rate limiter (`rate_limit` per second), retries
failed mints up to `retries` times, and returns the final `Cache`. It writes
`mb-cache-<name>.json` in the current directory (or the file given as
`cache_file`); when mints still fail after the last retry their errors are
written there. Passing that file back as `cache_file` retries only those
mints. Giving both `mint_list` and `cache_file`, or neither, raises
`ValueError`. An optional `error_lookup` turns hex error codes found in
messages into readable text.

`Cache` and `MigrateCache` are dictionaries of mint address to `CacheItem`;
`load` reads one from a JSON file and `write` sorts it by mint and writes it
as indented JSON.

## Rate limiting

`metaboss.limiter.RateLimiter` is a thread-safe token bucket: `wait()` blocks
until a token is available, `try_acquire()` does not block. Factories:

- `create_rate_limiter_with_capacity(capacity, delay)` – chosen capacity, one
  token every `delay` nanoseconds;
- `create_rate_limiter(delay)` – capacity 1000;
- `create_default_rate_limiter(delay_ns)` – capacity equal to the CPU count.

## Other helpers

- `metaboss.find.find_missing_editions` takes printed edition numbers and
  returns an `EditionReport` with them sorted and the numbers between 1 and
  the largest that are missing.
- `metaboss.collections` models indexer collection metadata
  (`CollectionMetadata.from_dict`), builds JSON-RPC bodies (`JRPCRequest`),
  extracts sorted mints from a response (`collect_collection_mints`), groups
  mints by collection key (`group_mints_by_collection`) and checks that a mint
  list belongs wholly to one collection (`check_collection_items`, which
  raises `CollectionCheckError`; its `write_debug` writes the grouping to
  `<collection>-debug-collections.json`).
- `metaboss.decode` has `get_metadata_pda`, `resolve_edition_number` (an
  edition number, or a marker number times 248), `strip_null_padding`,
  `is_only_one_option`, and the output shapes `JSONCreator`,
  `JSONCollection`, `JSONCollectionDetails` and `JSONUses`.
- `metaboss.airdrop` parses priorities (`Priority.parse`) into compute unit
  prices (`priority_fee`), loads recipient lists (`load_recipient_list`),
  keeps recipients with valid addresses (`build_transfers`), names the files
  of a run (`airdrop_file_names`) and the JSON copy of a cache
  (`cache_json_path`); `FailedTransaction` converts to and from dictionaries.
- `metaboss.settings` holds the program constants, picks the RPC URL and
  `Commitment` (`resolve_rpc`) and decides whether rate limiting applies to
  an endpoint (`rate_limit_for_rpc`).
- `metaboss.data` has the `Indexer` enum and `FoundError`.

Errors live in `metaboss.errors`: `DecodeError` and its subclasses
(`ClientError`, `DecodeNetworkError`, `PubkeyParseFailed`,
`DecodeMetadataFailed`), the per-mint `ActionError`, `UpdateError` and
`MigrateError`, and `SolConfigError` with `MissingHomeEnvVar`,
`ConfigIOError` and `ConfigYamlError`.

## What this package does not do

It has no command-line program and does not talk to a Solana node: it does
not read keypairs or CLI configuration files, build, sign or send
transactions, fetch or deserialize on-chain accounts, or call indexer
services. It supplies the addresses, data shapes, checks, caches and pacing
that such work relies on; the network calls are left to the caller, for
example inside an `Action.action` implementation.