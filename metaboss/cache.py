"""Failure caches and the retrying batch-action runner."""

from __future__ import annotations

import abc
import asyncio
import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, ClassVar, Iterable, Mapping, Optional, TextIO, Union

from metaboss.errors import ActionError, MigrateError
from metaboss.limiter import create_rate_limiter_with_capacity
from metaboss.settings import NANO_SECONDS_IN_SECOND

logger = logging.getLogger(__name__)

_HEX_CODE = re.compile(r" 0x[0-9a-fA-F]+")

ErrorLookup = Callable[[str], Optional[str]]
NewValue = Union[None, str, Mapping[str, str]]


@dataclass
class CacheItem:
    """The recorded outcome for one mint."""

    error: Optional[str] = None


def _read_items(path: Union[str, Path]) -> list[tuple[str, CacheItem]]:
    with open(path, encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, dict):
        raise ValueError("cache file must hold a JSON object")
    return [(mint, CacheItem(error=(item or {}).get("error"))) for mint, item in raw.items()]


def _sort_and_dump(cache: dict, writer: TextIO) -> None:
    ordered = sorted(cache.items())
    cache.clear()
    cache.update(ordered)
    json.dump({mint: {"error": item.error} for mint, item in cache.items()}, writer, indent=2)


class Cache(dict):
    """Failures from a batch action, mint address to cache item."""

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Cache":
        """Read a cache from a JSON file."""
        return cls(_read_items(path))

    def write(self, writer: TextIO) -> None:
        """Sort by mint and write as pretty JSON."""
        _sort_and_dump(self, writer)

    def update_errors(
        self, errors: Iterable[ActionError], error_lookup: Optional[ErrorLookup] = None
    ) -> None:
        """Replace the contents with the given failures, decoding hex error codes."""
        self.clear()
        for error in errors:
            text = str(error)
            message = text
            found = _HEX_CODE.search(text)
            if found and error_lookup is not None:
                code = found.group().lstrip().replace("0x", "")
                message = error_lookup(code) or text
            self[error.mint_address] = CacheItem(error=message)


class MigrateCache(dict):
    """Failures from a collection migration, mint address to cache item."""

    @classmethod
    def load(cls, path: Union[str, Path]) -> "MigrateCache":
        """Read a cache from a JSON file."""
        return cls(_read_items(path))

    def write(self, writer: TextIO) -> None:
        """Sort by mint and write as pretty JSON."""
        _sort_and_dump(self, writer)

    def update_errors(self, errors: Iterable[MigrateError]) -> None:
        self.clear()
        for error in errors:
            self[error.mint_address] = CacheItem(error=str(error))


@dataclass
class BatchActionArgs:
    client: Any
    keypair: Any
    payer: Any = None
    mint_list: Optional[list[str]] = None
    cache_file: Optional[str] = None
    new_value: NewValue = None
    rate_limit: int = 10
    retries: int = 0
    priority: Any = None
    error_lookup: Optional[ErrorLookup] = None


@dataclass
class RunActionArgs:
    client: Any
    keypair: Any
    payer: Any
    mint_account: str
    new_value: str
    priority: Any


class Action(abc.ABC):
    """An operation applied to every mint in a list, with retries and a failure cache."""

    name: ClassVar[str] = "action"

    @abc.abstractmethod
    async def action(self, args: RunActionArgs) -> None:
        """Act on one mint; raise ActionError on failure."""

    async def _attempt(self, args: RunActionArgs) -> Optional[ActionError]:
        try:
            await self.action(args)
        except ActionError as error:
            return error
        return None

    async def run(self, args: BatchActionArgs) -> Cache:
        """Run the action over all mints, retrying failures; return the final cache."""
        if args.cache_file is not None and args.mint_list is not None:
            raise ValueError("Can only specify either a cache or a mint_list file.")
        if args.rate_limit < 1:
            raise ValueError("rate limit must be at least 1")

        cache_file_name = f"mb-cache-{self.name}.json"
        cache = Cache()

        if args.mint_list is not None:
            mint_list = list(args.mint_list)
        elif args.cache_file is not None:
            print("Retrying items from cache file. . .")
            cache_file_name = args.cache_file
            mint_list = list(Cache.load(cache_file_name))
        else:
            raise ValueError("Please specify either a mint_list file or a cache file.")

        delay = NANO_SECONDS_IN_SECOND // args.rate_limit
        limiter = create_rate_limiter_with_capacity(args.rate_limit, delay)
        counter = 0

        with open(cache_file_name, "w", encoding="utf-8") as cache_out:
            while True:
                logger.info("Sending network requests...")
                tasks = []
                for mint in mint_list:
                    if args.new_value is None:
                        new_value = ""
                    elif isinstance(args.new_value, str):
                        new_value = args.new_value
                    else:
                        new_value = args.new_value[mint]
                    await asyncio.to_thread(limiter.wait)
                    run_args = RunActionArgs(
                        client=args.client,
                        keypair=args.keypair,
                        payer=args.payer,
                        mint_account=mint,
                        new_value=new_value,
                        priority=args.priority,
                    )
                    tasks.append(asyncio.create_task(self._attempt(run_args)))

                results = await asyncio.gather(*tasks)
                failed = [error for error in results if error is not None]
                print(f"Updates failed: {len(failed)}")

                if failed and counter < args.retries:
                    counter += 1
                    print(f"{len(failed)}/{len(tasks)} updates failed. Retrying. . .")
                    cache.update_errors(failed, args.error_lookup)
                    mint_list = list(cache)
                elif not failed:
                    print("All actions successfully run!")
                    break
                else:
                    print("Reached max retries. Writing remaining items to cache.")
                    cache.update_errors(failed, args.error_lookup)
                    cache.write(cache_out)
                    break
        return cache