"""
Card catalog loader.

Fetches the CardList CSV once, parses it into immutable CardRecords and
caches the result. Concurrent callers share the single in-flight load.

Parsing is lenient: a numeric cell that does not parse becomes 0 and the
row is kept. Only a source that cannot be fetched, or a file that is not a
CardList table at all, fails the load (LoadError).
"""

import asyncio
import io
import logging
import math
from collections.abc import Awaitable, Callable, Iterable
from functools import partial
from pathlib import Path

import httpx
import pandas as pd

from clashlens.models.arena import ARENA_COLUMNS
from clashlens.models.card import CardRecord
from clashlens.models.failure import FailureKind, LoadError
from clashlens.models.groups import normalize_name

logger = logging.getLogger(__name__)

# Authoritative catalog schema (CardList.csv)
REQUIRED_COLUMNS = frozenset(["card_name", "card_type", "elixir", "rarity", *ARENA_COLUMNS])

NUMERIC_COLUMNS: tuple[str, ...] = ("elixir", *ARENA_COLUMNS, "overall_count")

# Columns that identify the per-battle export (team.cardN.* / winner.cardN.*),
# which is a different dataset and is not adapted.
_BATTLE_LOG_MARKERS = ("team.card1.name", "team.card1.id", "winner.card1.id")

# Largest integer a float64 holds exactly; larger counts are clamped to it
MAX_COUNT = 2**53

CatalogFetcher = Callable[[str], Awaitable[str]]


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def fetch_catalog_text(source: str, timeout: float | None = 30.0) -> str:
    """
    Read the raw catalog CSV from a local path or an http(s) URL.

    Args:
        source: File path or URL
        timeout: HTTP timeout in seconds (None disables it)

    Returns:
        The CSV text.

    Raises:
        LoadError: If the file is missing/unreadable or the request fails
    """
    if _is_url(source):
        try:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
                response = await client.get(source)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise LoadError(source, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise LoadError(source, f"request failed: {e}") from e

    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(source, f"cannot read file: {e}") from e


def validate_schema(columns: Iterable[str], source: str) -> None:
    """
    Check that a parsed table is a CardList catalog.

    Raises:
        LoadError: If the table is a battle-log export or misses required columns
    """
    present = set(columns)

    if any(marker in present for marker in _BATTLE_LOG_MARKERS):
        raise LoadError(
            source,
            "battle-log schema (team.cardN.* columns) is not supported; "
            "expected a CardList catalog with card_name and count_0..count_4",
            kind=FailureKind.SCHEMA_MISMATCH,
        )

    missing = REQUIRED_COLUMNS - present
    if missing:
        raise LoadError(
            source,
            f"missing required columns: {sorted(missing)}",
            kind=FailureKind.SCHEMA_MISMATCH,
        )


def _coerce_numeric(df: pd.DataFrame, column: str) -> int:
    """Coerce a text column to non-negative ints in place; return the failure count."""
    raw = df[column].astype(str).str.strip()
    numbers = pd.to_numeric(raw, errors="coerce").replace([math.inf, -math.inf], math.nan)
    failures = int((numbers.isna() & (raw != "")).sum())
    df[column] = numbers.fillna(0).clip(lower=0, upper=MAX_COUNT).astype(int)
    return failures


def _read_table(text: str, source: str) -> pd.DataFrame:
    """
    Read CSV text with every cell as a string.

    A row with more fields than the header keeps its leading fields and is
    logged; a row with fewer fields is padded with blanks. Only text that
    cannot be tokenized at all is an error.
    """
    try:
        width = len(pd.read_csv(io.StringIO(text), nrows=0).columns)

        def keep_leading_fields(line: list[str]) -> list[str]:
            logger.warning(
                "Malformed row in %s: %d fields, expected %d; extra fields dropped",
                source,
                len(line),
                width,
            )
            return line[:width]

        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            engine="python",
            on_bad_lines=keep_leading_fields,
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise LoadError(source, f"not a readable CSV: {e}") from e

    return df.fillna("")


def parse_catalog(text: str, source: str = "<memory>") -> tuple[CardRecord, ...]:
    """
    Parse CardList CSV text into catalog records.

    Args:
        text: Raw CSV text
        source: Where the text came from (used in errors and logs)

    Returns:
        Records in file order. Rows with a blank card_name are skipped;
        for duplicate names (case-insensitive) the first row wins.

    Raises:
        LoadError: If the text is not a CSV or lacks the CardList columns
    """
    df = _read_table(text, source)

    df.columns = [str(c).strip() for c in df.columns]
    validate_schema(df.columns, source)

    if "overall_count" not in df.columns:
        logger.info("%s has no overall_count column; summing arena counts", source)
        df["overall_count"] = ""

    coerced = sum(_coerce_numeric(df, column) for column in NUMERIC_COLUMNS)
    if coerced:
        logger.debug("Coerced %d non-numeric cells to 0 in %s", coerced, source)

    records: list[CardRecord] = []
    seen: set[str] = set()
    for row in df.to_dict("records"):
        name = str(row["card_name"]).strip()
        key = normalize_name(name)
        if not key:
            continue
        if key in seen:
            logger.debug("Skipping duplicate card row: %s", name)
            continue
        seen.add(key)

        arena_values = {column: int(row[column]) for column in ARENA_COLUMNS}
        overall = int(row["overall_count"]) or sum(arena_values.values())

        records.append(
            CardRecord(
                name=name,
                card_type=str(row["card_type"]).strip(),
                cost=int(row["elixir"]),
                rarity=str(row["rarity"]).strip(),
                arena_values=arena_values,
                overall_count=overall,
            )
        )

    return tuple(records)


class CatalogLoader:
    """
    Load-once cache for the card catalog.

    The first `load()` starts one fetch; every caller, including those that
    arrive while it is still running, awaits that same task. A failed load
    stays failed (every waiter gets the LoadError) until `reset()`.
    """

    def __init__(
        self,
        source: str,
        fetcher: CatalogFetcher | None = None,
        timeout: float | None = 30.0,
    ) -> None:
        self.source = source
        self._fetcher = fetcher or partial(fetch_catalog_text, timeout=timeout)
        self._task: asyncio.Task[tuple[CardRecord, ...]] | None = None

    async def load(self) -> tuple[CardRecord, ...]:
        """
        Get the catalog, fetching it on first use.

        Raises:
            LoadError: If the source cannot be fetched or parsed
        """
        if self._task is None:
            self._task = asyncio.ensure_future(self._load())
        # A cancelled waiter must not cancel the shared load
        return await asyncio.shield(self._task)

    async def _load(self) -> tuple[CardRecord, ...]:
        logger.info("Loading card catalog from %s", self.source)
        try:
            text = await self._fetcher(self.source)
            records = parse_catalog(text, self.source)
        except LoadError as e:
            logger.error("Failed to load card catalog: %s", e.detail)
            raise
        except (OSError, httpx.HTTPError) as e:
            logger.error("Failed to load card catalog from %s: %s", self.source, e)
            raise LoadError(self.source, str(e)) from e

        logger.info("Loaded %d cards from %s", len(records), self.source)
        return records

    @property
    def is_loaded(self) -> bool:
        """True once a load has completed successfully."""
        task = self._task
        return (
            task is not None
            and task.done()
            and not task.cancelled()
            and task.exception() is None
        )

    def reset(self) -> None:
        """Forget the cached result (or failure); the next load fetches again."""
        self._task = None
