"""Reading lookup: cache first, upstream on miss."""

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import datetime, timezone

from reading_proxy.errors import InvalidDateError
from reading_proxy.services.cache import ReadingCache
from reading_proxy.services.reading_fetcher import ReadingFetcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadingResult:
    data: str
    date: str
    cache_status: str  # "HIT" or "MISS"


def today_utc() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


def resolve_date(date: str | None) -> str:
    """Default to today's UTC date; otherwise require YYYY-MM-DD."""
    if not date:
        return today_utc()
    try:
        parsed = datetime.strptime(date, "%Y-%m-%d")
    except ValueError:
        raise InvalidDateError(date) from None
    # strptime also accepts unpadded or space-padded fields ("2025-6-1", "2025-06- 5")
    if parsed.strftime("%Y-%m-%d") != date:
        raise InvalidDateError(date)
    return date


class ReadingService:
    """Serves readings from the cache, fetching and storing on a miss.

    Concurrent misses for the same date share one upstream fetch: the first
    request holds the date's lock while fetching, later ones wait and then
    find the entry in the cache.
    """

    def __init__(self, cache: ReadingCache, fetcher: ReadingFetcher):
        self.cache = cache
        self.fetcher = fetcher
        # date -> (lock, number of requests holding or waiting on it)
        self._locks: dict[str, tuple[asyncio.Lock, int]] = {}

    @asynccontextmanager
    async def _date_lock(self, date: str):
        lock, users = self._locks.get(date, (asyncio.Lock(), 0))
        self._locks[date] = (lock, users + 1)
        try:
            async with lock:
                yield
        finally:
            lock, users = self._locks[date]
            if users == 1:
                del self._locks[date]
            else:
                self._locks[date] = (lock, users - 1)

    async def get_reading(self, date: str) -> ReadingResult:
        cached = self.cache.get(date)
        if cached is not None:
            logger.info(f"Cache HIT for date: {date}")
            return ReadingResult(data=cached.data, date=cached.date, cache_status="HIT")

        async with self._date_lock(date):
            # Another request may have filled the entry while we waited
            cached = self.cache.get(date)
            if cached is not None:
                logger.info(f"Cache HIT for date: {date} (after in-flight fetch)")
                return ReadingResult(data=cached.data, date=cached.date, cache_status="HIT")

            logger.info(f"Cache MISS for date: {date}, fetching from NLT API...")
            reading = await self.fetcher.fetch(date)
            self.cache.put(date, reading)

        return ReadingResult(data=reading, date=date, cache_status="MISS")
