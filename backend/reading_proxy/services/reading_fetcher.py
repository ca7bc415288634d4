"""Upstream client for the NLT reading API."""

import logging

import httpx

from reading_proxy.config import NLT_API_URL, READING_PLAN
from reading_proxy.errors import UpstreamError

logger = logging.getLogger(__name__)


class ReadingFetcher:
    """Fetches the raw reading for a date from the NLT API.

    The response body is returned as-is; the proxy never parses it.
    """

    def __init__(self, client: httpx.AsyncClient, api_key: str, url: str = NLT_API_URL):
        self._client = client
        self._api_key = api_key
        self._url = url

    async def fetch(self, date: str) -> str:
        params = {"plan": READING_PLAN, "date": date, "key": self._api_key}
        try:
            resp = await self._client.get(self._url, params=params)
        except httpx.HTTPError as e:
            raise UpstreamError(f"NLT API request failed: {e!r}") from e

        if not resp.is_success:
            raise UpstreamError(
                f"NLT API error: {resp.status_code} {resp.reason_phrase}",
                upstream_status=resp.status_code,
                upstream_reason=resp.reason_phrase,
            )

        logger.debug(f"Fetched reading for {date} ({len(resp.text)} chars)")
        return resp.text
