"""Provider that calls the Transifex project details API."""

import logging

import httpx
from pydantic import ValidationError

from tx_badge.config import TRANSIFEX_API_URL
from tx_badge.errors import ParseError, TransportError, UpstreamStatusError
from tx_badge.models import ProjectStats, TranslationStats, Version
from tx_badge.utils import format_percentage
from .base import StatsProvider

logger = logging.getLogger(__name__)

API_USERNAME = "api"


class TransifexProvider(StatsProvider):
    def __init__(
        self,
        api_key: str = "",
        api_url: str = TRANSIFEX_API_URL,
        timeout: float = 10.0,
    ):
        self._api_url = api_url
        self._client = httpx.AsyncClient(
            auth=(API_USERNAME, api_key),
            timeout=timeout,
        )

    def _url(self, version: str) -> str:
        # The version is appended to the project slug, not a path segment.
        return f"{self._api_url}{version}/"

    async def fetch_stats(self, version: Version | str) -> bytes:
        ver = Version(version).value
        logger.info("Requesting Transifex API, version: %s", ver)
        try:
            resp = await self._client.get(self._url(ver))
        except httpx.HTTPError as e:
            raise TransportError(f"Transifex API request failed: {e}") from e

        if resp.status_code != 200:
            raise UpstreamStatusError(resp.status_code, resp.reason_phrase)

        try:
            project = ProjectStats.model_validate_json(resp.content)
        except ValidationError as e:
            raise ParseError(f"Invalid Transifex API response: {e}") from e

        result = TranslationStats(
            {
                lang: format_percentage(stats.percentage if stats else 0.0)
                for lang, stats in sorted((project.stats or {}).items())
            }
        )
        data = result.model_dump_json().encode()
        logger.info("Transifex API request succeeded, version: %s", ver)
        return data

    async def close(self) -> None:
        await self._client.aclose()
