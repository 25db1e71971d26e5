"""
Asset retrieval for the letterhead logos.
References are either http(s) URLs (fetched with httpx) or local paths.
"""

from pathlib import Path
from typing import Optional

import httpx
from loguru import logger


class AssetFetcher:
    """Returns raw bytes for an asset reference, or raises."""

    def __init__(
        self,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.timeout = timeout
        self.http_client = http_client

    async def fetch(self, ref: str) -> bytes:
        if ref.startswith(("http://", "https://")):
            return await self._fetch_url(ref)

        path = Path(ref)
        if not path.exists():
            raise FileNotFoundError(f"Asset not found: {path}")
        return path.read_bytes()

    async def _fetch_url(self, url: str) -> bytes:
        logger.debug(f"Fetching asset {url}")
        if self.http_client is not None:
            response = await self.http_client.get(url)
            response.raise_for_status()
            return response.content

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.content
