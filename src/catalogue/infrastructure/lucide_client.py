import asyncio
import json
from typing import Any
from urllib.parse import quote

import aiohttp
import requests
from aiohttp import (
    ClientConnectorError,
    ClientPayloadError,
    ClientResponseError,
    ContentTypeError,
    ServerDisconnectedError,
)
from tqdm import tqdm

from src.catalogue.domain.rules import icon_name_from_filename, parse_catalogue_payload, records_to_catalogue
from src.config.logger_config import logger
from src.config.settings import DEFAULT_API_URL, DEFAULT_RAW_BASE_URL, GeneratorSettings

USER_AGENT = "lucide-icon-registry/0.1"


class LucideCatalogueClient:
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        raw_base_url: str = DEFAULT_RAW_BASE_URL,
        *,
        github_token: str | None = None,
        timeout_seconds: float = 45.0,
        retries: int = 3,
        concurrency: int = 8,
        show_progress: bool = False,
    ) -> None:
        self.api_url = api_url
        self.raw_base_url = raw_base_url
        self.github_token = github_token
        self.timeout_seconds = timeout_seconds
        self.retries = retries
        self.concurrency = concurrency
        self.show_progress = show_progress

    @classmethod
    def from_settings(cls, settings: GeneratorSettings) -> "LucideCatalogueClient":
        return cls(
            api_url=settings.api_url,
            raw_base_url=settings.raw_base_url,
            github_token=settings.github_token,
            timeout_seconds=settings.http_timeout_seconds,
            retries=settings.retries,
            concurrency=settings.download_concurrency,
            show_progress=settings.show_progress,
        )

    async def fetch_catalogue(self, session: aiohttp.ClientSession) -> dict[str, str] | None:
        """Fetch every icon as ``raw_name -> svg markup``; None when the listing is unavailable."""
        logger.info("Fetching Lucide icon listing from {}", self.api_url)
        listing = await self._fetch(session, self.api_url, expect_json=True, operation="fetch_listing")
        if listing is None:
            logger.error("Failed to fetch Lucide icon listing.")
            return None

        if isinstance(listing, dict):
            records = parse_catalogue_payload(listing)
            if not records:
                logger.error("Lucide listing payload contained no icons: {}", str(listing)[:200])
                return None
            return records_to_catalogue(records)

        if not isinstance(listing, list):
            logger.error("Unexpected Lucide listing payload type {}", type(listing).__name__)
            return None

        return await self._download_icons(session, self._download_targets(listing))

    def fetch_icon(self, name: str) -> str | None:
        """Fetch one icon's svg markup synchronously; None on any failure."""
        if not name:
            return None
        url = f"{self.raw_base_url.rstrip('/')}/{quote(name, safe='')}.svg"
        try:
            resp = requests.get(url, headers=self._headers(), timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            logger.warning("Live lookup for icon '{}' failed: {}", name, exc)
            return None

        if resp.status_code != 200:
            logger.info("Live lookup for icon '{}' returned HTTP {}", name, resp.status_code)
            return None
        return resp.text

    @staticmethod
    def _download_targets(listing: list[Any]) -> list[tuple[str, str]]:
        targets: dict[str, str] = {}
        for entry in listing:
            if not isinstance(entry, dict):
                continue
            name = icon_name_from_filename(str(entry.get("name") or ""))
            url = entry.get("download_url")
            if name is None or not isinstance(url, str) or not url:
                continue
            targets[name] = url
        return sorted(targets.items())

    async def _download_icons(
        self,
        session: aiohttp.ClientSession,
        targets: list[tuple[str, str]],
    ) -> dict[str, str] | None:
        semaphore = asyncio.Semaphore(self.concurrency)

        with tqdm(
            total=len(targets),
            desc="Lucide icons",
            unit=" icon",
            leave=True,
            disable=not self.show_progress,
        ) as progress:

            async def _download(name: str, url: str) -> tuple[str, str | None]:
                async with semaphore:
                    content = await self._fetch(session, url, expect_json=False, operation="fetch_icon")
                progress.update(1)
                return name, content

            results = await asyncio.gather(*(_download(name, url) for name, url in targets))

        catalogue: dict[str, str] = {}
        failed: list[str] = []
        for name, content in results:
            if content is None:
                failed.append(name)
                continue
            catalogue[name] = content

        if failed:
            logger.warning("Skipped {} icons that could not be downloaded: {}", len(failed), ", ".join(failed[:20]))
        if targets and not catalogue:
            logger.error("Every one of {} icon downloads failed.", len(targets))
            return None
        logger.info("Downloaded {} Lucide icons.", len(catalogue))
        return catalogue

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": USER_AGENT}
        if self.github_token:
            headers["Authorization"] = f"Bearer {self.github_token}"
        return headers

    async def _fetch(
        self,
        session: aiohttp.ClientSession,
        url: str,
        retries: int | None = None,
        *,
        expect_json: bool,
        operation: str,
    ) -> Any | None:
        retries = retries or self.retries
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds, connect=10)
        for attempt in range(1, retries + 1):
            try:
                async with session.get(url, headers=self._headers(), timeout=timeout) as resp:
                    if resp.status >= 500 or resp.status == 429:
                        logger.warning(
                            "{}: server error {}. Attempt {}/{}",
                            operation,
                            resp.status,
                            attempt,
                            retries,
                        )
                        raise ClientResponseError(
                            resp.request_info,
                            resp.history,
                            status=resp.status,
                            message="Server Error",
                        )

                    if resp.status != 200:
                        body = await resp.text()
                        logger.error("{}: HTTP {} for {}: {}", operation, resp.status, url, body[:200])
                        return None

                    if expect_json:
                        return await resp.json(content_type=None)
                    return await resp.text()

            except (
                ClientResponseError,
                ClientConnectorError,
                ServerDisconnectedError,
                asyncio.TimeoutError,
                ClientPayloadError,
                ContentTypeError,
                json.JSONDecodeError,
            ) as exc:
                wait_time = 2**attempt
                if attempt == retries:
                    logger.error("{}: failed after {} attempts. Error: {}", operation, retries, exc)
                    return None
                logger.warning("Connection unstable ({}). Retrying in {}s...", exc, wait_time)
                await asyncio.sleep(wait_time)
            except Exception as exc:
                logger.error("{}: unexpected error while fetching {}: {}", operation, url, exc)
                return None

        return None
