import asyncio

import aiohttp

from src.catalogue.domain.models import SOURCE_CACHE, SOURCE_NETWORK, CatalogueFetchResult
from src.catalogue.infrastructure.catalogue_cache import JsonCatalogueCache
from src.catalogue.infrastructure.lucide_client import LucideCatalogueClient
from src.config.logger_config import logger
from src.config.settings import GeneratorSettings, load_settings


async def fetch_catalogue_async(
    *,
    settings: GeneratorSettings | None = None,
    use_cache: bool = True,
    offline: bool = False,
) -> CatalogueFetchResult:
    settings = settings or load_settings()
    cache = JsonCatalogueCache(settings.cache_path)

    if not offline:
        client = LucideCatalogueClient.from_settings(settings)
        connector = aiohttp.TCPConnector(
            limit=0,
            limit_per_host=settings.download_concurrency,
            ttl_dns_cache=300,
        )
        async with aiohttp.ClientSession(connector=connector) as session:
            catalogue = await client.fetch_catalogue(session)

        if catalogue is not None:
            if use_cache:
                try:
                    cache.write(catalogue)
                except OSError as exc:
                    logger.warning("Failed to write catalogue cache {}: {}", str(cache.cache_path), exc)
            return CatalogueFetchResult(catalogue=catalogue, source=SOURCE_NETWORK)
        logger.warning("Lucide catalogue unavailable, trying local cache.")

    if use_cache:
        cached = cache.read()
        if cached is not None:
            logger.info("Using cached catalogue with {} icons from {}", len(cached), str(cache.cache_path))
            return CatalogueFetchResult(catalogue=cached, source=SOURCE_CACHE)

    return CatalogueFetchResult(catalogue=None, source=None)


def fetch_catalogue(
    *,
    settings: GeneratorSettings | None = None,
    use_cache: bool = True,
    offline: bool = False,
) -> CatalogueFetchResult:
    return asyncio.run(fetch_catalogue_async(settings=settings, use_cache=use_cache, offline=offline))
