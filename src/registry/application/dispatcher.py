import asyncio
from typing import Mapping

from src.config.logger_config import logger
from src.catalogue.fallback import PLACEHOLDER
from src.registry.application.ports import ContentSourcePort, IconFetcherPort
from src.registry.application.resolver import ContentResolver
from src.registry.application.sources import FallbackSetSource, RegistrySource, as_content_source
from src.registry.domain.models import TIER_PLACEHOLDER, Registry, Resolution

LiveCatalogue = Mapping[str, str] | ContentSourcePort | IconFetcherPort


class Dispatcher:
    """Resolve runtime icon names: registry, then live catalogue, fallback set, placeholder.

    Holds no mutable state after construction, so one instance may serve
    concurrent callers.
    """

    def __init__(self, registry: Registry, live_catalogue: LiveCatalogue | None = None) -> None:
        self.registry = registry
        sources: list[ContentSourcePort] = [RegistrySource(registry)]
        if live_catalogue is not None:
            sources.append(as_content_source(live_catalogue))
        sources.append(FallbackSetSource())
        self._resolver = ContentResolver(sources)

    def dispatch(self, name: str) -> Resolution:
        return self._resolver.resolve(name)

    async def dispatch_async(self, name: str, timeout: float | None = None) -> Resolution:
        """Dispatch on a worker thread; the placeholder stands in if ``timeout`` elapses."""
        try:
            return await asyncio.wait_for(asyncio.to_thread(self.dispatch, name), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Dispatch for '{}' timed out after {}s, using placeholder.", name, timeout)
            return Resolution(name=name, content=PLACEHOLDER, tier=TIER_PLACEHOLDER)


def create_dispatcher(
    registry: Registry | None = None,
    live_source: LiveCatalogue | None = None,
) -> Dispatcher:
    if registry is None:
        logger.info("No generated registry available, dispatching from the bundled fallback set.")
        registry = Registry()
    return Dispatcher(registry, live_catalogue=live_source)


def dispatch(name: str, registry: Registry, live_catalogue: LiveCatalogue | None = None) -> Resolution:
    return Dispatcher(registry, live_catalogue=live_catalogue).dispatch(name)
