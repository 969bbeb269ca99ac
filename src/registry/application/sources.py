from typing import Mapping

from src.catalogue.domain.rules import extract_inner_content
from src.catalogue.fallback import FALLBACK_ICONS
from src.config.logger_config import logger
from src.registry.application.ports import ContentSourcePort, IconFetcherPort
from src.registry.domain.models import TIER_CATALOGUE, TIER_FALLBACK, TIER_REGISTRY, Registry


class RegistrySource(ContentSourcePort):
    tier = TIER_REGISTRY

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def lookup(self, name: str) -> str | None:
        entry = self.registry.lookup(name)
        return entry.content if entry is not None else None

    def identifier_for(self, name: str) -> str | None:
        entry = self.registry.lookup(name)
        return entry.identifier if entry is not None else None


class CatalogueSource(ContentSourcePort):
    tier = TIER_CATALOGUE

    def __init__(self, catalogue: Mapping[str, str]) -> None:
        self.catalogue = catalogue

    def lookup(self, name: str) -> str | None:
        markup = self.catalogue.get(name)
        if markup is None:
            return None
        content = extract_inner_content(markup)
        if content is None:
            logger.warning("Could not extract content for icon '{}', falling through.", name)
        return content


class LiveCatalogueSource(ContentSourcePort):
    tier = TIER_CATALOGUE

    def __init__(self, fetcher: IconFetcherPort) -> None:
        self.fetcher = fetcher

    def lookup(self, name: str) -> str | None:
        markup = self.fetcher.fetch_icon(name)
        if markup is None:
            return None
        content = extract_inner_content(markup)
        if content is None:
            logger.warning("Could not extract live content for icon '{}', falling through.", name)
        return content


class FallbackSetSource(ContentSourcePort):
    tier = TIER_FALLBACK

    def __init__(self, icons: Mapping[str, str] = FALLBACK_ICONS) -> None:
        self.icons = icons

    def lookup(self, name: str) -> str | None:
        return self.icons.get(name)


def as_content_source(live: Mapping[str, str] | ContentSourcePort | IconFetcherPort) -> ContentSourcePort:
    if isinstance(live, ContentSourcePort):
        return live
    if isinstance(live, IconFetcherPort):
        return LiveCatalogueSource(live)
    return CatalogueSource(live)
