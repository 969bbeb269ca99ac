from typing import Mapping, Sequence

from src.catalogue.fallback import PLACEHOLDER
from src.config.logger_config import logger
from src.registry.application.ports import ContentSourcePort
from src.registry.application.sources import CatalogueSource, FallbackSetSource, RegistrySource
from src.registry.domain.models import TIER_PLACEHOLDER, Resolution


class ContentResolver:
    """Try each content source in order, ending with the placeholder.

    A source that has no data, or raises, falls through to the next one
    immediately; resolution therefore never fails.
    """

    def __init__(self, sources: Sequence[ContentSourcePort], placeholder: str = PLACEHOLDER) -> None:
        self.sources = tuple(sources)
        self.placeholder = placeholder

    def resolve(self, name: str) -> Resolution:
        for source in self.sources:
            try:
                content = source.lookup(name)
            except Exception as exc:
                logger.warning(
                    "Content source {} failed for '{}' with error type {}: {}",
                    type(source).__name__,
                    name,
                    type(exc).__name__,
                    exc,
                )
                continue
            if content is None:
                continue
            identifier = source.identifier_for(name) if isinstance(source, RegistrySource) else None
            return Resolution(name=name, content=content, tier=source.tier, identifier=identifier)

        return Resolution(name=name, content=self.placeholder, tier=TIER_PLACEHOLDER)


def build_resolver(catalogue: Mapping[str, str] | None = None) -> ContentResolver:
    sources: list[ContentSourcePort] = []
    if catalogue is not None:
        sources.append(CatalogueSource(catalogue))
    sources.append(FallbackSetSource())
    return ContentResolver(sources)


def resolve(name: str, catalogue: Mapping[str, str] | None = None) -> str:
    return build_resolver(catalogue).resolve(name).content
