from typing import Mapping

from src.config.logger_config import logger
from src.registry.application.resolver import build_resolver
from src.registry.domain.identifiers import synthesize_identifier
from src.registry.domain.models import TIER_CATALOGUE, Registry, RegistryEntry


def build_registry(catalogue: Mapping[str, str]) -> Registry:
    """Build the registry for ``catalogue`` in lexicographic raw-name order."""
    resolver = build_resolver(catalogue)
    used: set[str] = set()
    entries: list[RegistryEntry] = []
    degraded = 0

    for raw_name in sorted(catalogue):
        resolution = resolver.resolve(raw_name)
        if resolution.tier != TIER_CATALOGUE:
            degraded += 1
        entries.append(
            RegistryEntry(
                raw_name=raw_name,
                identifier=synthesize_identifier(raw_name, used),
                content=resolution.content,
            )
        )

    registry = Registry(entries=tuple(entries))
    if degraded:
        logger.warning("{} icons had unusable content and were filled from fallbacks.", degraded)
    logger.info("Built registry with {} icons.", registry.count)
    return registry
