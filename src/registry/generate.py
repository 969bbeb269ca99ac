from __future__ import annotations
import asyncio
from dataclasses import dataclass
from pathlib import Path

from src.catalogue.domain.models import SOURCE_FALLBACK
from src.catalogue.fallback import FALLBACK_ICONS
from src.catalogue.fetch import fetch_catalogue_async
from src.config.logger_config import logger
from src.config.settings import GeneratorSettings, load_settings
from src.registry.application.builder import build_registry
from src.registry.infrastructure.module_emitter import write_module
from src.registry.infrastructure.registry_json import JsonRegistrySink


@dataclass(frozen=True)
class GenerationSummary:
    source: str
    icon_count: int
    registry_path: Path
    module_path: Path


async def run_generate_async(
    *,
    settings: GeneratorSettings | None = None,
    output_dir: str | Path | None = None,
    use_cache: bool = True,
    offline: bool = False,
) -> GenerationSummary:
    settings = settings or load_settings()
    output_path = Path(output_dir) if output_dir is not None else settings.output_dir

    fetched = await fetch_catalogue_async(settings=settings, use_cache=use_cache, offline=offline)
    if fetched.catalogue is not None:
        catalogue = fetched.catalogue
        source = fetched.source
    else:
        logger.warning("Could not fetch latest Lucide icons, using {} bundled fallback icons.", len(FALLBACK_ICONS))
        catalogue = dict(FALLBACK_ICONS)
        source = SOURCE_FALLBACK

    registry = build_registry(catalogue)
    registry_path = JsonRegistrySink(output_path).write_registry(registry)
    module_path = write_module(registry, output_path / f"{settings.module_name}.py")
    logger.info(
        "Generated {} icon accessors from {} into {}",
        registry.count,
        source,
        str(module_path),
    )
    return GenerationSummary(
        source=source,
        icon_count=registry.count,
        registry_path=registry_path,
        module_path=module_path,
    )


def run_generate(
    *,
    settings: GeneratorSettings | None = None,
    output_dir: str | Path | None = None,
    use_cache: bool = True,
    offline: bool = False,
) -> GenerationSummary:
    return asyncio.run(
        run_generate_async(
            settings=settings,
            output_dir=output_dir,
            use_cache=use_cache,
            offline=offline,
        )
    )
