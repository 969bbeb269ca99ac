import json
import unittest
from unittest.mock import AsyncMock, patch

from src.catalogue.domain.models import SOURCE_CACHE, SOURCE_FALLBACK, SOURCE_NETWORK, CatalogueFetchResult
from src.catalogue.fallback import FALLBACK_ICONS
from src.config.settings import GeneratorSettings
from src.registry.generate import GenerationSummary, run_generate, run_generate_async
from src.registry.infrastructure.registry_json import load_registry
from tests.utils.tempdir import managed_temp_dir


class RunGenerateAsyncTests(unittest.IsolatedAsyncioTestCase):
    async def test_generates_registry_and_module_from_network_catalogue(self):
        fetched = CatalogueFetchResult(
            catalogue={"home": '<svg><path d="M0 0"/></svg>', "2d-rotate": "<svg>r</svg>"},
            source=SOURCE_NETWORK,
        )
        with managed_temp_dir("generate") as tmp:
            settings = GeneratorSettings(output_dir=tmp / "out", module_name="icons", show_progress=False)
            with patch("src.registry.generate.fetch_catalogue_async", new=AsyncMock(return_value=fetched)):
                summary = await run_generate_async(settings=settings)

            self.assertEqual(summary.source, SOURCE_NETWORK)
            self.assertEqual(summary.icon_count, 2)
            self.assertEqual(summary.module_path, tmp / "out" / "icons.py")
            registry = load_registry(summary.registry_path)
            self.assertEqual(registry.identifiers(), ("Icon2dRotate", "Home"))
            source = summary.module_path.read_text(encoding="utf-8")
            self.assertIn("def Home(", source)
            self.assertIn("ICON_COUNT = 2", source)

    async def test_unavailable_catalogue_falls_back_to_bundled_icons(self):
        with managed_temp_dir("generate") as tmp:
            settings = GeneratorSettings(output_dir=tmp / "settings_out", show_progress=False)
            with patch(
                "src.registry.generate.fetch_catalogue_async",
                new=AsyncMock(return_value=CatalogueFetchResult(catalogue=None, source=None)),
            ):
                summary = await run_generate_async(settings=settings, output_dir=tmp / "explicit")

            self.assertEqual(summary.source, SOURCE_FALLBACK)
            self.assertEqual(summary.icon_count, len(FALLBACK_ICONS))
            self.assertEqual(summary.registry_path.parent, tmp / "explicit")
            payload = json.loads(summary.registry_path.read_text(encoding="utf-8"))
            self.assertEqual(
                [icon["identifier"] for icon in payload["icons"]],
                ["Heart", "Home", "Search", "Star", "User"],
            )

    async def test_passes_cache_flags_through(self):
        fetched = CatalogueFetchResult(catalogue={}, source=SOURCE_CACHE)
        with managed_temp_dir("generate") as tmp:
            settings = GeneratorSettings(output_dir=tmp, show_progress=False)
            fetch = AsyncMock(return_value=fetched)
            with patch("src.registry.generate.fetch_catalogue_async", new=fetch):
                summary = await run_generate_async(settings=settings, use_cache=False, offline=True)

        fetch.assert_awaited_once_with(settings=settings, use_cache=False, offline=True)
        self.assertEqual(summary.icon_count, 0)
        self.assertEqual(summary.source, SOURCE_CACHE)


class RunGenerateSyncTests(unittest.TestCase):
    def test_sync_wrapper(self):
        expected = GenerationSummary(source=SOURCE_NETWORK, icon_count=1, registry_path=None, module_path=None)
        with patch("src.registry.generate.run_generate_async", new=AsyncMock(return_value=expected)):
            self.assertEqual(run_generate(), expected)
