import json
import unittest

from src.catalogue.infrastructure.catalogue_cache import JsonCatalogueCache
from tests.utils.tempdir import managed_temp_dir


class JsonCatalogueCacheTests(unittest.TestCase):
    def test_missing_cache_reads_none(self):
        with managed_temp_dir("catalogue_cache") as tmp:
            self.assertIsNone(JsonCatalogueCache(tmp / "absent.json").read())

    def test_write_then_read(self):
        with managed_temp_dir("catalogue_cache") as tmp:
            cache = JsonCatalogueCache(tmp / "nested" / "icons.json")
            path = cache.write({"b": "<svg>b</svg>", "a": "<svg>a</svg>"})
            self.assertEqual(list(json.loads(path.read_text(encoding="utf-8"))), ["a", "b"])
            self.assertEqual(cache.read(), {"a": "<svg>a</svg>", "b": "<svg>b</svg>"})

    def test_corrupt_cache_reads_none(self):
        with managed_temp_dir("catalogue_cache") as tmp:
            path = tmp / "icons.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertIsNone(JsonCatalogueCache(path).read())

    def test_non_string_values_are_dropped(self):
        with managed_temp_dir("catalogue_cache") as tmp:
            path = tmp / "icons.json"
            path.write_text(json.dumps({"a": "<svg/>", "b": 3}), encoding="utf-8")
            self.assertEqual(JsonCatalogueCache(path).read(), {"a": "<svg/>"})

    def test_non_object_cache_reads_none(self):
        with managed_temp_dir("catalogue_cache") as tmp:
            path = tmp / "icons.json"
            path.write_text("[1, 2]", encoding="utf-8")
            self.assertIsNone(JsonCatalogueCache(path).read())
