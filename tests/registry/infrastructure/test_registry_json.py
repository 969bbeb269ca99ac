import json
import unittest

from src.registry.application.builder import build_registry
from src.registry.infrastructure.registry_json import JsonRegistrySink, load_registry
from tests.utils.tempdir import managed_temp_dir


class JsonRegistrySinkTests(unittest.TestCase):
    def test_write_and_load_registry(self):
        registry = build_registry({"b-icon": "<svg>b</svg>", "a-icon": "<svg>ä</svg>"})
        with managed_temp_dir("registry_json") as tmp:
            path = JsonRegistrySink(tmp / "out").write_registry(registry)
            self.assertEqual(path.name, "registry.json")

            payload = json.loads(path.read_text(encoding="utf-8"))
            self.assertEqual(payload["count"], 2)
            self.assertEqual(payload["icons"][0], {"raw_name": "a-icon", "identifier": "AIcon", "content": "ä"})
            self.assertEqual(load_registry(path), registry)

    def test_repeated_writes_are_byte_identical(self):
        catalogue = {"x": "<svg>1</svg>", "y": "<svg>2</svg>"}
        with managed_temp_dir("registry_json") as tmp:
            first = JsonRegistrySink(tmp / "one").write_registry(build_registry(catalogue)).read_bytes()
            second = JsonRegistrySink(tmp / "two").write_registry(build_registry(dict(reversed(catalogue.items())))).read_bytes()
        self.assertEqual(first, second)

    def test_load_rejects_non_object(self):
        with managed_temp_dir("registry_json") as tmp:
            path = tmp / "registry.json"
            path.write_text("[]", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_registry(path)
