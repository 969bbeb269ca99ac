import json
import unittest

from src.catalogue.fallback import FALLBACK_ICONS, PLACEHOLDER
from src.registry.application.builder import build_registry
from src.registry.domain.identifiers import is_valid_identifier


class BuildRegistryTests(unittest.TestCase):
    def test_home_scenario(self):
        registry = build_registry({"home": '<svg><path d="M0 0"/></svg>'})
        self.assertEqual(registry.count, 1)
        entry = registry.entries[0]
        self.assertEqual(entry.raw_name, "home")
        self.assertEqual(entry.identifier, "Home")
        self.assertEqual(entry.content, '<path d="M0 0"/>')

    def test_collision_assigns_counter_in_lexicographic_order(self):
        registry = build_registry({"foo-bar": "<svg>2</svg>", "foo bar": "<svg>1</svg>"})
        self.assertEqual(
            [(entry.raw_name, entry.identifier) for entry in registry],
            [("foo bar", "FooBar"), ("foo-bar", "FooBar2")],
        )

    def test_output_is_independent_of_input_order(self):
        names = ["zap", "2d-rotate", "foo-bar", "foo bar", "none", "heading-1", "a"]
        forward = {name: f"<svg>{name}</svg>" for name in names}
        backward = {name: f"<svg>{name}</svg>" for name in reversed(names)}

        first = json.dumps(build_registry(forward).to_dict())
        second = json.dumps(build_registry(backward).to_dict())
        self.assertEqual(first, second)

    def test_count_matches_catalogue_and_identifiers_are_unique_and_valid(self):
        catalogue = {name: "<svg></svg>" for name in ["a-b", "a b", "a_b", "A-B", "1", "class", "", "x+y"]}
        registry = build_registry(catalogue)
        self.assertEqual(registry.count, len(catalogue))
        identifiers = registry.identifiers()
        self.assertEqual(len(identifiers), len(set(identifiers)))
        self.assertTrue(all(is_valid_identifier(identifier) for identifier in identifiers))

    def test_empty_catalogue_gives_empty_registry(self):
        registry = build_registry({})
        self.assertEqual(registry.count, 0)
        self.assertEqual(registry.entries, ())

    def test_unusable_content_is_filled_from_fallbacks(self):
        registry = build_registry({"home": "<svg>broken", "mystery": "<svg>broken"})
        self.assertEqual(registry.lookup("home").content, FALLBACK_ICONS["home"])
        self.assertEqual(registry.lookup("mystery").content, PLACEHOLDER)
        self.assertEqual(registry.count, 2)
