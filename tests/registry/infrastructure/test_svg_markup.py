import unittest

from src.registry.infrastructure.svg_markup import IconConfig, render_svg


class RenderSvgTests(unittest.TestCase):
    def test_default_attributes(self):
        markup = render_svg("arrow left", "<path/>")
        self.assertTrue(markup.startswith('<svg class="lucide-icon" xmlns="http://www.w3.org/2000/svg"'))
        self.assertIn('width="24" height="24"', markup)
        self.assertIn('viewBox="0 0 24 24"', markup)
        self.assertIn('fill="none" stroke="currentColor" stroke-width="2"', markup)
        self.assertIn('data-lucide="arrow-left"', markup)
        self.assertTrue(markup.endswith("><path/></svg>"))
        self.assertNotIn("style=", markup)

    def test_config_overrides_and_escaping(self):
        config = IconConfig(
            class_name="text-blue-500",
            style='color: "red"',
            size="32px",
            stroke_width="1.5",
            stroke="#000",
            fill="white",
        )
        markup = render_svg("home", "<path/>", config)
        self.assertIn('class="lucide-icon text-blue-500"', markup)
        self.assertIn('width="32px" height="32px"', markup)
        self.assertIn('fill="white" stroke="#000" stroke-width="1.5"', markup)
        self.assertIn('style="color: &quot;red&quot;"', markup)
