from dataclasses import dataclass
from html import escape

from src.registry.domain.identifiers import to_kebab_case

BASE_CLASS = "lucide-icon"


@dataclass(frozen=True)
class IconConfig:
    class_name: str | None = None
    style: str | None = None
    size: str | None = None
    stroke_width: str | None = None
    stroke: str | None = None
    fill: str | None = None


def render_svg(name: str, content: str, config: IconConfig | None = None) -> str:
    """Wrap an inner fragment in the standard 24x24 Lucide ``<svg>`` element."""
    config = config or IconConfig()
    size = config.size or "24"
    classes = BASE_CLASS if not config.class_name else f"{BASE_CLASS} {config.class_name}"

    attributes = [
        ("class", classes),
        ("xmlns", "http://www.w3.org/2000/svg"),
        ("width", size),
        ("height", size),
        ("viewBox", "0 0 24 24"),
        ("fill", config.fill or "none"),
        ("stroke", config.stroke or "currentColor"),
        ("stroke-width", config.stroke_width or "2"),
        ("stroke-linecap", "round"),
        ("stroke-linejoin", "round"),
        ("data-lucide", to_kebab_case(name)),
    ]
    if config.style:
        attributes.append(("style", config.style))

    rendered = " ".join(f'{key}="{escape(value, quote=True)}"' for key, value in attributes)
    return f"<svg {rendered}>{content}</svg>"
