import ast
from pathlib import Path

from src.registry.domain.identifiers import is_valid_identifier
from src.registry.domain.models import Registry

MODULE_HEADER = '''"""Lucide icon accessors.

Generated by ``python -m src.registry``; do not edit by hand.
"""

from src.registry.application.dispatcher import Dispatcher
from src.registry.domain.models import Registry, RegistryEntry
from src.registry.infrastructure.svg_markup import IconConfig, render_svg
'''

MODULE_FOOTER = '''

_dispatcher = Dispatcher(REGISTRY)


def load_icon(name: str, config: IconConfig | None = None) -> str:
    """Render any icon by name, falling back to bundled icons or a placeholder."""
    resolution = _dispatcher.dispatch(name)
    return render_svg(resolution.name, resolution.content, config)
'''


def emit_module(registry: Registry) -> str:
    """Generate the source of a Python module with one accessor per registry entry."""
    lines = [MODULE_HEADER, "REGISTRY = Registry(", "    entries=("]
    for entry in registry:
        lines.append(
            f"        RegistryEntry(raw_name={entry.raw_name!r}, identifier={entry.identifier!r}, "
            f"content={entry.content!r}),"
        )
    lines.extend(["    )", ")", "", f"ICON_COUNT = {registry.count}"])

    for entry in registry:
        if not is_valid_identifier(entry.identifier):
            raise ValueError(f"Cannot emit accessor for invalid identifier {entry.identifier!r}")
        lines.extend(
            [
                "",
                "",
                f"def {entry.identifier}(config: IconConfig | None = None) -> str:",
                f"    return render_svg({entry.raw_name!r}, REGISTRY.lookup({entry.raw_name!r}).content, config)",
            ]
        )

    source = "\n".join(lines) + "\n" + MODULE_FOOTER
    try:
        ast.parse(source)
    except SyntaxError as exc:
        raise ValueError(f"Generated module is not valid Python: {exc}") from exc
    return source


def write_module(registry: Registry, file_path: str | Path) -> Path:
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    source = emit_module(registry)
    with path.open("w", encoding="utf-8") as f:
        f.write(source)
    return path
