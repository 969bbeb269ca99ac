"""Infrastructure adapters for registry artifacts."""

from src.registry.infrastructure.module_emitter import emit_module, write_module
from src.registry.infrastructure.registry_json import JsonRegistrySink, load_registry
from src.registry.infrastructure.svg_markup import IconConfig, render_svg

__all__ = ["emit_module", "IconConfig", "JsonRegistrySink", "load_registry", "render_svg", "write_module"]
