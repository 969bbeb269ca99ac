"""Resolution, registry building and runtime dispatch."""

from src.registry.application.builder import build_registry
from src.registry.application.dispatcher import Dispatcher, create_dispatcher, dispatch
from src.registry.application.resolver import ContentResolver, build_resolver, resolve

__all__ = [
    "build_registry",
    "build_resolver",
    "ContentResolver",
    "create_dispatcher",
    "dispatch",
    "Dispatcher",
    "resolve",
]
