"""Icon registry generation and runtime dispatch."""

from src.registry.application import build_registry, create_dispatcher, dispatch, resolve
from src.registry.domain.models import Registry, RegistryEntry, Resolution

__all__ = [
    "build_registry",
    "create_dispatcher",
    "dispatch",
    "Registry",
    "RegistryEntry",
    "resolve",
    "Resolution",
]
