"""Registry models and identifier rules."""

from src.registry.domain.identifiers import (
    is_valid_identifier,
    sanitize_identifier,
    synthesize_identifier,
    to_kebab_case,
    to_pascal_case,
)
from src.registry.domain.models import (
    TIER_CATALOGUE,
    TIER_FALLBACK,
    TIER_PLACEHOLDER,
    TIER_REGISTRY,
    Registry,
    RegistryEntry,
    Resolution,
)

__all__ = [
    "is_valid_identifier",
    "Registry",
    "RegistryEntry",
    "Resolution",
    "sanitize_identifier",
    "synthesize_identifier",
    "TIER_CATALOGUE",
    "TIER_FALLBACK",
    "TIER_PLACEHOLDER",
    "TIER_REGISTRY",
    "to_kebab_case",
    "to_pascal_case",
]
