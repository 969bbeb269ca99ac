"""Infrastructure adapters for catalogue acquisition."""

from src.catalogue.infrastructure.catalogue_cache import JsonCatalogueCache
from src.catalogue.infrastructure.lucide_client import LucideCatalogueClient

__all__ = ["JsonCatalogueCache", "LucideCatalogueClient"]
