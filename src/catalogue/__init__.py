"""Catalogue acquisition package."""

from src.catalogue.fallback import FALLBACK_ICONS, PLACEHOLDER
from src.catalogue.fetch import fetch_catalogue, fetch_catalogue_async

__all__ = ["FALLBACK_ICONS", "PLACEHOLDER", "fetch_catalogue", "fetch_catalogue_async"]
