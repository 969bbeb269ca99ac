"""Catalogue records and deterministic content rules."""

from src.catalogue.domain.models import AssetRecord, Catalogue, CatalogueFetchResult
from src.catalogue.domain.rules import (
    extract_inner_content,
    icon_name_from_filename,
    parse_catalogue_payload,
    records_to_catalogue,
)

__all__ = [
    "AssetRecord",
    "Catalogue",
    "CatalogueFetchResult",
    "extract_inner_content",
    "icon_name_from_filename",
    "parse_catalogue_payload",
    "records_to_catalogue",
]
