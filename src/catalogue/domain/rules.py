import re
from typing import Any

from src.catalogue.domain.models import AssetRecord

DOCUMENT_TAG = "svg"

_DOCUMENT_OPENING = re.compile(rf"<{DOCUMENT_TAG}(?=[\s>/]|$)", re.I)
_DOCUMENT_CLOSING = re.compile(rf"</{DOCUMENT_TAG}\s*>", re.I)


def extract_inner_content(markup: str) -> str | None:
    """Reduce a stored value to the fragment rendered inside the icon element.

    Values wrapped in an ``<svg>`` document yield the text strictly between the
    end of the opening tag and the last closing tag. Values without an
    enclosing document tag are already fragments and are returned unchanged.
    Returns None when the delimiters are missing or out of order.
    """
    opening = _DOCUMENT_OPENING.search(markup)
    if opening is None:
        return markup

    start = markup.find(">", opening.end())
    closings = list(_DOCUMENT_CLOSING.finditer(markup))
    end = closings[-1].start() if closings else -1
    if start == -1 or end == -1 or start >= end:
        return None
    return markup[start + 1 : end]


def icon_name_from_filename(filename: str) -> str | None:
    if not filename.lower().endswith(f".{DOCUMENT_TAG}"):
        return None
    name = filename[: -len(DOCUMENT_TAG) - 1]
    return name or None


def paths_to_fragment(paths: list[Any]) -> str:
    return "".join(f'<path d="{p}"></path>' for p in paths if isinstance(p, str))


def parse_catalogue_payload(data: Any) -> list[AssetRecord]:
    """Parse the object-shaped payload ``{name: {"svg": ...} | {"paths": [...]}}``."""
    if not isinstance(data, dict):
        return []

    records: list[AssetRecord] = []
    for name, icon_data in data.items():
        content = _extract_svg_content(icon_data)
        if content is None:
            continue
        records.append(AssetRecord(raw_name=str(name), content=content))
    return records


def records_to_catalogue(records: list[AssetRecord]) -> dict[str, str]:
    return {record.raw_name: record.content for record in records}


def _extract_svg_content(icon_data: Any) -> str | None:
    if isinstance(icon_data, str):
        return icon_data
    if not isinstance(icon_data, dict):
        return None

    svg = icon_data.get("svg")
    if isinstance(svg, str):
        return svg

    paths = icon_data.get("paths")
    if isinstance(paths, list):
        return paths_to_fragment(paths)

    return None
