from typing import Protocol, runtime_checkable


@runtime_checkable
class ContentSourcePort(Protocol):
    tier: str

    def lookup(self, name: str) -> str | None:
        """Return the content fragment for ``name``, or None when this source has no data."""


@runtime_checkable
class IconFetcherPort(Protocol):
    def fetch_icon(self, name: str) -> str | None:
        """Fetch the raw markup for one icon, or None when unavailable."""
