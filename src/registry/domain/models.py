from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping

TIER_REGISTRY = "registry"
TIER_CATALOGUE = "catalogue"
TIER_FALLBACK = "fallback"
TIER_PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class RegistryEntry:
    raw_name: str
    identifier: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "raw_name": self.raw_name,
            "identifier": self.identifier,
            "content": self.content,
        }


@dataclass(frozen=True)
class Registry:
    """Immutable, ordered table of generated icon entries.

    Raw names and identifiers are each unique across the table; a duplicate of
    either is rejected at construction.
    """

    entries: tuple[RegistryEntry, ...] = ()
    _by_name: Mapping[str, RegistryEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        by_name: dict[str, RegistryEntry] = {}
        identifiers: set[str] = set()
        for entry in entries:
            if entry.raw_name in by_name:
                raise ValueError(f"Duplicate raw name in registry: {entry.raw_name!r}")
            if entry.identifier in identifiers:
                raise ValueError(f"Duplicate identifier in registry: {entry.identifier!r}")
            by_name[entry.raw_name] = entry
            identifiers.add(entry.identifier)
        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "_by_name", MappingProxyType(by_name))

    @property
    def count(self) -> int:
        return len(self.entries)

    def lookup(self, raw_name: str) -> RegistryEntry | None:
        return self._by_name.get(raw_name)

    def identifiers(self) -> tuple[str, ...]:
        return tuple(entry.identifier for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self.entries)

    def __contains__(self, raw_name: object) -> bool:
        return raw_name in self._by_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "icons": [entry.to_dict() for entry in self.entries],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Registry":
        icons = data.get("icons", [])
        if not isinstance(icons, list):
            raise ValueError("Registry payload 'icons' must be a list.")
        entries: list[RegistryEntry] = []
        for index, item in enumerate(icons):
            try:
                entries.append(
                    RegistryEntry(
                        raw_name=str(item["raw_name"]),
                        identifier=str(item["identifier"]),
                        content=str(item["content"]),
                    )
                )
            except (KeyError, TypeError) as exc:
                raise ValueError(f"Malformed registry icon at index {index}: {exc!r}") from exc
        return cls(entries=tuple(entries))


@dataclass(frozen=True)
class Resolution:
    name: str
    content: str
    tier: str
    identifier: str | None = None

    @property
    def matched(self) -> bool:
        return self.tier != TIER_PLACEHOLDER
