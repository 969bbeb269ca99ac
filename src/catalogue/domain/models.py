from dataclasses import dataclass
from typing import Mapping

Catalogue = Mapping[str, str]

SOURCE_NETWORK = "network"
SOURCE_CACHE = "cache"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class AssetRecord:
    raw_name: str
    content: str


@dataclass(frozen=True)
class CatalogueFetchResult:
    catalogue: dict[str, str] | None
    source: str | None

    @property
    def available(self) -> bool:
        return self.catalogue is not None
