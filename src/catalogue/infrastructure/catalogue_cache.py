import json
from pathlib import Path

from src.config.logger_config import logger


class JsonCatalogueCache:
    def __init__(self, cache_path: str | Path) -> None:
        self.cache_path = Path(cache_path)

    def read(self) -> dict[str, str] | None:
        if not self.cache_path.is_file():
            return None
        try:
            with self.cache_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable catalogue cache {}: {}", str(self.cache_path), exc)
            return None

        if not isinstance(data, dict):
            logger.warning("Ignoring catalogue cache {} with unexpected shape.", str(self.cache_path))
            return None
        return {str(name): content for name, content in data.items() if isinstance(content, str)}

    def write(self, catalogue: dict[str, str]) -> Path:
        self.cache_path.parent.mkdir(parents=True, exist_ok=True)
        with self.cache_path.open("w", encoding="utf-8") as f:
            json.dump(dict(sorted(catalogue.items())), f, ensure_ascii=False, indent=2)
        return self.cache_path
