import json
from pathlib import Path

from src.registry.domain.models import Registry

REGISTRY_FILENAME = "registry.json"


class JsonRegistrySink:
    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write_registry(self, registry: Registry, filename: str = REGISTRY_FILENAME) -> Path:
        file_path = self.output_dir / filename
        with file_path.open("w", encoding="utf-8") as f:
            json.dump(registry.to_dict(), f, ensure_ascii=False, indent=2)
            f.write("\n")
        return file_path


def load_registry(file_path: str | Path) -> Registry:
    with Path(file_path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Registry file {file_path} does not contain an object.")
    return Registry.from_dict(data)
