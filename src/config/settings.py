# Generator configuration, read from the environment (and .env if present).

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.github.com/repos/lucide-icons/lucide/contents/icons"
DEFAULT_RAW_BASE_URL = "https://raw.githubusercontent.com/lucide-icons/lucide/main/icons"
DEFAULT_CACHE_PATH = Path("artifacts/cache/lucide_icons.json")
DEFAULT_OUTPUT_DIR = Path("artifacts/generated")
DEFAULT_MODULE_NAME = "lucide_icons"


@dataclass(frozen=True)
class GeneratorSettings:
    api_url: str = DEFAULT_API_URL
    raw_base_url: str = DEFAULT_RAW_BASE_URL
    github_token: str | None = None
    http_timeout_seconds: float = 45.0
    retries: int = 3
    download_concurrency: int = 8
    cache_path: Path = DEFAULT_CACHE_PATH
    output_dir: Path = DEFAULT_OUTPUT_DIR
    module_name: str = DEFAULT_MODULE_NAME
    show_progress: bool = True


def load_settings(env_file: str | Path | None = None) -> GeneratorSettings:
    load_dotenv(dotenv_path=env_file)
    return GeneratorSettings(
        api_url=os.getenv("LUCIDE_API_URL", DEFAULT_API_URL),
        raw_base_url=os.getenv("LUCIDE_RAW_BASE_URL", DEFAULT_RAW_BASE_URL),
        github_token=os.getenv("GITHUB_TOKEN") or None,
        http_timeout_seconds=_env_float("LUCIDE_HTTP_TIMEOUT", 45.0),
        retries=max(1, _env_int("LUCIDE_RETRIES", 3)),
        download_concurrency=max(1, _env_int("LUCIDE_DOWNLOAD_CONCURRENCY", 8)),
        cache_path=Path(os.getenv("LUCIDE_CACHE_PATH", str(DEFAULT_CACHE_PATH))),
        output_dir=Path(os.getenv("LUCIDE_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))),
        module_name=os.getenv("LUCIDE_MODULE_NAME", DEFAULT_MODULE_NAME),
        show_progress=_env_bool("LUCIDE_SHOW_PROGRESS", True),
    )


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")
