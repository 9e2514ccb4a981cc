"""Runtime settings from environment variables (optionally loaded from .env)."""

import os
from dataclasses import dataclass
from pathlib import Path

_API_DIR = Path(__file__).resolve().parent

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

_FALSE_VALUES = {"0", "false", "no", "off"}


def _env(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_path(name: str, default: Path) -> Path:
    path = os.environ.get(name, "").strip()
    if path:
        return Path(path).resolve()
    return default


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    assets_dir: Path = _API_DIR / "assets"
    templates_dir: Path = _API_DIR / "templates"
    seed: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from CONTACTS_* and LOG_LEVEL. Raises ValueError on a bad port."""
        raw_port = _env("CONTACTS_PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"CONTACTS_PORT must be an integer, got {raw_port!r}") from None
        return cls(
            host=_env("CONTACTS_HOST", DEFAULT_HOST),
            port=port,
            assets_dir=_env_path("CONTACTS_ASSETS_DIR", cls.assets_dir),
            templates_dir=_env_path("CONTACTS_TEMPLATES_DIR", cls.templates_dir),
            seed=_env("CONTACTS_SEED", "1").lower() not in _FALSE_VALUES,
            log_level=_env("LOG_LEVEL", "INFO").upper(),
        )
