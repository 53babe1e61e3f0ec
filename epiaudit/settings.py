"""Runtime settings: environment profiles, layered sources, logging setup.

Usage::

    from epiaudit.settings import ConfigManager

    manager = ConfigManager()
    settings = manager.load_settings(".")
    manager.configure_logging(settings)

Sources are merged in order, later ones winning: key defaults, the
``EPIAUDIT_ENV`` profile, ``.epiaudit/config.json``, ``.env``, then process
environment variables.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import NamedTuple

from pydantic import BaseModel, Field, field_validator

from epiaudit.config import CONFIG_DIR

logger = logging.getLogger(__name__)


class ConfigKey(NamedTuple):
    name: str
    default: str
    description: str


CONFIG_KEYS: tuple[ConfigKey, ...] = (
    ConfigKey("EPIAUDIT_ENV", "development", "Profile: development, production or testing"),
    ConfigKey("EPIAUDIT_LOG_LEVEL", "INFO", "Level for the epiaudit logger"),
    ConfigKey("EPIAUDIT_PIPELINE_LATENCY", "0", "Simulated ingestion delay, seconds"),
    ConfigKey("EPIAUDIT_SEED_SAMPLES", "false", "Ingest the sample audits at startup"),
)

PROFILES: dict[str, dict[str, str]] = {
    "development": {
        "EPIAUDIT_LOG_LEVEL": "DEBUG",
        "EPIAUDIT_SEED_SAMPLES": "true",
    },
    "production": {
        "EPIAUDIT_LOG_LEVEL": "WARNING",
    },
    "testing": {
        "EPIAUDIT_LOG_LEVEL": "DEBUG",
        "EPIAUDIT_PIPELINE_LATENCY": "0",
        "EPIAUDIT_SEED_SAMPLES": "false",
    },
}

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})


class Settings(BaseModel):
    """Typed view of the merged configuration."""

    env: str = "development"
    log_level: int = logging.INFO
    pipeline_latency: float = Field(default=0.0, ge=0)
    seed_samples: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, value: object) -> int:
        if isinstance(value, int):
            return value
        level = logging.getLevelName(str(value).strip().upper())
        return level if isinstance(level, int) else logging.INFO

    @field_validator("pipeline_latency", mode="before")
    @classmethod
    def parse_latency(cls, value: object) -> float:
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric EPIAUDIT_PIPELINE_LATENCY=%r", value)
            return 0.0
        return max(seconds, 0.0)

    @field_validator("seed_samples", mode="before")
    @classmethod
    def parse_seed_flag(cls, value: object) -> bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in _TRUE_WORDS

    @classmethod
    def from_config(cls, config: dict[str, str]) -> Settings:
        return cls(
            env=config.get("EPIAUDIT_ENV", "development"),
            log_level=config.get("EPIAUDIT_LOG_LEVEL", "INFO"),
            pipeline_latency=config.get("EPIAUDIT_PIPELINE_LATENCY", "0"),
            seed_samples=config.get("EPIAUDIT_SEED_SAMPLES", "false"),
        )


class ConfigManager:
    """Merge configuration sources for a project directory."""

    def generate_env_template(self, project_path: str | Path) -> Path:
        """Write ``.env.example`` listing every key with its default."""
        target = Path(project_path) / ".env.example"
        blocks = [
            f"# {key.description}\n{key.name}={key.default}\n" for key in CONFIG_KEYS
        ]
        header = "# epiaudit settings; copy to .env to override profile values\n\n"
        target.write_text(header + "\n".join(blocks), encoding="utf-8")
        return target

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    @staticmethod
    def _read_json(path: Path) -> dict[str, str]:
        if not path.is_file():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            logger.debug("Skipping unreadable %s", path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.debug("Skipping %s: top level is not an object", path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    @staticmethod
    def _read_dotenv(path: Path) -> dict[str, str]:
        if not path.is_file():
            return {}
        values: dict[str, str] = {}
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            logger.debug("Skipping unreadable %s", path, exc_info=True)
            return {}
        for raw in text.splitlines():
            entry = raw.strip()
            if entry.startswith("#") or "=" not in entry:
                continue
            name, _, value = entry.partition("=")
            values[name.strip()] = value.strip()
        return values

    @staticmethod
    def _read_environ() -> dict[str, str]:
        return {key.name: os.environ[key.name] for key in CONFIG_KEYS if key.name in os.environ}

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def load_config(self, project_path: str | Path = ".") -> dict[str, str]:
        """Merged raw string values for every known and file-supplied key.

        The profile is chosen by the highest-priority source that names one.
        """
        root = Path(project_path)
        sources = [
            self._read_json(root / CONFIG_DIR / "config.json"),
            self._read_dotenv(root / ".env"),
            self._read_environ(),
        ]

        merged = {key.name: key.default for key in CONFIG_KEYS}
        for source in sources:
            merged["EPIAUDIT_ENV"] = source.get("EPIAUDIT_ENV", merged["EPIAUDIT_ENV"])
        profile = PROFILES.get(merged["EPIAUDIT_ENV"])
        if profile is None:
            logger.warning("Unknown EPIAUDIT_ENV %r; using key defaults", merged["EPIAUDIT_ENV"])
        else:
            merged.update(profile)

        for source in sources:
            merged.update(source)
        return merged

    def load_settings(self, project_path: str | Path = ".") -> Settings:
        """Merged configuration parsed into typed settings."""
        settings = Settings.from_config(self.load_config(project_path))
        logger.debug("Loaded settings for %s: %s", project_path, settings)
        return settings

    @staticmethod
    def configure_logging(settings: Settings) -> None:
        """Apply the configured level to the package logger."""
        logging.getLogger("epiaudit").setLevel(settings.log_level)
