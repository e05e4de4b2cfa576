"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from revision_queries.resources import ResourceLocator


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class ResourceConfig:
    """Where fixtures are read from. Empty means the bundled fixtures."""

    fixtures_dir: str = field(default_factory=lambda: _env("REVISION_QUERIES_FIXTURES_DIR"))

    def locator(self) -> ResourceLocator:
        if self.fixtures_dir:
            return ResourceLocator(self.fixtures_dir)
        return ResourceLocator.bundled()


@dataclass(frozen=True)
class AppConfig:
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))


@dataclass(frozen=True)
class Settings:
    resources: ResourceConfig = field(default_factory=ResourceConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
