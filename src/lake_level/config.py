"""Configuration loading for lake_level."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

import yaml

from .logger import get_logger, setup_logging

logger = get_logger(__name__)

OVERVIEW_URL = "https://www.groupe-e.ch/fr/univers-groupe-e/niveau-lacs"

# lakes whose detail page carries the daily min/max history
DETAIL_PAGES: Mapping[str, str] = MappingProxyType({
    "La Gruyère": f"{OVERVIEW_URL}/gruyere",
    "Schiffenen": f"{OVERVIEW_URL}/schiffenen",
})


@dataclass(frozen=True)
class SourceConfig:
    overview_url: str = OVERVIEW_URL
    detail_pages: Mapping[str, str] = field(default_factory=lambda: DETAIL_PAGES)
    encoding: str = "utf-8"

    def detail_url(self, lake_name: str) -> str | None:
        return self.detail_pages.get(lake_name)


def get_default_config_path() -> Path:
    """Return the config file shipped with the package."""

    return Path(__file__).parent / "config.yml"


def load_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    """Load configuration data, tolerating missing files."""

    if config_path is None:
        config_path = get_default_config_path()
    else:
        config_path = Path(config_path)

    try:
        with config_path.open("r", encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}
        logger.info("loaded config: %s", config_path)
        return config
    except FileNotFoundError:
        logger.warning("config file not found, using defaults: %s", config_path)
        return {}
    except yaml.YAMLError as exc:
        logger.error("config file could not be parsed: %s", exc)
        raise


def load_source_config(config: Mapping[str, Any] | None = None) -> SourceConfig:
    """Build a SourceConfig from the ``source`` section of config.yml."""

    if config is None:
        config = load_config()
    source = (config or {}).get("source", {}) or {}
    detail_pages = source.get("detail_pages")
    return SourceConfig(
        overview_url=source.get("overview_url", OVERVIEW_URL),
        detail_pages=MappingProxyType(dict(detail_pages)) if detail_pages is not None else DETAIL_PAGES,
        encoding=source.get("encoding", "utf-8"),
    )


def apply_logging_config(config: Mapping[str, Any] | None = None) -> None:
    """Reconfigure logging from the ``logging`` section of config.yml."""

    if config is None:
        config = load_config()
    setup_logging((config or {}).get("logging"))
