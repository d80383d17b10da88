"""Scrape Groupe E lake water levels from the operator's web pages."""

from .config import SourceConfig, load_config, load_source_config
from .domain.models import LakeCollection, LakeRecord, Measurement
from .errors import (
    DateParseError,
    LakeLevelError,
    ParseDocumentError,
    StructureError,
    TransportError,
)
from .service.fetch import get_level

__all__ = [
    "DateParseError",
    "LakeCollection",
    "LakeLevelError",
    "LakeRecord",
    "Measurement",
    "ParseDocumentError",
    "SourceConfig",
    "StructureError",
    "TransportError",
    "get_level",
    "load_config",
    "load_source_config",
]
