"""Fetch flow for lake_level."""

from __future__ import annotations

from typing import Optional, Protocol

from ..config import SourceConfig
from ..domain.models import LakeCollection
from ..infra.http_html import fetch_soup
from ..infra.scrape_detail import extract_detail, merge_measurements
from ..infra.scrape_summary import extract_summary
from ..logger import get_logger

logger = get_logger(__name__)


class HttpClient(Protocol):
    def send(self, url: str):
        ...


class LevelFetchService:
    """Scrapes the overview page, then the detail page of every lake that has one."""

    def __init__(self, client: HttpClient, config: Optional[SourceConfig] = None) -> None:
        self._client = client
        self._config = config or SourceConfig()

    def fetch(self) -> LakeCollection:
        config = self._config
        logger.info("fetching lake levels from %s", config.overview_url)
        soup = fetch_soup(self._client, config.overview_url, config.encoding)
        lakes = extract_summary(soup)

        for name, record in lakes.items():
            url = config.detail_url(name)
            if url is None:
                continue
            logger.info("fetching detail page for %s: %s", name, url)
            detail_soup = fetch_soup(self._client, url, config.encoding)
            merge_measurements(record, extract_detail(detail_soup))

        logger.info(
            "fetched %d lakes (%d measurements)",
            len(lakes),
            sum(len(r.measurements) for r in lakes.values()),
        )
        return lakes


def get_level(client: HttpClient, config: Optional[SourceConfig] = None) -> LakeCollection:
    """Return the level of all lakes.

    Any transport, document, structure or date failure aborts the whole call.
    """
    return LevelFetchService(client, config).fetch()
