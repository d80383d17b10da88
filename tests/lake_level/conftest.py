from dataclasses import dataclass

import pytest
import requests

OVERVIEW_URL = "https://example.test/niveau-lacs"
GRUYERE_URL = "https://example.test/niveau-lacs/gruyere"
SCHIFFENEN_URL = "https://example.test/niveau-lacs/schiffenen"


def summary_html(dates, rows, thead=True):
    """Overview page with one table: header dates in columns 3 and 4."""
    header = "<tr><th>Lac</th><th>Niveau max</th>" + "".join(f"<th> {d} </th>" for d in dates) + "</tr>"
    body = "".join("<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>" for row in rows)
    if thead:
        table = f"<table><thead>{header}</thead><tbody>{body}</tbody></table>"
    else:
        table = f"<table>{header}{body}</table>"
    return f"<html><body><h1>Niveau des lacs</h1>{table}</body></html>"


def detail_html(dates, mins, maxs):
    """Detail page: one outer table holding the date/min/max tables side by side."""

    def column(values):
        return "<table>" + "".join(f"<tr><td>\n {v} \n</td></tr>" for v in values) + "</table>"

    inner = "".join(f"<td>{column(v)}</td>" for v in (dates, mins, maxs))
    return f"<html><body><table><tr>{inner}</tr></table></body></html>"


@dataclass
class DummyResponse:
    text: str
    status_code: int = 200
    encoding: str | None = None

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")


class StubClient:
    """Returns the canned page (or raises the canned exception) for each URL."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def send(self, url):
        self.calls.append(url)
        try:
            payload = self.pages[url]
        except KeyError:
            raise AssertionError(f"unexpected request: {url}")
        if isinstance(payload, Exception):
            raise payload
        return DummyResponse(payload)


@pytest.fixture()
def source_config():
    from lake_level.config import SourceConfig

    return SourceConfig(
        overview_url=OVERVIEW_URL,
        detail_pages={"La Gruyère": GRUYERE_URL, "Schiffenen": SCHIFFENEN_URL},
    )


@pytest.fixture()
def stub_client_factory():
    def _factory(pages):
        return StubClient(pages)

    return _factory


@pytest.fixture()
def make_summary_html():
    return summary_html


@pytest.fixture()
def make_detail_html():
    return detail_html
