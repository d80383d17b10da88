"""HTTP + HTML helpers for lake_level."""

from __future__ import annotations

import requests
from bs4 import BeautifulSoup

from ..errors import ParseDocumentError, TransportError


def fetch_html(client, url: str, encoding: str | None = "utf-8") -> str:
    try:
        res = client.send(url)
    except TransportError:
        raise
    except requests.RequestException as exc:
        raise TransportError(f"failed to fetch {url}: {exc}", context={"url": url}) from exc
    if encoding:
        res.encoding = encoding
    return res.text


def parse_html(html: str, url: str | None = None) -> BeautifulSoup:
    if not isinstance(html, str) or not html.strip():
        raise ParseDocumentError("empty response body", context={"url": url})
    soup = BeautifulSoup(html, "html.parser")
    if soup.find() is None:
        raise ParseDocumentError("response body contains no HTML elements", context={"url": url})
    return soup


def fetch_soup(client, url: str, encoding: str | None = "utf-8") -> BeautifulSoup:
    return parse_html(fetch_html(client, url, encoding), url)
