"""Detail page scraping for lake_level.

A lake's detail page lists its recent history as three parallel tables
(dates, daily minimums, daily maximums) nested in the page's first table.
"""

from __future__ import annotations

from bs4 import Tag

from ..domain.models import LakeRecord, Measurement
from ..errors import StructureError
from ..logger import get_logger
from .scrape_values import parse_date, parse_level

logger = get_logger(__name__)

_SERIES = ("dates", "minimums", "maximums")


def find_detail_tables(soup) -> list[Tag]:
    outer = soup.find("table")
    if outer is None:
        raise StructureError("detail table not found")
    tables = outer.find_all("table")
    if not tables:
        tables = soup.find_all("table")
    if len(tables) < len(_SERIES):
        raise StructureError(
            f"detail page has {len(tables)} tables, expected {len(_SERIES)}",
            context={"tables": len(tables)},
        )
    return tables[: len(_SERIES)]


def extract_cell_texts(table: Tag) -> list[str]:
    return [td.get_text() for td in table.find_all("td")]


def extract_detail(soup) -> list[Measurement]:
    """Pair the i-th date with the i-th minimum and maximum."""
    dates, mins, maxs = (extract_cell_texts(t) for t in find_detail_tables(soup))
    if len(dates) != len(mins) or len(dates) != len(maxs):
        raise StructureError(
            "array size mismatch",
            context=dict(zip(_SERIES, (len(dates), len(mins), len(maxs)))),
        )

    measurements: list[Measurement] = []
    for raw_date, raw_min, raw_max in zip(dates, mins, maxs):
        measurement = Measurement(parse_date(raw_date), parse_level(raw_min), parse_level(raw_max))
        if measurement.minimum > measurement.maximum:
            logger.warning(
                "minimum above maximum on %s: %s > %s (raw %r / %r)",
                measurement.key, measurement.minimum, measurement.maximum, raw_min, raw_max,
            )
        measurements.append(measurement)
    return measurements


def merge_measurements(record: LakeRecord, measurements: list[Measurement]) -> LakeRecord:
    for measurement in measurements:
        record.put(measurement)
    return record
