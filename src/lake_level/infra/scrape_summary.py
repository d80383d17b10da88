"""Overview table scraping for lake_level.

The overview page carries one table: a header row whose 3rd and 4th cells are
the two most recent dates, then one row per lake::

    | Lac | Niveau max | <D.M.YYYY> | <D.M.YYYY> |
    | La Gruyère* | 677.00 msm | 675.12 msm | 675.10 msm |
"""

from __future__ import annotations

import re

from bs4 import Tag

from ..domain.models import LakeCollection, LakeRecord, Measurement
from ..errors import StructureError
from .scrape_values import parse_date, parse_level

NAME_MARKERS = re.compile(r"[*]")

_DATE_COLUMNS = (2, 3)
_MIN_COLUMNS = 4


def clean_lake_name(raw: str) -> str:
    return NAME_MARKERS.sub("", raw.strip()).strip()


def find_summary_table(soup) -> Tag:
    table = soup.find("table")
    if table is None:
        raise StructureError("summary table not found")
    return table


def header_cells(table: Tag) -> list[Tag]:
    cells = table.select("thead tr th")
    if not cells:
        first_row = table.find("tr")
        cells = first_row.find_all("th") if first_row is not None else []
    return cells


def body_rows(table: Tag) -> list[Tag]:
    if table.find("tbody") is not None:
        return table.select("tbody tr")
    return [
        tr for tr in table.find_all("tr")
        if tr.find_parent("thead") is None and not tr.find_all("th")
    ]


def _cell_text(cell: Tag) -> str:
    return cell.get_text().strip()


def extract_summary(soup) -> LakeCollection:
    """Build one record per overview row, each holding the two header-dated readings."""
    table = find_summary_table(soup)

    headers = header_cells(table)
    if len(headers) < _MIN_COLUMNS:
        raise StructureError(
            f"summary header has {len(headers)} cells, expected at least {_MIN_COLUMNS}",
            context={"headers": [_cell_text(h) for h in headers]},
        )
    dates = [parse_date(_cell_text(headers[i])) for i in _DATE_COLUMNS]

    result = LakeCollection()
    for index, row in enumerate(body_rows(table)):
        cells = row.find_all("td")
        if len(cells) < _MIN_COLUMNS:
            raise StructureError(
                f"summary row {index} has {len(cells)} cells, expected at least {_MIN_COLUMNS}",
                context={"row": index},
            )
        record = LakeRecord(
            name=clean_lake_name(cells[0].get_text()),
            capacity_level=parse_level(_cell_text(cells[1])),
        )
        for day, column in zip(dates, _DATE_COLUMNS):
            level = parse_level(_cell_text(cells[column]))
            record.put(Measurement(day, level, level))
        result.add(record)
    return result
