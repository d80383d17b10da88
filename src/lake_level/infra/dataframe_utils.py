"""DataFrame builders for lake_level."""

from __future__ import annotations

import pandas as pd

from ..domain.models import LakeCollection, LakeRecord

_COLUMNS = ["date", "minimum", "maximum"]


def build_measurement_dataframe(record: LakeRecord) -> pd.DataFrame:
    """Measurements of one lake as a date-indexed frame, oldest first."""
    rows = [[m.date, m.minimum, m.maximum] for m in record.sorted_measurements()]
    df = pd.DataFrame(rows, columns=_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    return df.set_index("date")


def build_collection_dataframe(collection: LakeCollection) -> pd.DataFrame:
    rows = []
    for name in collection.names():
        record = collection[name]
        for m in record.sorted_measurements():
            rows.append([record.name, record.capacity_level, m.date, m.minimum, m.maximum])
    df = pd.DataFrame(rows, columns=["lake", "capacity_level", *_COLUMNS])
    df["date"] = pd.to_datetime(df["date"])
    return df
