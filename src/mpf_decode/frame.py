"""In-memory pandas views over decoded records."""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from mpf_core.text import hex_label

from .records import Record


def records_to_frame(records: Iterable[Record], dimensionality: int) -> pd.DataFrame:
    """One row per record: hex label plus f000..fNNN int16 feature columns."""
    labels: list[str] = []
    rows: list[tuple[int, ...]] = []
    for rec in records:
        labels.append(hex_label(rec.label))
        rows.append(rec.vector)

    columns = [f"f{i:03d}" for i in range(dimensionality)]
    df = pd.DataFrame(rows, columns=columns).astype("int16")
    df.insert(0, "label", labels)
    return df


def label_counts(df: pd.DataFrame) -> pd.DataFrame:
    """Samples per label, sorted by label."""
    if df.empty:
        return pd.DataFrame({"label": pd.Series(dtype=str), "samples": pd.Series(dtype="int64")})
    return (
        df.groupby("label", sort=True)
        .size()
        .reset_index(name="samples")
        .sort_values("label")
        .reset_index(drop=True)
    )
