"""
Fatal-percentage breakdowns of the Traffic table.

Rows without a severity, without a value for the chosen dimension, or
carrying the "Pedestrian" fill value are left out before grouping. Groups
under ``MIN_CASES`` rows are dropped so small samples never reach the chart.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from .config import MIN_CASES, PEDESTRIAN, PERSON_KEY
from .dimensions import Dimension, Mode

RESULT_COLUMNS = ["category", "total_cases", "fatal_cases", "fatal_pct"]


def summarize(traffic: pd.DataFrame, dimension: Dimension, min_cases: int = MIN_CASES) -> pd.DataFrame:
    """Group by ``dimension`` and rank categories by case count, largest first.

    Ties keep the grouping order, so the ranking is stable across calls.
    """
    rows = pd.DataFrame({
        "category": dimension.values(traffic),
        "FATAL": traffic["FATAL"],
    })
    rows = rows[
        rows["FATAL"].notna()
        & rows["category"].notna()
        & (rows["category"] != PEDESTRIAN)
    ]

    summary = (
        rows.groupby("category")
        .agg(total_cases=("FATAL", "size"), fatal_cases=("FATAL", "sum"))
        .reset_index()
    )
    summary["total_cases"] = summary["total_cases"].astype(int)
    summary["fatal_cases"] = summary["fatal_cases"].astype(int)
    summary["fatal_pct"] = np.where(
        summary["total_cases"] > 0,
        summary["fatal_cases"] * 100 / summary["total_cases"],
        0.0,
    )

    summary = summary[summary["total_cases"] >= min_cases]
    summary = summary.sort_values("total_cases", ascending=False, kind="mergesort")
    return summary[RESULT_COLUMNS].reset_index(drop=True)


def valid_categories(traffic: pd.DataFrame, dimension: Dimension, min_cases: int = MIN_CASES) -> List:
    return summarize(traffic, dimension, min_cases)["category"].tolist()


def aggregate(
    traffic: pd.DataFrame,
    dimension: Dimension,
    mode: Mode,
    count: Optional[int] = None,
    selected: Optional[Iterable] = None,
    min_cases: int = MIN_CASES,
) -> pd.DataFrame:
    """Build the result table shown in the chart.

    ``Mode.TOP_N`` keeps the ``count`` most frequent categories.
    ``Mode.SPECIFIC`` keeps the categories in ``selected``; an empty
    selection gives an empty table.
    """
    summary = summarize(traffic, dimension, min_cases)

    if mode is Mode.TOP_N:
        if count is None or count < 1:
            raise ValueError(f"count must be a positive integer, got {count!r}")
        result = summary.head(int(count))
    elif mode is Mode.SPECIFIC:
        selected = list(selected or [])
        result = summary[summary["category"].isin(selected)]
    else:
        raise ValueError(f"unsupported mode: {mode!r}")

    return result.reset_index(drop=True)


def headline_numbers(traffic: pd.DataFrame) -> Dict[str, float]:
    """Count people, not merged rows: joins repeat a person per extra match."""
    people = traffic.dropna(subset=["FATAL"]).drop_duplicates(PERSON_KEY)
    flags = people["FATAL"]
    total = int(len(flags))
    fatal = int(flags.sum())
    return {
        "total": total,
        "fatal": fatal,
        "fatal_pct": fatal / total * 100 if total else 0.0,
    }
