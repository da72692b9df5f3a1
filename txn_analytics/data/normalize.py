"""
Records → DataFrame with stable column names and dtypes.
"""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from txn_analytics.config import COLUMN_DTYPES
from txn_analytics.data.schemas import Transaction


def to_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Build the store frame, one row per record, row i == record i.

    Dtypes are fixed up front so an empty dataset still has typed columns.
    """
    rows = [t.model_dump() for t in transactions]
    return pd.DataFrame(
        {col: pd.Series([r[col] for r in rows], dtype=dtype) for col, dtype in COLUMN_DTYPES.items()}
    )
