"""
Helpers for turning query results into plain Python / JSON-ready values.
"""
from __future__ import annotations

import math

import numpy as np
import pandas as pd

from txn_analytics.data.schemas import Transaction


def sanitize_for_json(obj):
    """Recursively convert records, sets and numpy/pandas types to native Python.

    Sets become sorted lists so output is deterministic.
    """
    if isinstance(obj, Transaction):
        return sanitize_for_json(obj.model_dump(by_alias=True))
    if isinstance(obj, dict):
        clean = {}
        for k, v in obj.items():
            # Skip keys JSON can't represent
            if k is None:
                continue
            if isinstance(k, (float, np.floating)) and (math.isnan(float(k)) or math.isinf(float(k))):
                continue
            clean[k if isinstance(k, str) else str(k)] = sanitize_for_json(v)
        return clean
    if isinstance(obj, (set, frozenset)):
        return [sanitize_for_json(v) for v in sorted(obj)]
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, (float, np.floating)):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj


def format_amount(value: float) -> str:
    """Amount as a thousands-separated string with two decimals."""
    return f"{value:,.2f}"
