"""
JSON source loading and record validation.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import IO, Union

from pydantic import ValidationError

from txn_analytics.config import DATA_FILE
from txn_analytics.data.schemas import Transaction

Source = Union[str, Path, IO[str], IO[bytes]]


class TransactionLoadError(ValueError):
    """The transaction source is missing, unparsable, or holds a bad record."""


def _source_name(source: Source) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", None) or type(source).__name__


def read_records(source: Source = DATA_FILE) -> list:
    """Parse the raw JSON array from a path or an open stream."""
    name = _source_name(source)
    try:
        if isinstance(source, (str, Path)):
            with open(source, "rb") as f:
                raw = json.load(f)
        else:
            raw = json.load(source)
    except OSError as exc:
        raise TransactionLoadError(f"Cannot read transactions from {name}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise TransactionLoadError(f"Invalid JSON in {name}: {exc}") from exc

    if not isinstance(raw, list):
        raise TransactionLoadError(
            f"Expected a JSON array of transactions in {name}, got {type(raw).__name__}"
        )
    return raw


def load_transactions(source: Source = DATA_FILE) -> list[Transaction]:
    """Load and validate every record; the first bad record aborts the load."""
    name = _source_name(source)
    raw = read_records(source)

    transactions: list[Transaction] = []
    for i, record in enumerate(raw):
        try:
            transactions.append(Transaction.model_validate(record))
        except (ValidationError, OverflowError) as exc:
            raise TransactionLoadError(f"Bad record #{i} in {name}: {exc}") from exc
    return transactions

