"""
TransactionStore — In-memory query engine backed by pandas.

Loaded once at startup, queried as often as needed. The frame and the record
tuple are never mutated after construction, so readers need no locking.
"""
from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from txn_analytics.config import DATA_FILE, TOP_N
from txn_analytics.data.loader import Source, load_transactions
from txn_analytics.data.normalize import to_frame
from txn_analytics.data.schemas import Transaction


class TransactionStore:
    """Read-only transaction records with aggregate accessors."""

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self._transactions: tuple[Transaction, ...] = tuple(transactions)
        self._df: pd.DataFrame = to_frame(self._transactions)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, source: Source = DATA_FILE, verbose: bool = True) -> "TransactionStore":
        """Load every record from a JSON file or stream.

        Raises TransactionLoadError if the source is missing or malformed.
        """
        if verbose:
            print("Loading transactions...")
        store = cls(load_transactions(source))
        if verbose and store.row_count() == 0:
            print("  No transactions found — starting with empty dataset")
        elif verbose:
            print(f"  Loaded {store.row_count():,} transactions")
        return store

    # ------------------------------------------------------------------
    # Record access
    # ------------------------------------------------------------------

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    def to_frame(self) -> pd.DataFrame:
        """Copy of the backing frame; callers may mutate it freely."""
        return self._df.copy()

    def row_count(self) -> int:
        return len(self._df)

    def _records_at(self, positions: Iterable[int]) -> list[Transaction]:
        return [self._transactions[i] for i in positions]

    # ------------------------------------------------------------------
    # Amount queries
    # ------------------------------------------------------------------

    def total_amount(self) -> float:
        return float(self._df["amount"].sum())

    def total_amount_sent_by(self, sender_full_name: str) -> float:
        df = self._df
        return float(df.loc[df["sender_full_name"] == sender_full_name, "amount"].sum())

    def max_amount(self) -> float:
        """Largest single amount, 0.0 for an empty dataset."""
        if self._df.empty:
            return 0.0
        return float(self._df["amount"].max())

    def top_by_amount(self, n: int = TOP_N) -> list[Transaction]:
        """Records with the largest amounts, descending.

        Ties keep their original relative order (stable sort).
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        order = self._df["amount"].sort_values(ascending=False, kind="stable").index[:n]
        return self._records_at(order)

    def top3_by_amount(self) -> list[Transaction]:
        return self.top_by_amount(3)

    def top_sender(self) -> Optional[str]:
        """Sender with the largest summed amount, None when there are no records.

        Groups are kept in first-appearance order and idxmax returns the first
        maximum, so ties go to whoever sent first.
        """
        if self._df.empty:
            return None
        totals = self._df.groupby("sender_full_name", sort=False)["amount"].sum()
        return str(totals.idxmax())

    # ------------------------------------------------------------------
    # Client queries
    # ------------------------------------------------------------------

    def _client_names(self) -> pd.Series:
        return pd.concat(
            [self._df["sender_full_name"], self._df["beneficiary_full_name"]],
            ignore_index=True,
        )

    def clients(self) -> list[str]:
        """Distinct names seen as sender or beneficiary, sorted."""
        return sorted(self._client_names().unique().tolist())

    def unique_client_count(self) -> int:
        return int(self._client_names().nunique())

    def has_open_compliance_issue(self, client_full_name: str) -> bool:
        """True if the client sent any transfer, or received one whose issue is unsolved.

        The unsolved condition only binds the beneficiary side; a sender match
        counts on its own regardless of issue status.
        """
        df = self._df
        as_sender = df["sender_full_name"] == client_full_name
        as_open_beneficiary = (df["beneficiary_full_name"] == client_full_name) & ~df["issue_solved"]
        return bool((as_sender | as_open_beneficiary).any())

    def transactions_by_beneficiary(self) -> dict[str, list[Transaction]]:
        """Records grouped by beneficiary.

        Keys follow first appearance; each list keeps record order.
        """
        grouped: dict[str, list[Transaction]] = {}
        for name, group in self._df.groupby("beneficiary_full_name", sort=False):
            grouped[name] = self._records_at(group.index)
        return grouped

    # ------------------------------------------------------------------
    # Issue queries
    # ------------------------------------------------------------------

    def unsolved_issue_ids(self) -> set[int]:
        df = self._df
        mask = ~df["issue_solved"] & df["issue_id"].notna()
        return {int(v) for v in df.loc[mask, "issue_id"]}

    def solved_issue_messages(self) -> list[str]:
        """Messages of solved issues in record order, duplicates kept."""
        df = self._df
        mask = df["issue_solved"] & df["issue_message"].notna()
        return df.loc[mask, "issue_message"].tolist()
