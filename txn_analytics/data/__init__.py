"""Data loading, record schema, and in-memory query engine."""
from .loader import TransactionLoadError, load_transactions, read_records
from .schemas import Transaction
from .store import TransactionStore
from .normalize import to_frame
