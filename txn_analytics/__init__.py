"""Transaction Analytics — read-only aggregate queries over a static transaction dataset."""
from .data.loader import TransactionLoadError
from .data.schemas import Transaction
from .data.store import TransactionStore

__version__ = "1.0.0"
