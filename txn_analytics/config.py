"""
Transaction Analytics — Configuration: paths, column dtypes, constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with TXN_ANALYTICS_DATA_FILE env var to point at another dataset
# ---------------------------------------------------------------------------
PACKAGE_FOLDER = Path(__file__).resolve().parent
RESOURCES_FOLDER = PACKAGE_FOLDER / "resources"
DEFAULT_DATA_FILE = RESOURCES_FOLDER / "transactions.json"
DATA_FILE = Path(os.environ.get("TXN_ANALYTICS_DATA_FILE", str(DEFAULT_DATA_FILE)))

# ---------------------------------------------------------------------------
# Column dtypes for the in-memory frame (fixed so an empty dataset still aggregates)
# ---------------------------------------------------------------------------
COLUMN_DTYPES = {
    "mtn": "Int64",
    "amount": "float64",
    "sender_full_name": "object",
    "sender_age": "Int64",
    "beneficiary_full_name": "object",
    "beneficiary_age": "Int64",
    "issue_id": "Int64",
    "issue_solved": "bool",
    "issue_message": "object",
}

# ---------------------------------------------------------------------------
# Query defaults
# ---------------------------------------------------------------------------
TOP_N = 3
DEMO_CLIENT = "Tom Shelby"
