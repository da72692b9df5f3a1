"""Shared fixtures for on-disk JSON datasets."""
import json

import pytest


@pytest.fixture
def write_dataset(tmp_path):
    """Write a list of raw records to a JSON file and return its path."""
    def _write(records, name="transactions.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records))
        return path
    return _write
