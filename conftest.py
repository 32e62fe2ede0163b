"""
Pytest configuration and fixtures for deploy-summary tests.

Usage:
    def test_something(write_log):
        path = write_log([{"contractName": "A", "contractAddress": "0x1",
                           "transactionType": "CREATE"}])
        ...
"""

import json
import logging
import os
from typing import Any, Dict, List

import pytest


@pytest.fixture
def make_tx():
    """Factory building a raw transaction record as found in a broadcast log"""

    def _make(name: str, address: str, tx_type: str = "CREATE") -> Dict[str, Any]:
        return {
            "contractName": name,
            "contractAddress": address,
            "transactionType": tx_type,
        }

    return _make


@pytest.fixture
def write_log(tmp_path):
    """Factory writing a transaction log and returning its path as a string"""

    def _write(transactions: List[Dict[str, Any]] = None, name: str = "run-latest.json", **extra) -> str:
        document = dict(extra)
        if transactions is not None:
            document["transactions"] = transactions
        log_file = tmp_path / name
        log_file.write_text(json.dumps(document), encoding="utf-8")
        return str(log_file)

    return _write


@pytest.fixture
def write_raw(tmp_path):
    """Factory writing arbitrary text to a file and returning its path"""

    def _write(text: str, name: str = "raw.json") -> str:
        raw_file = tmp_path / name
        raw_file.write_text(text, encoding="utf-8")
        return str(raw_file)

    return _write


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DEPLOY_SUMMARY_* settings from the host out of tests"""
    for key in list(os.environ):
        if key.startswith("DEPLOY_SUMMARY_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put pytest's back afterwards"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
