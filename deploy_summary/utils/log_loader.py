"""
Transaction log loading

Reads a deployment transaction log (for example a Foundry broadcast
run-latest.json) and hands back its transactions array. Read failures and
parse failures are kept apart so callers can tell them apart, but both carry
the same user-facing message format.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .exceptions import LogParseError, LogReadError

LOG = logging.getLogger(__name__)


def read_log_text(path: Union[str, Path]) -> str:
    """Read the whole log file as UTF-8 text"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LogReadError(path, str(e)) from e


def parse_log_text(text: str, path: Union[str, Path]) -> Any:
    """Parse log text as JSON"""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise LogParseError(path, str(e)) from e


def get_transactions(document: Any, path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Return the transactions array of a parsed log document"""
    if not isinstance(document, dict):
        raise LogParseError(path, f"expected a JSON object, got {type(document).__name__}")

    if 'transactions' not in document:
        raise LogParseError(path, "missing 'transactions' field")

    transactions = document['transactions']
    if not isinstance(transactions, list):
        raise LogParseError(
            path, f"'transactions' must be an array, got {type(transactions).__name__}"
        )

    return transactions


def load_transaction_log(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Load a transaction log and return its transactions.

    Args:
        path: Path to the JSON log file

    Returns:
        The raw transaction records, in file order

    Raises:
        LogReadError: If the file cannot be read
        LogParseError: If the file is not JSON or has no transactions array
    """
    text = read_log_text(path)
    document = parse_log_text(text, path)
    transactions = get_transactions(document, path)
    LOG.info(f"Loaded {len(transactions)} transactions from {path}")
    return transactions
