"""
Deployment summarizer

Folds a transaction log into one ContractSummary per contract name and
renders the result as a text or JSON report.

Design Notes:
- Summaries are kept in a plain dict, so iteration follows first-seen order
- A contract's address is taken from its first transaction and never changes
- Any CALL transaction marks the contract as a Diamond for good
- Reports are rendered to a string in full before anything is written
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..utils.address import to_display_address
from ..utils.exceptions import LogParseError

LOG = logging.getLogger(__name__)

CALL_TRANSACTION = "CALL"
DIAMOND = "Diamond"
FACET = "Facet"


@dataclass
class Transaction:
    """One record of the transactions array"""
    contract_name: Optional[str]
    contract_address: Optional[str]
    transaction_type: Optional[str]

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Transaction":
        return cls(
            contract_name=record.get('contractName'),
            contract_address=record.get('contractAddress'),
            transaction_type=record.get('transactionType'),
        )

    @property
    def is_call(self) -> bool:
        return self.transaction_type == CALL_TRANSACTION


@dataclass
class ContractSummary:
    """Aggregated view of every transaction seen for one contract name"""
    name: Optional[str]
    address: Optional[str]
    is_diamond: bool = False
    transaction_count: int = 0
    call_count: int = 0

    @property
    def kind(self) -> str:
        return DIAMOND if self.is_diamond else FACET

    def record(self, transaction: Transaction) -> None:
        """Account for one more transaction of this contract"""
        self.transaction_count += 1
        if transaction.is_call:
            self.call_count += 1
            self.is_diamond = True

    def to_dict(self, checksum: bool = False) -> Dict[str, Any]:
        return {
            "contractName": self.name,
            "contractAddress": to_display_address(self.address, checksum),
            "type": self.kind,
            "transactions": self.transaction_count,
            "calls": self.call_count,
        }


def parse_transactions(records: Iterable[Any], path=None) -> List[Transaction]:
    """Convert raw JSON records to Transaction objects.

    Raises LogParseError for records that are not JSON objects and for
    contract names that cannot be used as a grouping key.
    """
    source = path if path is not None else "<input>"
    transactions = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise LogParseError(source, f"transaction {index} is not an object")
        if isinstance(record.get('contractName'), (list, dict)):
            raise LogParseError(source, f"transaction {index} has a non-string contractName")
        transactions.append(Transaction.from_dict(record))
    return transactions


def summarize_transactions(transactions: Iterable[Transaction]) -> Dict[Optional[str], ContractSummary]:
    """
    Aggregate transactions by contract name.

    Args:
        transactions: Transactions in log order

    Returns:
        Summaries keyed by contract name, in first-seen order
    """
    summaries: Dict[Optional[str], ContractSummary] = {}

    for transaction in transactions:
        summary = summaries.get(transaction.contract_name)
        if summary is None:
            summary = ContractSummary(
                name=transaction.contract_name,
                address=transaction.contract_address,
            )
            summaries[transaction.contract_name] = summary
            LOG.debug(f"New contract {summary.name} at {summary.address}")
        summary.record(transaction)

    LOG.info(
        f"Found {len(summaries)} contracts "
        f"({sum(1 for s in summaries.values() if s.is_diamond)} diamonds)"
    )
    return summaries


def format_report(summaries: Mapping[Any, ContractSummary], checksum: bool = False) -> str:
    """Render the text report; empty string when there are no contracts"""
    lines = []
    for summary in summaries.values():
        address = to_display_address(summary.address, checksum)
        lines.append(f"\nContract Name: {summary.name} ({summary.kind})")
        lines.append(f"Contract Address: {address}")
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def format_json_report(summaries: Mapping[Any, ContractSummary], checksum: bool = False) -> str:
    """Render the summaries as an indented JSON array"""
    return json.dumps(
        [summary.to_dict(checksum) for summary in summaries.values()],
        indent=2
    ) + "\n"
