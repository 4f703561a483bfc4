import logging
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional

from errors import InsufficientFundsError

logger = logging.getLogger(__name__)


class TransactionType(Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"


class TransactionStatus(Enum):
    DEPOSITED = "deposited"
    WITHDRAWN = "withdrawn"
    DISPUTED = "disputed"
    RESOLVED = "resolved"
    CHARGEBACKED = "chargebacked"


@dataclass
class Transaction:
    transaction_type: TransactionType
    client_id: int
    transaction_id: int
    amount: Optional[Decimal] = None

    def __repr__(self) -> str:
        return f"Transaction({self.transaction_type.value}, client={self.client_id}, tx={self.transaction_id}, amount={self.amount})"


@dataclass
class TransactionEntry:
    """A deposit or withdrawal that moved funds, with its current dispute state."""

    amount: Decimal
    status: TransactionStatus


@dataclass
class ClientAccount:
    client_id: int
    available: Decimal = Decimal("0")
    held: Decimal = Decimal("0")
    locked: bool = False
    transactions: Dict[int, TransactionEntry] = field(default_factory=dict)

    @property
    def total(self) -> Decimal:
        return self.available + self.held

    def deposit(self, amount: Decimal, transaction_id: int) -> None:
        # A reused transaction id replaces the earlier entry.
        self.available += amount
        self.transactions[transaction_id] = TransactionEntry(amount, TransactionStatus.DEPOSITED)

    def withdraw(self, amount: Decimal, transaction_id: int) -> None:
        if amount > self.available:
            raise InsufficientFundsError(amount, self.available)

        self.available -= amount
        self.transactions[transaction_id] = TransactionEntry(amount, TransactionStatus.WITHDRAWN)

    def dispute(self, transaction_id: int) -> None:
        entry = self.transactions.get(transaction_id)

        if entry is None:
            logger.debug(f"Dispute for tx {transaction_id}: unknown to client {self.client_id}, ignoring")
            return

        if entry.status not in (TransactionStatus.DEPOSITED, TransactionStatus.WITHDRAWN):
            logger.debug(f"Dispute for tx {transaction_id}: transaction is {entry.status.value}, ignoring")
            return

        # Available may go negative when the disputed funds were already spent.
        self.available -= entry.amount
        self.held += entry.amount
        entry.status = TransactionStatus.DISPUTED

    def resolve(self, transaction_id: int) -> None:
        entry = self._disputed_entry(transaction_id, "Resolve")
        if entry is None:
            return

        self.held -= entry.amount
        self.available += entry.amount
        entry.status = TransactionStatus.RESOLVED

    def chargeback(self, transaction_id: int) -> None:
        entry = self._disputed_entry(transaction_id, "Chargeback")
        if entry is None:
            return

        # Available was already reduced at dispute time; total drops with held.
        self.held -= entry.amount
        self.locked = True
        entry.status = TransactionStatus.CHARGEBACKED

    def _disputed_entry(self, transaction_id: int, action: str) -> Optional[TransactionEntry]:
        entry = self.transactions.get(transaction_id)

        if entry is None:
            logger.debug(f"{action} for tx {transaction_id}: unknown to client {self.client_id}, ignoring")
            return None

        if entry.status != TransactionStatus.DISPUTED:
            logger.debug(f"{action} for tx {transaction_id}: transaction is {entry.status.value}, not disputed, ignoring")
            return None

        return entry


class ProcessingStats:
    """Counters for the closing report of a run."""

    def __init__(self):
        self.processed = 0
        self.skipped = 0
        self.failed = 0

    def record_success(self):
        self.processed += 1

    def record_skip(self):
        self.skipped += 1

    def record_failure(self):
        self.failed += 1

    def __str__(self) -> str:
        return f"Processed: {self.processed}, Skipped: {self.skipped}, Failed: {self.failed}"
