import logging
from typing import Dict, Optional

from config import EngineConfig
from errors import InsufficientFundsError
from ledger import Ledger
from models import ClientAccount, ProcessingStats, Transaction
from reader import read_transactions

logger = logging.getLogger(__name__)


class PaymentsEngine:
    """
    Feeds the transactions of a CSV file into a Ledger, one at a time and in
    file order, and returns the resulting accounts.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self._config = config or EngineConfig()
        self._ledger = Ledger()
        self._stats = ProcessingStats()

    @property
    def stats(self) -> ProcessingStats:
        return self._stats

    def process_file(self, filepath: str) -> Dict[int, ClientAccount]:
        """
        Process CSV file and return final account states.

        Raises:
            MalformedRecordError: a row could not be decoded.
            InsufficientFundsError: a withdrawal exceeded available funds and
                the engine is configured to halt on it.
        """
        logger.info(f"Processing transactions from {filepath}")

        for transaction in read_transactions(filepath):
            self._process_transaction(transaction)

        logger.info(f"Processing complete. {self._stats}")

        return self._ledger.get_all_accounts()

    def _process_transaction(self, transaction: Transaction) -> None:
        try:
            applied = self._ledger.apply(transaction)
        except InsufficientFundsError as e:
            self._stats.record_failure()
            if self._config.halt_on_insufficient_funds:
                logger.error(f"Aborting run at {transaction}: {e}")
                raise
            logger.warning(f"Rejected {transaction}: {e}")
            return

        if applied:
            self._stats.record_success()
        else:
            self._stats.record_skip()
