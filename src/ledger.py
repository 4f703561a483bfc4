import logging
from typing import Dict

from models import Transaction, TransactionType, ClientAccount

logger = logging.getLogger(__name__)


class Ledger:
    """
    Client accounts keyed by client id, plus the dispatch from a decoded
    transaction to the account mutation it triggers.
    Transactions are applied strictly in the order they are given.
    """

    def __init__(self):
        self._accounts: Dict[int, ClientAccount] = {}

    def get_or_create_account(self, client_id: int) -> ClientAccount:
        """Get existing account or create new one."""
        if client_id not in self._accounts:
            self._accounts[client_id] = ClientAccount(client_id=client_id)
        return self._accounts[client_id]

    def apply(self, transaction: Transaction) -> bool:
        """
        Apply a single transaction to its client's account.

        Returns False when a deposit or withdrawal carries no amount and was
        skipped, True otherwise. Disputes, resolves and chargebacks that do not
        match a transaction in the right state are no-ops, not failures.

        Raises:
            InsufficientFundsError: withdrawal larger than available funds.
                The account is left unchanged.
        """
        account = self.get_or_create_account(transaction.client_id)

        match transaction.transaction_type:
            case TransactionType.DEPOSIT:
                if transaction.amount is None:
                    logger.debug(f"Deposit tx {transaction.transaction_id}: no amount, skipping")
                    return False
                account.deposit(transaction.amount, transaction.transaction_id)
            case TransactionType.WITHDRAWAL:
                if transaction.amount is None:
                    logger.debug(f"Withdrawal tx {transaction.transaction_id}: no amount, skipping")
                    return False
                account.withdraw(transaction.amount, transaction.transaction_id)
            case TransactionType.DISPUTE:
                account.dispute(transaction.transaction_id)
            case TransactionType.RESOLVE:
                account.resolve(transaction.transaction_id)
            case TransactionType.CHARGEBACK:
                account.chargeback(transaction.transaction_id)

        return True

    def get_all_accounts(self) -> Dict[int, ClientAccount]:
        """Return all accounts (for final output)."""
        return dict(self._accounts)
