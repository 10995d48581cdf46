"""Finance service - transaction processing and account rules."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional

from itemvault.models.domain import (
    Account,
    AccountKind,
    ProcessorKind,
    Transaction,
    TransactionOutcome,
    TransactionResult,
)

logger = logging.getLogger(__name__)


def format_amount(amount: Decimal) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def _processor(label: str) -> Callable[[Transaction], str]:
    def process(transaction: Transaction) -> str:
        return f"[{label}] Processed {format_amount(transaction.amount)} for {transaction.category}"
    return process


PROCESSORS: Dict[ProcessorKind, Callable[[Transaction], str]] = {
    ProcessorKind.BANK_TRANSFER: _processor("Bank Transfer"),
    ProcessorKind.MOBILE_MONEY: _processor("Mobile Money"),
    ProcessorKind.CRYPTO_WALLET: _processor("Crypto Wallet"),
}


def _apply_standard(account: Account, transaction: Transaction) -> TransactionResult:
    account.balance -= transaction.amount
    return TransactionResult(
        transaction_id=transaction.id,
        outcome=TransactionOutcome.APPLIED,
        balance=account.balance,
        message=f"Transaction applied. New balance: {format_amount(account.balance)}",
    )


def _apply_savings(account: Account, transaction: Transaction) -> TransactionResult:
    # Overdraft is a warning-level outcome, not an error.
    if transaction.amount > account.balance:
        logger.warning(
            "Insufficient funds on %s for transaction %s (%s > %s)",
            account.account_number, transaction.id, transaction.amount, account.balance,
        )
        return TransactionResult(
            transaction_id=transaction.id,
            outcome=TransactionOutcome.INSUFFICIENT_FUNDS,
            balance=account.balance,
            message="Insufficient funds.",
        )

    account.balance -= transaction.amount
    return TransactionResult(
        transaction_id=transaction.id,
        outcome=TransactionOutcome.APPLIED,
        balance=account.balance,
        message=(
            f"Transaction of {format_amount(transaction.amount)} applied. "
            f"Updated balance: {format_amount(account.balance)}"
        ),
    )


ACCOUNT_RULES: Dict[AccountKind, Callable[[Account, Transaction], TransactionResult]] = {
    AccountKind.STANDARD: _apply_standard,
    AccountKind.SAVINGS: _apply_savings,
}


def process_transaction(kind: ProcessorKind, transaction: Transaction) -> str:
    """Run a transaction through the processor for the given channel."""
    return PROCESSORS[kind](transaction)


def apply_transaction(account: Account, transaction: Transaction) -> TransactionResult:
    """Apply a transaction using the rule for the account's kind."""
    return ACCOUNT_RULES[account.kind](account, transaction)


class FinanceService:
    """Service keeping a transaction history for the finance sample."""

    def __init__(self):
        self.transactions: List[Transaction] = []

    def run(
        self,
        account: Account,
        batch: Iterable[tuple],
    ) -> List[str]:
        """Process every (ProcessorKind, Transaction) pair, then apply them in order.

        Every transaction is recorded in the history, applied or not.
        """
        batch = list(batch)
        lines = [process_transaction(kind, transaction) for kind, transaction in batch]
        for _, transaction in batch:
            lines.append(apply_transaction(account, transaction).message)
            self.transactions.append(transaction)
        return lines

    @staticmethod
    def sample_batch(now: Optional[datetime] = None) -> List[tuple]:
        """Transactions used by the console demo."""
        now = now or datetime.now()
        return [
            (ProcessorKind.MOBILE_MONEY, Transaction(1, now, Decimal("400"), "Groceries")),
            (ProcessorKind.BANK_TRANSFER, Transaction(2, now, Decimal("7000"), "Rent")),
            (ProcessorKind.CRYPTO_WALLET, Transaction(3, now, Decimal("2700"), "Fees")),
        ]
