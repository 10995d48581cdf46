"""Unit tests for the finance service."""

import logging
from datetime import datetime
from decimal import Decimal

from itemvault.models.domain import (
    Account,
    AccountKind,
    ProcessorKind,
    Transaction,
    TransactionOutcome,
)
from itemvault.services.finance_service import (
    FinanceService,
    apply_transaction,
    format_amount,
    process_transaction,
)

NOW = datetime(2026, 5, 1, 12, 0)


def tx(id, amount, category="Misc"):
    return Transaction(id, NOW, Decimal(amount), category)


class TestProcessors:
    """Test processor selection by kind."""

    def test_labels(self):
        transaction = tx(1, "400", "Groceries")

        assert process_transaction(ProcessorKind.MOBILE_MONEY, transaction) == \
            "[Mobile Money] Processed $400.00 for Groceries"
        assert process_transaction(ProcessorKind.BANK_TRANSFER, transaction).startswith("[Bank Transfer]")
        assert process_transaction(ProcessorKind.CRYPTO_WALLET, transaction).startswith("[Crypto Wallet]")


class TestFormatAmount:
    """Test currency formatting."""

    def test_positive(self):
        assert format_amount(Decimal("9600")) == "$9,600.00"

    def test_negative_sign_before_symbol(self):
        assert format_amount(Decimal("-150")) == "-$150.00"
        assert format_amount(Decimal("-1234.5")) == "-$1,234.50"


class TestAccountRules:
    """Test standard and savings withdrawal rules."""

    def test_standard_account_can_go_negative(self):
        account = Account("ACC1", Decimal("100"), AccountKind.STANDARD)

        result = apply_transaction(account, tx(1, "250"))

        assert result.applied
        assert account.balance == Decimal("-150")
        assert result.message == "Transaction applied. New balance: -$150.00"

    def test_savings_debits_when_covered(self):
        account = Account("ACC2", Decimal("10000"), AccountKind.SAVINGS)

        result = apply_transaction(account, tx(1, "400"))

        assert result.outcome == TransactionOutcome.APPLIED
        assert result.balance == Decimal("9600")
        assert result.message == "Transaction of $400.00 applied. Updated balance: $9,600.00"

    def test_savings_insufficient_funds_is_a_warning(self, caplog):
        account = Account("ACC3", Decimal("100"), AccountKind.SAVINGS)

        with caplog.at_level(logging.WARNING):
            result = apply_transaction(account, tx(7, "100.01"))

        assert not result.applied
        assert result.outcome == TransactionOutcome.INSUFFICIENT_FUNDS
        assert result.message == "Insufficient funds."
        assert account.balance == Decimal("100")
        assert "Insufficient funds on ACC3" in caplog.text

    def test_savings_zero_amount_succeeds(self):
        account = Account("ACC4", Decimal("0"), AccountKind.SAVINGS)

        result = apply_transaction(account, tx(1, "0"))

        assert result.applied
        assert account.balance == Decimal("0")

    def test_savings_exact_balance(self):
        account = Account("ACC5", Decimal("50"), AccountKind.SAVINGS)

        assert apply_transaction(account, tx(1, "50")).applied
        assert account.balance == Decimal("0")


class TestFinanceService:
    """Test the sample run."""

    def test_run_records_every_transaction(self):
        service = FinanceService()
        account = Account("ACC77438", Decimal("10000"), AccountKind.SAVINGS)

        lines = service.run(account, service.sample_batch(NOW))

        assert [t.id for t in service.transactions] == [1, 2, 3]
        assert lines[-1] == "Insufficient funds."
        assert account.balance == Decimal("2600")

    def test_run_processes_all_before_applying(self):
        service = FinanceService()
        account = Account("ACC77438", Decimal("10000"), AccountKind.SAVINGS)

        lines = service.run(account, service.sample_batch(NOW))

        assert [line.split("]")[0] for line in lines[:3]] == [
            "[Mobile Money", "[Bank Transfer", "[Crypto Wallet",
        ]
        assert lines[3:] == [
            "Transaction of $400.00 applied. Updated balance: $9,600.00",
            "Transaction of $7,000.00 applied. Updated balance: $2,600.00",
            "Insufficient funds.",
        ]
