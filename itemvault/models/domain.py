"""Domain entities - internal representation (framework-agnostic)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Protocol


class HasId(Protocol):
    """Anything stored in a keyed repository."""
    id: int


class HasQuantity(HasId, Protocol):
    """Keyed entity with a mutable stock count."""
    quantity: int


class StockItem(HasQuantity, Protocol):
    """Named keyed entity with a mutable stock count."""
    name: str


class AccountKind(str, Enum):
    """Account kind; selects the withdrawal rule."""
    STANDARD = "standard"
    SAVINGS = "savings"


class ProcessorKind(str, Enum):
    """Payment channel used to process a transaction."""
    BANK_TRANSFER = "bank_transfer"
    MOBILE_MONEY = "mobile_money"
    CRYPTO_WALLET = "crypto_wallet"


class TransactionOutcome(str, Enum):
    """Result of applying a transaction to an account."""
    APPLIED = "applied"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass
class ElectronicItem:
    """Warehouse electronics entity."""
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int


@dataclass
class GroceryItem:
    """Warehouse grocery entity."""
    id: int
    name: str
    quantity: int
    expiry_date: datetime


@dataclass
class Patient:
    """Patient domain entity."""
    id: int
    name: str
    age: int
    gender: str

    def __str__(self) -> str:
        return f"[Patient] ID: {self.id}, Name: {self.name}, Age: {self.age}, Gender: {self.gender}"


@dataclass
class Prescription:
    """Prescription issued to a patient."""
    id: int
    patient_id: int
    medication_name: str
    date_issued: datetime

    def __str__(self) -> str:
        return (
            f"[Prescription] ID: {self.id}, Medication: {self.medication_name}, "
            f"Date: {self.date_issued:%Y-%m-%d}, Patient ID: {self.patient_id}"
        )


@dataclass(frozen=True)
class InventoryItem:
    """Immutable inventory log record."""
    id: int
    name: str
    quantity: int
    date_added: datetime


@dataclass(frozen=True)
class Student:
    """Student result read from a grading file."""
    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        """Letter grade for the score."""
        if 80 <= self.score <= 100:
            return "A"
        if 70 <= self.score <= 79:
            return "B"
        if 60 <= self.score <= 69:
            return "C"
        if 50 <= self.score <= 59:
            return "D"
        return "F"


@dataclass(frozen=True)
class Transaction:
    """Financial transaction record."""
    id: int
    date: datetime
    amount: Decimal
    category: str


@dataclass
class Account:
    """Account with a balance; kind decides how transactions are applied."""
    account_number: str
    balance: Decimal
    kind: AccountKind = AccountKind.STANDARD


@dataclass
class TransactionResult:
    """What happened when a transaction hit an account."""
    transaction_id: int
    outcome: TransactionOutcome
    balance: Decimal
    message: str

    @property
    def applied(self) -> bool:
        return self.outcome == TransactionOutcome.APPLIED

