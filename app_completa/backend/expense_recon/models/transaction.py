"""Receipt and bank transaction models for the reconciliation engine."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple, Dict, Any, Mapping

from ..utils.parsing import parse_amount, parse_iso_date, parse_text
from .enums import TransactionType


@dataclass(frozen=True)
class Receipt:
    """
    A single purchase extracted from an uploaded receipt image or PDF.
    Amounts are signed; only the magnitude is used for matching.
    """
    id: str
    merchant: str = ""
    amount: Optional[float] = None
    receipt_date: Optional[date] = None
    category: str = ""
    items: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def abs_amount(self) -> Optional[float]:
        return abs(self.amount) if self.amount is not None else None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Receipt":
        """Build a receipt from a caller-supplied record."""
        items = data.get("items")
        if isinstance(items, (list, tuple)):
            items = tuple(str(item) for item in items if item is not None)
        else:
            items = ()

        return cls(
            id=parse_text(data.get("id")),
            merchant=parse_text(data.get("merchant")),
            amount=parse_amount(data.get("amount")),
            receipt_date=parse_iso_date(data.get("date")),
            category=parse_text(data.get("category")),
            items=items,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "merchant": self.merchant,
            "amount": self.amount,
            "date": self.receipt_date.isoformat() if self.receipt_date else None,
            "category": self.category,
            "items": list(self.items),
        }


@dataclass(frozen=True)
class BankTransaction:
    """
    A single ledger entry extracted from an imported bank statement.
    Negative amounts are debits, positive amounts are credits.
    """
    id: str
    description: str = ""
    amount: Optional[float] = None
    transaction_date: Optional[date] = None
    category: str = ""
    transaction_type: Optional[TransactionType] = None
    bank_type: str = "unknown"

    @property
    def abs_amount(self) -> Optional[float]:
        return abs(self.amount) if self.amount is not None else None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BankTransaction":
        """
        Build a transaction from a caller-supplied record.

        An absent or unknown transaction_type is inferred from the sign of
        the amount.
        """
        amount = parse_amount(data.get("amount"))

        return cls(
            id=parse_text(data.get("id")),
            description=parse_text(data.get("description")),
            amount=amount,
            transaction_date=parse_iso_date(data.get("date")),
            category=parse_text(data.get("category")),
            transaction_type=_parse_transaction_type(data.get("transaction_type"), amount),
            bank_type=parse_text(data.get("bank_type")) or "unknown",
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "description": self.description,
            "amount": self.amount,
            "date": self.transaction_date.isoformat() if self.transaction_date else None,
            "category": self.category,
            "transaction_type": self.transaction_type.value if self.transaction_type else None,
            "bank_type": self.bank_type,
        }


def _parse_transaction_type(
    value: Any,
    amount: Optional[float],
) -> Optional[TransactionType]:
    if isinstance(value, TransactionType):
        return value
    if isinstance(value, str):
        try:
            return TransactionType(value.strip().lower())
        except ValueError:
            pass

    if amount is None:
        return None
    return TransactionType.DEBIT if amount < 0 else TransactionType.CREDIT
