"""
Transaction Records Module

Immutable records appended to an account's history by every
balance-changing operation, and the queries run over that history.
"""

from decimal import Decimal
from datetime import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Union


class TransactionType(Enum):
    """Kinds of balance change recorded in history"""
    DEPOSIT = "Deposit"
    WITHDRAW = "Withdraw"
    INTEREST = "Interest"


@dataclass(frozen=True)
class TransactionRecord:
    """One entry in an account's history"""
    timestamp: datetime
    kind: TransactionType
    amount: Decimal
    balance_after: Decimal
    description: str


def _align(bound: datetime, timestamp: datetime) -> datetime:
    """
    Bring bound to the same awareness as timestamp.
    
    Naive datetimes are taken as local time, the way datetime.astimezone()
    treats them.
    """
    if (bound.tzinfo is None) == (timestamp.tzinfo is None):
        return bound
    if bound.tzinfo is None:
        return bound.astimezone()
    return bound.astimezone().replace(tzinfo=None)


def filter_by_date_range(
    records: Iterable[TransactionRecord],
    start: datetime,
    end: datetime
) -> List[TransactionRecord]:
    """
    Records whose timestamp lies in [start, end], in history order.
    
    Bounds may be naive or timezone-aware regardless of how the records
    were stamped.
    """
    return [
        r for r in records
        if _align(start, r.timestamp) <= r.timestamp <= _align(end, r.timestamp)
    ]


def filter_by_type(
    records: Iterable[TransactionRecord],
    kind: Union[TransactionType, str]
) -> List[TransactionRecord]:
    """
    Records of the given kind, in history order.
    
    String kinds match case-insensitively; an unrecognised string simply
    matches nothing.
    """
    if isinstance(kind, TransactionType):
        wanted = kind.value.lower()
    else:
        wanted = str(kind).lower()
    return [r for r in records if r.kind.value.lower() == wanted]


def total_amount(
    records: Iterable[TransactionRecord],
    kind: TransactionType
) -> Decimal:
    """Sum of amounts over records of one kind"""
    return sum((r.amount for r in records if r.kind == kind), Decimal('0'))
