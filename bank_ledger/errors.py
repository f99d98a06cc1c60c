"""
Ledger Errors

Domain exceptions raised by account operations. All of them are raised
synchronously to the caller and none is retried internally.
"""

from decimal import Decimal


class LedgerError(Exception):
    """Base class for account ledger errors"""
    pass


class InsufficientFundsError(LedgerError):
    """
    Raised when a transfer would leave the source account at or below its
    minimum balance, or when a minimum-balance transfer is asked to move a
    non-positive amount.
    """
    
    def __init__(self, message: str = "Not enough funds in account!"):
        super().__init__(message)


class InvalidArgumentError(LedgerError, ValueError):
    """Raised when an amount or day count must be strictly positive and is not"""
    pass


class LimitExceededError(LedgerError):
    """Raised when a withdrawal would push today's total over the daily limit"""
    
    def __init__(self, limit: Decimal, withdrawn_today: Decimal, requested: Decimal):
        self.limit = limit
        self.withdrawn_today = withdrawn_today
        self.requested = requested
        super().__init__(
            f"Daily withdrawal limit of {limit} exceeded: "
            f"already withdrew {withdrawn_today}, requested {requested}"
        )
