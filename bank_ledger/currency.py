"""
Currency Support Module

Currency codes, Decimal coercion and the exchange-rate provider contract
used for cross-currency transfers. NEVER uses float for monetary values.
"""

from decimal import Decimal, InvalidOperation, getcontext
from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

from .errors import InvalidArgumentError

# Set global decimal context for financial precision
getcontext().prec = 28

Numeric = Union[Decimal, int, float, str]


class Currency(Enum):
    """ISO 4217 Currency Codes with precision info"""
    RON = ("RON", 2)  # Romanian Leu
    EUR = ("EUR", 2)  # Euro
    USD = ("USD", 2)  # US Dollar
    GBP = ("GBP", 2)  # British Pound
    CHF = ("CHF", 2)  # Swiss Franc
    JPY = ("JPY", 0)  # Japanese Yen, 0 decimal places
    
    def __init__(self, code: str, precision: int):
        self.code = code
        self.precision = precision
    
    @classmethod
    def from_code(cls, code: str) -> 'Currency':
        """Look up a currency by its ISO code (case-insensitive)"""
        try:
            return cls[code.upper()]
        except KeyError:
            raise ValueError(f"Unsupported currency code: {code}")


def to_decimal(value: Numeric) -> Decimal:
    """
    Coerce a numeric value to Decimal.
    
    Floats go through str() so 0.1 becomes Decimal('0.1'), not its
    binary expansion.
    
    Raises:
        InvalidArgumentError: If the value is not numeric, or is NaN or infinite
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Cannot convert {value!r} to Decimal")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidArgumentError(f"Cannot convert {value!r} to Decimal")
    if not result.is_finite():
        raise InvalidArgumentError(f"Amount must be a finite number, got {value!r}")
    return result


class RateProvider(ABC):
    """
    Source of the exchange rate between an account's local currency and
    the foreign currency, expressed as local units per one foreign unit.
    """
    
    @abstractmethod
    def get_rate(self) -> Decimal:
        """Return the current rate; must be positive"""
        pass


class FixedRateProvider(RateProvider):
    """Rate provider that always returns the same rate"""
    
    def __init__(self, rate: Numeric = "4.97"):
        rate = to_decimal(rate)
        if rate <= 0:
            raise InvalidArgumentError("Exchange rate must be positive")
        self.rate = rate
    
    def get_rate(self) -> Decimal:
        return self.rate
    
    def __repr__(self) -> str:
        return f"FixedRateProvider(rate={self.rate})"
