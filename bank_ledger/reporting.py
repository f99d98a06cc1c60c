"""
Account Reporting Module

Snapshot of an account's state and aggregate totals, rendered as a
plain-text summary.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import List

from .currency import Currency


@dataclass(frozen=True)
class AccountReport:
    """Point-in-time figures for one account"""
    account_id: str
    currency: Currency
    balance: Decimal
    min_balance: Decimal
    daily_withdraw_limit: Decimal
    withdrawn_today: Decimal
    transaction_count: int
    total_deposits: Decimal
    total_withdrawals: Decimal
    interest_rate: Decimal

    def format_amount(self, amount: Decimal) -> str:
        return f"{amount:.{self.currency.precision}f} {self.currency.code}"

    def render(self) -> str:
        """Render the report as multi-line text"""
        lines: List[str] = [
            f"=== Account Report {self.account_id} ===",
            f"Current balance: {self.format_amount(self.balance)}",
            f"Minimum balance: {self.format_amount(self.min_balance)}",
            f"Daily withdrawal limit: {self.format_amount(self.daily_withdraw_limit)}",
            f"Withdrawn today: {self.format_amount(self.withdrawn_today)}",
            f"Transaction count: {self.transaction_count}",
            f"Total deposits: {self.format_amount(self.total_deposits)}",
            f"Total withdrawals: {self.format_amount(self.total_withdrawals)}",
            f"Interest rate: {self.interest_rate * 100:.2f}%",
        ]
        return "\n".join(lines) + "\n"
