"""
Account Ledger Module

A single-currency account that owns its balance, its transaction history
and its daily withdrawal counters. Deposits and withdrawals are recorded in
history and reported to an optional notifier; transfers move funds between
two accounts, optionally converting through an exchange-rate provider.

Transfers are not atomic: the destination is credited (or the source
debited) before the other leg runs, and nothing is rolled back if the
second leg fails. Accounts do no internal locking, so concurrent callers
must serialize access to an account themselves.
"""

import logging
import uuid
from decimal import Decimal
from datetime import date, datetime
from typing import Callable, List, Optional, Union

from .config import LedgerConfig, get_config
from .currency import Currency, FixedRateProvider, Numeric, RateProvider, to_decimal
from .errors import InsufficientFundsError, InvalidArgumentError, LimitExceededError
from .logging_config import log_action
from .notifications import Notifier, WebhookNotifier
from .reporting import AccountReport
from .transactions import (
    TransactionRecord, TransactionType,
    filter_by_date_range, filter_by_type, total_amount
)


logger = logging.getLogger(__name__)


class Account:
    """
    Bank account ledger

    Plain withdrawals are capped per calendar day; transfer legs bypass
    that cap. Neither deposits nor withdrawals validate the amount, so a
    negative deposit lowers the balance.
    """

    def __init__(
        self,
        initial_balance: Numeric = 0,
        rate_provider: Optional[RateProvider] = None,
        notifier: Optional[Notifier] = None,
        config: Optional[LedgerConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
        account_id: Optional[str] = None
    ):
        """
        Create an account

        Args:
            initial_balance: Opening balance in the local currency
            rate_provider: Exchange-rate source (fixed default rate if omitted)
            notifier: Activity/alert sink; notifications are skipped if None
            config: Business-rule settings (global config if omitted)
            clock: Returns the current time; drives timestamps and day rollover
            account_id: Identifier to use instead of a generated UUID
        """
        config = config or get_config()

        self._account_id = account_id or str(uuid.uuid4())
        self._balance = to_decimal(initial_balance)
        self._rate_provider = rate_provider or FixedRateProvider(config.default_exchange_rate)
        self._notifier = notifier
        self._clock = clock or datetime.now

        self._currency = Currency.from_code(config.local_currency)
        self._foreign_currency = Currency.from_code(config.foreign_currency)
        self._min_balance = to_decimal(config.min_balance)
        self._interest_rate = to_decimal(config.interest_rate)
        self._days_per_year = Decimal(config.days_per_year)
        self._large_deposit_threshold = to_decimal(config.large_deposit_threshold)
        self._large_withdrawal_threshold = to_decimal(config.large_withdrawal_threshold)
        self._owner_email = config.owner_email
        self._owner_phone = config.owner_phone

        self._daily_withdraw_limit = to_decimal(config.daily_withdraw_limit)
        self._withdrawn_today = Decimal('0')
        self._last_withdraw_date: Optional[date] = None

        self._history: List[TransactionRecord] = []

    @classmethod
    def from_config(
        cls,
        initial_balance: Numeric = 0,
        config: Optional[LedgerConfig] = None,
        **kwargs
    ) -> 'Account':
        """
        Create an account wired from settings

        Alerts go to a WebhookNotifier when webhook_url is configured and no
        notifier is passed explicitly; otherwise the account has none.
        """
        config = config or get_config()
        if kwargs.get("notifier") is None:
            kwargs["notifier"] = WebhookNotifier.from_config(config)
        return cls(initial_balance, config=config, **kwargs)

    # Properties

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def min_balance(self) -> Decimal:
        return self._min_balance

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def foreign_currency(self) -> Currency:
        return self._foreign_currency

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    @property
    def daily_withdraw_limit(self) -> Decimal:
        return self._daily_withdraw_limit

    @daily_withdraw_limit.setter
    def daily_withdraw_limit(self, value: Numeric) -> None:
        self._daily_withdraw_limit = to_decimal(value)

    @property
    def withdrawn_today(self) -> Decimal:
        return self._withdrawn_today

    @property
    def last_withdraw_date(self) -> Optional[date]:
        return self._last_withdraw_date

    @property
    def transaction_history(self) -> List[TransactionRecord]:
        """Copy of the history; mutating it does not affect the account"""
        return list(self._history)

    # Deposits and withdrawals

    def deposit(self, amount: Numeric) -> None:
        """
        Add amount to the balance. No validation: negative amounts are
        accepted and reduce the balance.
        """
        amount = to_decimal(amount)
        self._balance += amount

        self._record(
            TransactionType.DEPOSIT, amount,
            f"Deposit of {amount} {self._currency.code}"
        )
        self._notify("log_activity", self._account_id, f"Deposit: {amount} {self._currency.code}")

        if amount > self._large_deposit_threshold:
            self._notify(
                "send_email", self._owner_email, "Large deposit",
                f"A deposit of {amount} {self._currency.code} was made to account {self._account_id}"
            )

    def withdraw(self, amount: Numeric) -> None:
        """
        Subtract amount from the balance, enforcing the daily withdrawal limit

        Raises:
            LimitExceededError: If today's withdrawals plus amount would exceed
                the daily limit. Balance and history are left untouched.
        """
        self._withdraw(amount, check_daily_limit=True)

    def _withdraw(self, amount: Numeric, check_daily_limit: bool) -> None:
        amount = to_decimal(amount)

        if check_daily_limit:
            self._reset_daily_limit_if_needed()

            if self._withdrawn_today + amount > self._daily_withdraw_limit:
                log_action(
                    logger, "warning", "Daily withdrawal limit exceeded",
                    account_id=self._account_id, action="withdraw",
                    extra={
                        "requested": str(amount),
                        "withdrawn_today": str(self._withdrawn_today),
                        "limit": str(self._daily_withdraw_limit)
                    }
                )
                raise LimitExceededError(
                    self._daily_withdraw_limit, self._withdrawn_today, amount
                )

            self._withdrawn_today += amount
            self._last_withdraw_date = self._today()

        self._balance -= amount

        self._record(
            TransactionType.WITHDRAW, amount,
            f"Withdrawal of {amount} {self._currency.code}"
        )
        self._notify("log_activity", self._account_id, f"Withdraw: {amount} {self._currency.code}")

        if amount > self._large_withdrawal_threshold:
            self._notify(
                "send_sms", self._owner_phone,
                f"Withdrawal of {amount} {self._currency.code} from account {self._account_id}"
            )

    def _reset_daily_limit_if_needed(self) -> None:
        """Zero the daily counter on the first limited withdrawal of a new day"""
        if self._last_withdraw_date is None or self._last_withdraw_date < self._today():
            self._withdrawn_today = Decimal('0')

    # Transfers

    def transfer_funds(self, destination: 'Account', amount: Numeric) -> None:
        """
        Move amount to destination without any validation.

        The destination is credited first, then this account is debited
        outside the daily limit. A failing debit does not undo the credit.
        """
        destination.deposit(amount)
        self._withdraw(amount, check_daily_limit=False)

    def transfer_min_funds(self, destination: 'Account', amount: Numeric) -> 'Account':
        """
        Move amount to destination if this account stays above its minimum balance

        Returns:
            The destination account

        Raises:
            InsufficientFundsError: If amount is not positive, or if the
                remaining balance would not be strictly above the minimum
        """
        amount = to_decimal(amount)
        if amount <= 0:
            self._refuse("transfer_min_funds", amount, "non-positive amount")
            raise InsufficientFundsError()

        if self._balance - amount > self._min_balance:
            destination.deposit(amount)
            self._withdraw(amount, check_daily_limit=False)
        else:
            self._refuse("transfer_min_funds", amount, "insufficient funds")
            raise InsufficientFundsError()

        return destination

    def transfer_local_to_foreign(self, destination: 'Account', amount: Numeric) -> None:
        """
        Debit amount in local currency and credit its foreign-currency
        equivalent to destination.

        Raises:
            InvalidArgumentError: If amount is not positive
            InsufficientFundsError: If the remaining balance would be at or
                below the minimum
        """
        amount = self._validate_cross_currency_transfer("transfer_local_to_foreign", amount)
        converted = self.convert_local_to_foreign(amount)

        self._withdraw(amount, check_daily_limit=False)
        destination.deposit(converted)

    def transfer_foreign_to_local(self, destination: 'Account', amount: Numeric) -> None:
        """
        Debit amount in foreign currency and credit its local-currency
        equivalent to destination.

        Raises:
            InvalidArgumentError: If amount is not positive
            InsufficientFundsError: If the remaining balance would be at or
                below the minimum
        """
        amount = self._validate_cross_currency_transfer("transfer_foreign_to_local", amount)
        converted = self.convert_foreign_to_local(amount)

        self._withdraw(amount, check_daily_limit=False)
        destination.deposit(converted)

    def _validate_cross_currency_transfer(self, action: str, amount: Numeric) -> Decimal:
        amount = to_decimal(amount)
        if amount <= 0:
            self._refuse(action, amount, "non-positive amount")
            raise InvalidArgumentError("Amount must be positive")

        # Landing exactly on the minimum fails
        if self._balance - amount <= self._min_balance:
            self._refuse(action, amount, "insufficient funds")
            raise InsufficientFundsError()

        return amount

    # Currency conversion

    def convert_local_to_foreign(self, amount: Numeric) -> Decimal:
        """Convert a local-currency amount at the provider's current rate"""
        amount = to_decimal(amount)
        if amount <= 0:
            raise InvalidArgumentError("Amount must be positive")

        rate = to_decimal(self._rate_provider.get_rate())
        return amount / rate

    def convert_foreign_to_local(self, amount: Numeric) -> Decimal:
        """Convert a foreign-currency amount at the provider's current rate"""
        amount = to_decimal(amount)
        if amount <= 0:
            raise InvalidArgumentError("Amount must be positive")

        rate = to_decimal(self._rate_provider.get_rate())
        return amount * rate

    # Interest

    def calculate_interest(self, days: int) -> Decimal:
        """
        Simple interest on the current balance: balance * rate * days / 365

        Raises:
            InvalidArgumentError: If days is not positive
        """
        if days <= 0:
            raise InvalidArgumentError("Number of days must be positive")

        return self._balance * self._interest_rate * (to_decimal(days) / self._days_per_year)

    def apply_interest(self, days: int) -> None:
        """Credit simple interest for days to the balance"""
        interest = self.calculate_interest(days)
        self._balance += interest

        self._record(TransactionType.INTEREST, interest, f"Interest for {days} days")
        self._notify(
            "log_activity", self._account_id,
            f"Interest applied: {interest} {self._currency.code} for {days} days"
        )

    # Queries

    def has_sufficient_balance(self, amount: Numeric) -> bool:
        """Whether balance covers amount plus the minimum balance"""
        return self._balance >= to_decimal(amount) + self._min_balance

    def get_transactions_by_date_range(self, start: datetime, end: datetime) -> List[TransactionRecord]:
        """Transactions with start <= timestamp <= end"""
        return filter_by_date_range(self._history, start, end)

    def get_transactions_by_type(self, kind: Union[TransactionType, str]) -> List[TransactionRecord]:
        """Transactions of one kind; string kinds match case-insensitively"""
        return filter_by_type(self._history, kind)

    def get_total_deposits(self) -> Decimal:
        return total_amount(self._history, TransactionType.DEPOSIT)

    def get_total_withdrawals(self) -> Decimal:
        return total_amount(self._history, TransactionType.WITHDRAW)

    def build_report(self) -> AccountReport:
        """Snapshot the figures shown in the account report"""
        return AccountReport(
            account_id=self._account_id,
            currency=self._currency,
            balance=self._balance,
            min_balance=self._min_balance,
            daily_withdraw_limit=self._daily_withdraw_limit,
            withdrawn_today=self._withdrawn_today,
            transaction_count=len(self._history),
            total_deposits=self.get_total_deposits(),
            total_withdrawals=self.get_total_withdrawals(),
            interest_rate=self._interest_rate
        )

    def generate_account_report(self) -> str:
        """Render the account report as text and log that it was generated"""
        report = self.build_report().render()
        self._notify("log_activity", self._account_id, "Account report generated")
        return report

    # Helpers

    def _today(self) -> date:
        return self._clock().date()

    def _record(self, kind: TransactionType, amount: Decimal, description: str) -> None:
        """Append a history record reflecting the balance just set"""
        self._history.append(TransactionRecord(
            timestamp=self._clock(),
            kind=kind,
            amount=amount,
            balance_after=self._balance,
            description=description
        ))
        log_action(
            logger, "debug", description,
            account_id=self._account_id, action=kind.value.lower(),
            extra={"amount": str(amount), "balance_after": str(self._balance)}
        )

    def _refuse(self, action: str, amount: Decimal, reason: str) -> None:
        log_action(
            logger, "warning", f"Transfer refused: {reason}",
            account_id=self._account_id, action=action,
            extra={"amount": str(amount), "balance": str(self._balance)}
        )

    def _notify(self, method: str, *args) -> None:
        """Call a notifier method if a notifier is set; failures are logged and dropped"""
        if self._notifier is None:
            return
        try:
            getattr(self._notifier, method)(*args)
        except Exception:
            logger.warning(
                f"Notifier {method} failed for account {self._account_id}",
                exc_info=True
            )

    def __repr__(self) -> str:
        return (
            f"Account(id={self._account_id!r}, balance={self._balance}, "
            f"currency={self._currency.code})"
        )
