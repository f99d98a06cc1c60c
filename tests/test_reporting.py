"""
Tests for account report rendering
"""

from decimal import Decimal

from bank_ledger.currency import Currency
from bank_ledger.reporting import AccountReport


def make_report(**overrides):
    values = dict(
        account_id="ACC001",
        currency=Currency.RON,
        balance=Decimal('1234.5'),
        min_balance=Decimal('1'),
        daily_withdraw_limit=Decimal('10000'),
        withdrawn_today=Decimal('0'),
        transaction_count=3,
        total_deposits=Decimal('1500'),
        total_withdrawals=Decimal('265.5'),
        interest_rate=Decimal('0.02'),
    )
    values.update(overrides)
    return AccountReport(**values)


class TestAccountReport:
    """Test AccountReport rendering"""
    
    def test_render_lines(self):
        """Test every line of the rendered report"""
        lines = make_report().render().splitlines()
        
        assert lines == [
            "=== Account Report ACC001 ===",
            "Current balance: 1234.50 RON",
            "Minimum balance: 1.00 RON",
            "Daily withdrawal limit: 10000.00 RON",
            "Withdrawn today: 0.00 RON",
            "Transaction count: 3",
            "Total deposits: 1500.00 RON",
            "Total withdrawals: 265.50 RON",
            "Interest rate: 2.00%",
        ]
    
    def test_render_rounds_to_cents(self):
        """Test long fractional amounts are shown with two decimals"""
        report = make_report(balance=Decimal('10.005479452054794520547945205'))
        assert "Current balance: 10.01 RON" in report.render()
    
    def test_render_uses_account_currency(self):
        """Test amounts are labelled with the account currency"""
        report = make_report(currency=Currency.EUR)
        assert "Current balance: 1234.50 EUR" in report.render()
    
    def test_render_ends_with_newline(self):
        """Test the report text is newline-terminated"""
        assert make_report().render().endswith("\n")
    
    def test_render_uses_currency_precision(self):
        """Test zero-decimal currencies are shown without cents"""
        report = make_report(currency=Currency.JPY, balance=Decimal('1234.6'))
        text = report.render()
        
        assert "Current balance: 1235 JPY" in text
        assert "Minimum balance: 1 JPY" in text
        assert "Interest rate: 2.00%" in text
