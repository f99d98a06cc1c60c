"""
Tests for configuration management
"""

import pytest
from decimal import Decimal

from bank_ledger import config as config_module
from bank_ledger.accounts import Account
from bank_ledger.config import LedgerConfig, get_config, reload_config


@pytest.fixture
def restore_config():
    yield
    reload_config()


class TestLedgerConfig:
    """Test LedgerConfig defaults and environment overrides"""
    
    def test_defaults(self, monkeypatch):
        """Test the built-in business rules"""
        for name in ("MIN_BALANCE", "DAILY_WITHDRAW_LIMIT", "INTEREST_RATE"):
            monkeypatch.delenv(f"LEDGER_{name}", raising=False)
        
        config = LedgerConfig()
        
        assert config.min_balance == "1"
        assert config.daily_withdraw_limit == "10000"
        assert config.interest_rate == "0.02"
        assert config.days_per_year == 365
        assert config.large_deposit_threshold == "50000"
        assert config.large_withdrawal_threshold == "5000"
        assert config.default_exchange_rate == "4.97"
    
    def test_environment_override(self, monkeypatch):
        """Test LEDGER_ prefixed variables override defaults"""
        monkeypatch.setenv("LEDGER_DAILY_WITHDRAW_LIMIT", "500")
        monkeypatch.setenv("ledger_owner_email", "alerts@example.com")
        
        config = LedgerConfig()
        
        assert config.daily_withdraw_limit == "500"
        assert config.owner_email == "alerts@example.com"
    
    def test_reload_config(self, monkeypatch, restore_config):
        """Test reload replaces the global instance"""
        before = get_config()
        monkeypatch.setenv("LEDGER_MIN_BALANCE", "50")
        
        after = reload_config()
        
        assert after is not before
        assert get_config() is after
        assert config_module.config is after
        assert after.min_balance == "50"
    
    def test_account_uses_global_config(self, monkeypatch, restore_config):
        """Test accounts without explicit config read the global one"""
        monkeypatch.setenv("LEDGER_INTEREST_RATE", "0.05")
        reload_config()
        
        account = Account(1000)
        
        assert account.interest_rate == Decimal('0.05')
        assert account.calculate_interest(365) == Decimal('50')
    
    def test_account_snapshots_config(self, monkeypatch, restore_config):
        """Test reloading config does not change existing accounts"""
        account = Account(1000, config=LedgerConfig(daily_withdraw_limit="700"))
        monkeypatch.setenv("LEDGER_DAILY_WITHDRAW_LIMIT", "9")
        reload_config()
        
        assert account.daily_withdraw_limit == Decimal('700')
