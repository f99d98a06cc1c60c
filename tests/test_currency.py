"""
Test suite for currency module

Tests currency lookup, Decimal coercion and the fixed rate provider.
"""

import pytest
from decimal import Decimal

from bank_ledger.currency import Currency, FixedRateProvider, RateProvider, to_decimal
from bank_ledger.errors import InvalidArgumentError


class TestCurrency:
    """Test Currency enum"""
    
    def test_currency_attributes(self):
        """Test currencies carry code and precision"""
        assert Currency.RON.code == "RON"
        assert Currency.RON.precision == 2
        assert Currency.JPY.precision == 0
    
    def test_from_code(self):
        """Test lookup is case-insensitive"""
        assert Currency.from_code("eur") == Currency.EUR
        assert Currency.from_code("RON") == Currency.RON
    
    def test_from_unknown_code(self):
        """Test unknown codes are rejected"""
        with pytest.raises(ValueError, match="Unsupported currency code"):
            Currency.from_code("XYZ")


class TestToDecimal:
    """Test Decimal coercion"""
    
    def test_decimal_passthrough(self):
        """Test Decimal values are returned unchanged"""
        value = Decimal('12.345')
        assert to_decimal(value) is value
    
    def test_int_and_str(self):
        """Test ints and numeric strings convert exactly"""
        assert to_decimal(42) == Decimal('42')
        assert to_decimal(" 100.50 ") == Decimal('100.50')
        assert to_decimal("-3") == Decimal('-3')
    
    def test_float_goes_through_str(self):
        """Test floats convert without binary expansion"""
        assert to_decimal(0.1) == Decimal('0.1')
        assert to_decimal(4.97) == Decimal('4.97')
    
    @pytest.mark.parametrize("value", ["abc", "", True, None])
    def test_invalid_values(self, value):
        """Test non-numeric values raise ValueError"""
        with pytest.raises(ValueError):
            to_decimal(value)


class TestFixedRateProvider:
    """Test FixedRateProvider"""
    
    def test_default_rate(self):
        """Test the default EUR rate"""
        provider = FixedRateProvider()
        assert provider.get_rate() == Decimal('4.97')
        assert isinstance(provider, RateProvider)
    
    def test_custom_rate(self):
        """Test a custom rate is coerced to Decimal"""
        provider = FixedRateProvider(5.0)
        assert provider.get_rate() == Decimal('5')
        assert "5.0" in repr(provider)
    
    @pytest.mark.parametrize("rate", [0, -1, "-4.97"])
    def test_non_positive_rate(self, rate):
        """Test non-positive rates are rejected"""
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            FixedRateProvider(rate)
    
    def test_rate_provider_is_abstract(self):
        """Test RateProvider cannot be instantiated"""
        with pytest.raises(TypeError):
            RateProvider()


class TestNonFinite:
    """Test non-finite values are refused"""
    
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "nan", Decimal("Infinity"), Decimal("sNaN")])
    def test_rejected(self, value):
        """Test NaN and infinities raise InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="finite"):
            to_decimal(value)
    
    def test_non_finite_rate_rejected(self):
        """Test a fixed provider cannot be built with NaN"""
        with pytest.raises(InvalidArgumentError):
            FixedRateProvider(float("nan"))
