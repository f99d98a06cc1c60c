"""
Bank Ledger

A single-account, in-memory ledger: balance mutation, transaction history,
per-day withdrawal throttling, currency conversion and simple interest,
with all monetary values held as Decimal.
"""

__version__ = "1.0.0"
