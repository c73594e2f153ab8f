"""Enumerations for balance transactions, fees and bank accounts."""

from __future__ import annotations

from enum import StrEnum

__all__ = ["BalanceTransactionStatus", "FeeType", "BankAccountStatus"]


class BalanceTransactionStatus(StrEnum):
    """Whether a balance transaction's funds are available yet."""

    AVAILABLE = "available"
    PENDING = "pending"

    @classmethod
    def default(cls) -> BalanceTransactionStatus:
        """The status used when none is given."""
        return cls.PENDING


class FeeType(StrEnum):
    """The kind of a fee on a balance transaction."""

    APPLICATION_FEE = "application_fee"
    STRIPE_FEE = "stripe_fee"
    TAX = "tax"

    @classmethod
    def default(cls) -> FeeType:
        """The fee type used when none is given."""
        return cls.APPLICATION_FEE


class BankAccountStatus(StrEnum):
    """The verification state of a bank account."""

    ERRORED = "errored"
    NEW = "new"
    VALIDATED = "validated"
    VERIFICATION_FAILED = "verification_failed"
    VERIFIED = "verified"