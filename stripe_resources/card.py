"""Card brand and card funding type."""

from __future__ import annotations

from enum import StrEnum

__all__ = ["CardBrand", "CardType"]


class CardBrand(StrEnum):
    """The brand of a card; unrecognised names map to UNKNOWN."""

    AMERICAN_EXPRESS = "American Express"
    DINERS_CLUB = "Diners Club"
    DISCOVER = "Discover"
    JCB = "JCB"
    VISA = "Visa"
    MASTER_CARD = "MasterCard"
    UNION_PAY = "UnionPay"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> CardBrand | None:
        if isinstance(value, str):
            return cls.UNKNOWN
        return None

    @classmethod
    def default(cls) -> CardBrand:
        """The brand used when none is given."""
        return cls.UNKNOWN


class CardType(StrEnum):
    """The funding type of a card; unrecognised names map to UNKNOWN."""

    CREDIT = "credit"
    DEBIT = "debit"
    PREPAID = "prepaid"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> CardType | None:
        if isinstance(value, str):
            return cls.UNKNOWN
        return None

    @classmethod
    def default(cls) -> CardType:
        """The type used when none is given."""
        return cls.UNKNOWN