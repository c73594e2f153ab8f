"""Enumerations for sources, orders, recipients, reviews, tokens and webhook endpoints."""

from __future__ import annotations

from enum import StrEnum

__all__ = [
    "SourceStatus",
    "SourceUsage",
    "SourceRedirectFlowFailureReason",
    "SourceRedirectFlowStatus",
    "OrderStatusFilter",
    "RecipientType",
    "ReviewReason",
    "TokenType",
    "WebhookEndpointStatus",
]


class SourceStatus(StrEnum):
    """The state of a payment source."""

    CANCELED = "canceled"
    CHARGEABLE = "chargeable"
    CONSUMED = "consumed"
    FAILED = "failed"
    PENDING = "pending"

    @classmethod
    def default(cls) -> SourceStatus:
        """The status used when none is given."""
        return cls.PENDING


class SourceUsage(StrEnum):
    """Whether a source can be charged more than once."""

    REUSABLE = "reusable"
    SINGLE_USE = "single_use"


class SourceRedirectFlowFailureReason(StrEnum):
    """Why a source's redirect flow failed."""

    DECLINED = "declined"
    PROCESSING_ERROR = "processing_error"
    USER_ABORT = "user_abort"

    @classmethod
    def default(cls) -> SourceRedirectFlowFailureReason:
        """The failure reason used when none is given."""
        return cls.DECLINED


class SourceRedirectFlowStatus(StrEnum):
    """Progress of a source's redirect flow."""

    FAILED = "failed"
    NOT_REQUIRED = "not_required"
    PENDING = "pending"
    SUCCEEDED = "succeeded"

    @classmethod
    def default(cls) -> SourceRedirectFlowStatus:
        """The status used when none is given."""
        return cls.PENDING


class OrderStatusFilter(StrEnum):
    """Order status to filter an order listing by."""

    CREATED = "created"
    FULFILLED = "fulfilled"
    PAID = "paid"
    REFUNDED = "refunded"


class RecipientType(StrEnum):
    """Whether a recipient is a company or a person."""

    CORPORATION = "corporation"
    INDIVIDUAL = "individual"

    @classmethod
    def default(cls) -> RecipientType:
        """The recipient type used when none is given."""
        return cls.CORPORATION


class ReviewReason(StrEnum):
    """Why a review was opened or closed."""

    APPROVED = "approved"
    DISPUTED = "disputed"
    MANUAL = "manual"
    REFUNDED = "refunded"
    REFUNDED_AS_FRAUD = "refunded_as_fraud"
    RULE = "rule"

    @classmethod
    def default(cls) -> ReviewReason:
        """The reason used when none is given."""
        return cls.APPROVED


class TokenType(StrEnum):
    """The kind of data a token stands for."""

    ACCOUNT = "account"
    BANK_ACCOUNT = "bank_account"
    CARD = "card"
    PII = "pii"

    @classmethod
    def default(cls) -> TokenType:
        """The token type used when none is given."""
        return cls.ACCOUNT


class WebhookEndpointStatus(StrEnum):
    """Whether a webhook endpoint receives events."""

    DISABLED = "disabled"
    ENABLED = "enabled"