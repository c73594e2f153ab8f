"""Request parameters for customers, invoices, subscriptions, usage records and related calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import Any

from stripe_resources.currency import Currency

__all__ = [
    "CustomerPaymentMethodRetrievalType",
    "CustomerPaymentMethodRetrieval",
    "VerifyBankAccount",
    "SubscriptionItemFilter",
    "RetrieveUpcomingInvoice",
    "CreateInvoiceLineItem",
    "CancelSubscription",
    "UsageRecordAction",
    "CreateUsageRecord",
    "CreateLoginLink",
    "ConfirmSetupIntent",
    "CancelSetupIntent",
]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1


def _check_int(name: str, value: Any, low: int, high: int) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} out of range: {value}")


def _wire(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, (list, tuple)):
        return list(value)
    return value


def _compact(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    """Build a parameter mapping in the given order, leaving out None values."""
    return {key: _wire(value) for key, value in pairs if value is not None}


class CustomerPaymentMethodRetrievalType(StrEnum):
    """The payment method type to filter a customer's payment methods by."""

    ACSS_DEBIT = "acss_debit"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    ALIPAY = "alipay"
    AU_BECS_DEBIT = "au_becs_debit"
    BACS_DEBIT = "bacs_debit"
    BANCONTACT = "bancontact"
    BOLETO = "boleto"
    CARD = "card"
    EPS = "eps"
    FPX = "fpx"
    GIROPAY = "giropay"
    GRABPAY = "grabpay"
    IDEAL = "ideal"
    KLARNA = "klarna"
    OXXO = "oxxo"
    P24 = "p24"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    WECHAT_PAY = "wechat_pay"


@dataclass(slots=True)
class CustomerPaymentMethodRetrieval:
    """Parameters for listing the payment methods of a customer."""

    type_: CustomerPaymentMethodRetrievalType
    ending_before: str | None = None
    expand: list[str] = field(default_factory=list)
    limit: int | None = None
    starting_after: str | None = None

    def __post_init__(self) -> None:
        self.type_ = CustomerPaymentMethodRetrievalType(self.type_)
        self.expand = list(self.expand)
        _check_int("limit", self.limit, _I32_MIN, _I32_MAX)

    def to_params(self) -> dict[str, Any]:
        """The query parameters; unset values and an empty expand list are left out."""
        return _compact(
            [
                ("ending_before", self.ending_before),
                ("expand", self.expand or None),
                ("limit", self.limit),
                ("starting_after", self.starting_after),
                ("type", self.type_),
            ]
        )


@dataclass(slots=True)
class VerifyBankAccount:
    """Parameters for verifying a customer's bank account."""

    amounts: list[int] | None = None
    verification_method: str | None = None

    def __post_init__(self) -> None:
        if self.amounts is not None:
            self.amounts = list(self.amounts)
            for amount in self.amounts:
                _check_int("amounts", amount, _I64_MIN, _I64_MAX)

    def to_params(self) -> dict[str, Any]:
        """The request parameters, leaving out those not set."""
        return _compact(
            [
                ("amounts", self.amounts),
                ("verification_method", self.verification_method),
            ]
        )


@dataclass(slots=True)
class SubscriptionItemFilter:
    """A subscription item to include when previewing an upcoming invoice."""

    id: str | None = None
    deleted: bool | None = None
    metadata: dict[str, str] | None = None
    plan: str | None = None
    quantity: int | None = None

    def __post_init__(self) -> None:
        _check_int("quantity", self.quantity, 0, _U64_MAX)

    def to_params(self) -> dict[str, Any]:
        """The request parameters, leaving out those not set."""
        return _compact(
            [
                ("id", self.id),
                ("deleted", self.deleted),
                ("metadata", self.metadata),
                ("plan", self.plan),
                ("quantity", self.quantity),
            ]
        )


@dataclass(slots=True)
class RetrieveUpcomingInvoice:
    """Parameters for previewing a customer's upcoming invoice."""

    customer: str
    coupon: str | None = None
    subscription: str | None = None
    subscription_items: SubscriptionItemFilter | None = None
    subscription_prorate: bool | None = None
    subscription_proration_date: int | None = None
    subscription_tax_percent: float | None = None
    subscription_trial_end: int | None = None

    def __post_init__(self) -> None:
        _check_int(
            "subscription_proration_date", self.subscription_proration_date, _I64_MIN, _I64_MAX
        )
        _check_int("subscription_trial_end", self.subscription_trial_end, _I64_MIN, _I64_MAX)

    def to_params(self) -> dict[str, Any]:
        """The query parameters; the customer is always present."""
        items = self.subscription_items.to_params() if self.subscription_items else None
        params: dict[str, Any] = {"customer": self.customer}
        params.update(
            _compact(
                [
                    ("coupon", self.coupon),
                    ("subscription", self.subscription),
                    ("subscription_items", items),
                    ("subscription_prorate", self.subscription_prorate),
                    ("subscription_proration_date", self.subscription_proration_date),
                    ("subscription_tax_percent", self.subscription_tax_percent),
                    ("subscription_trial_end", self.subscription_trial_end),
                ]
            )
        )
        return params


@dataclass(slots=True)
class CreateInvoiceLineItem:
    """Parameters for creating an invoice line item."""

    amount: int | None = None
    currency: Currency | None = None
    customer: str | None = None
    description: str | None = None
    discountable: bool | None = None
    invoice: str | None = None
    subscription: bool | None = None

    def __post_init__(self) -> None:
        _check_int("amount", self.amount, _I64_MIN, _I64_MAX)
        if self.currency is not None:
            self.currency = Currency(self.currency)

    def to_params(self) -> dict[str, Any]:
        """The request parameters, leaving out those not set."""
        return _compact(
            [
                ("amount", self.amount),
                ("currency", self.currency),
                ("customer", self.customer),
                ("description", self.description),
                ("discountable", self.discountable),
                ("invoice", self.invoice),
                ("subscription", self.subscription),
            ]
        )


@dataclass(slots=True)
class CancelSubscription:
    """Parameters for cancelling a subscription."""

    at_period_end: bool | None = None

    def to_params(self) -> dict[str, Any]:
        """The query parameters, leaving out those not set."""
        return _compact([("at_period_end", self.at_period_end)])


class UsageRecordAction(StrEnum):
    """Whether a usage quantity is added to or replaces the recorded usage."""

    INCREMENT = "increment"
    SET = "set"


@dataclass(slots=True)
class CreateUsageRecord:
    """Parameters for reporting usage on a subscription item."""

    quantity: int = 0
    action: UsageRecordAction | None = None
    timestamp: int | None = None

    def __post_init__(self) -> None:
        _check_int("quantity", self.quantity, 0, _U64_MAX)
        _check_int("timestamp", self.timestamp, _I64_MIN, _I64_MAX)
        if self.action is not None:
            self.action = UsageRecordAction(self.action)

    def to_params(self) -> dict[str, Any]:
        """The request parameters; the quantity is always present."""
        params: dict[str, Any] = {"quantity": self.quantity}
        params.update(_compact([("action", self.action), ("timestamp", self.timestamp)]))
        return params


@dataclass(slots=True)
class CreateLoginLink:
    """Parameters for creating a dashboard login link for a connected account."""

    expand: list[str] = field(default_factory=list)
    redirect_url: str | None = None

    def __post_init__(self) -> None:
        self.expand = list(self.expand)

    def to_params(self) -> dict[str, Any]:
        """The request parameters; unset values and an empty expand list are left out."""
        return _compact([("expand", self.expand or None), ("redirect_url", self.redirect_url)])


@dataclass(slots=True)
class ConfirmSetupIntent:
    """Parameters for confirming a setup intent."""

    client_secret: str | None = None
    payment_method: str | None = None
    redirect_url: str | None = None

    def to_params(self) -> dict[str, Any]:
        """The request parameters, leaving out those not set."""
        return _compact(
            [
                ("client_secret", self.client_secret),
                ("payment_method", self.payment_method),
                ("redirect_url", self.redirect_url),
            ]
        )


@dataclass(slots=True)
class CancelSetupIntent:
    """Parameters for cancelling a setup intent; there are none."""

    def to_params(self) -> dict[str, Any]:
        """The request parameters: always empty."""
        return {}