"""Payment intents, payment errors, payment sources and charge parameters."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, StrEnum
from typing import Any

from stripe_resources.currency import Currency

__all__ = [
    "PaymentErrorType",
    "PaymentError",
    "PaymentIntentMethodType",
    "CaptureMethod",
    "ConfirmationMethod",
    "PaymentIntentNextActionType",
    "PaymentIntentUpdateParams",
    "PaymentIntentConfirmParams",
    "CapturePaymentIntent",
    "CancelPaymentIntent",
    "PaymentSourceParams",
    "ChargeSourceParams",
    "BankAccountParams",
    "CardParams",
    "CaptureCharge",
    "AttachPaymentMethod",
]

_U64_MAX = 2**64 - 1


def _wire(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return dict(value)
    return value


def _compact(obj: Any) -> dict[str, Any]:
    """Serialise a dataclass, leaving out fields that are None."""
    return {
        f.name: _wire(getattr(obj, f.name))
        for f in fields(obj)
        if getattr(obj, f.name) is not None
    }


def _check_unsigned(obj: Any, *names: str) -> None:
    for name in names:
        value = getattr(obj, name)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an integer, got {value!r}")
        if not 0 <= value <= _U64_MAX:
            raise ValueError(f"{name} out of range: {value}")


class _OpenEnum(StrEnum):
    """A string enum whose unrecognised values read as OTHER, which cannot be sent."""

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if isinstance(value, str):
            return cls.OTHER  # type: ignore[attr-defined]
        return None

    def _outgoing(self) -> str:
        if self is type(self).OTHER:  # type: ignore[attr-defined]
            raise ValueError(f"{type(self).__name__}.OTHER cannot be sent in a request")
        return self.value


class PaymentErrorType(_OpenEnum):
    """The category of a payment error."""

    API = "api_error"
    CONNECTION = "api_connection_error"
    AUTHENTICATION = "authentication_error"
    CARD = "card_error"
    IDEMPOTENCY = "idempotency_error"
    INVALID_REQUEST = "invalid_request_error"
    RATE_LIMIT = "rate_limit_error"
    OTHER = "other"

    def to_json(self) -> str:
        """The wire form; OTHER has none and raises ValueError."""
        return self._outgoing()


class PaymentIntentMethodType(StrEnum):
    """The way a payment intent needs to be fulfilled."""

    CARD = "card"
    IDEAL = "ideal"
    SEPA_DEBIT = "sepa_debit"


class CaptureMethod(_OpenEnum):
    """When the funds of a payment intent are captured."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"
    OTHER = "other"

    def to_json(self) -> str:
        """The wire form; OTHER has none and raises ValueError."""
        return self._outgoing()


class ConfirmationMethod(_OpenEnum):
    """Which key may confirm a payment intent."""

    SECRET = "secret"
    PUBLISHABLE = "publishable"
    OTHER = "other"

    def to_json(self) -> str:
        """The wire form; OTHER has none and raises ValueError."""
        return self._outgoing()


class PaymentIntentNextActionType(_OpenEnum):
    """The action the customer must take next on a payment intent."""

    REDIRECT_TO_URL = "redirect_to_url"
    USE_STRIPE_SDK = "use_stripe_sdk"
    OTHER = "other"

    def to_json(self) -> str:
        """The wire form; OTHER has none and raises ValueError."""
        return self._outgoing()


_ERROR_TEXT_FIELDS = ("charge", "code", "decline_code", "doc_url", "message", "param")


@dataclass(slots=True)
class PaymentError:
    """The last error seen while attempting a payment.

    ``source`` holds either the payment source's id or its expanded object.
    """

    payment_error_type: PaymentErrorType
    charge: str | None = None
    code: str | None = None
    decline_code: str | None = None
    doc_url: str | None = None
    message: str | None = None
    param: str | None = None
    source: str | dict[str, Any] | None = None

    def to_json(self) -> dict[str, Any]:
        """The wire form; unset fields are written as null."""
        data: dict[str, Any] = {"type": PaymentErrorType(self.payment_error_type).to_json()}
        for name in _ERROR_TEXT_FIELDS:
            data[name] = getattr(self, name)
        data["source"] = dict(self.source) if isinstance(self.source, dict) else self.source
        return data

    @classmethod
    def from_json(cls, data: Any) -> PaymentError:
        """Read the wire form, raising ValueError if it is malformed."""
        if not isinstance(data, dict):
            raise ValueError(f"payment error must be an object, got {data!r}")
        if "type" not in data:
            raise ValueError("missing field `type`")
        raw_type = data["type"]
        if not isinstance(raw_type, str):
            raise ValueError(f"type must be a string, got {raw_type!r}")
        texts: dict[str, str | None] = {}
        for name in _ERROR_TEXT_FIELDS:
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
            texts[name] = value
        source = data.get("source")
        if source is not None and not isinstance(source, (str, dict)):
            raise ValueError(f"source must be an id or an object, got {source!r}")
        return cls(
            payment_error_type=PaymentErrorType(raw_type),
            source=dict(source) if isinstance(source, dict) else source,
            **texts,
        )


@dataclass(slots=True)
class PaymentIntentUpdateParams:
    """Parameters for updating a payment intent."""

    amount: int | None = None
    application_fee_amount: int | None = None
    currency: Currency | None = None
    customer: str | None = None
    description: str | None = None
    metadata: dict[str, str] | None = None
    receipt_email: str | None = None
    save_source_to_customer: bool | None = None
    shipping: dict[str, Any] | None = None
    source: str | None = None
    transfer_group: str | None = None

    def __post_init__(self) -> None:
        _check_unsigned(self, "amount", "application_fee_amount")
        if self.currency is not None:
            self.currency = Currency(self.currency)

    def to_params(self) -> dict[str, Any]:
        """The request parameters, leaving out those not set."""
        return _compact(self)


@dataclass(slots=True)
class PaymentIntentConfirmParams:
    """Parameters for confirming a payment intent."""

    receipt_email: str | None = None
    return_url: str | None = None
    save_source_to_customer: bool | None = None
    shipping: dict[str, Any] | None = None
    source: str | None = None

    def to_params(self) -> dict[str, Any]:
        """The request parameters, leaving out those not set."""
        return _compact(self)


@dataclass(slots=True)
class CapturePaymentIntent:
    """Parameters for capturing an uncaptured payment intent."""

    amount_to_capture: int | None = None
    application_fee_amount: int | None = None

    def __post_init__(self) -> None:
        _check_unsigned(self, "amount_to_capture", "application_fee_amount")

    def to_params(self) -> dict[str, Any]:
        """The request parameters, leaving out those not set."""
        return _compact(self)


@dataclass(slots=True)
class CancelPaymentIntent:
    """Parameters for cancelling a payment intent."""

    cancellation_reason: str | None = None

    def to_params(self) -> dict[str, Any]:
        """The request parameters, leaving out those not set."""
        return _compact(self)


def _from_prefixed_id(cls: type, data: Any, prefixes: dict[str, str], what: str) -> Any:
    if not isinstance(data, str):
        raise ValueError(f"{what} must be an id string, got {data!r}")
    for prefix, name in prefixes.items():
        if data.startswith(prefix):
            return cls(**{name: data})
    raise ValueError(f"unrecognised {what} id: {data!r}")


def _single_id(obj: Any) -> str:
    chosen = [getattr(obj, f.name) for f in fields(obj) if getattr(obj, f.name) is not None]
    if len(chosen) != 1:
        raise ValueError(f"{type(obj).__name__} needs exactly one id, got {len(chosen)}")
    if not isinstance(chosen[0], str) or not chosen[0]:
        raise ValueError(f"{type(obj).__name__} id must be a non-empty string")
    return chosen[0]


@dataclass(frozen=True, slots=True)
class PaymentSourceParams:
    """A token or an existing source used to attach a payment method to a customer."""

    token: str | None = None
    source: str | None = None

    def __post_init__(self) -> None:
        _single_id(self)

    def to_json(self) -> str:
        """The wire form: the bare id."""
        return _single_id(self)

    @classmethod
    def from_json(cls, data: Any) -> PaymentSourceParams:
        """Read a bare id, telling tokens from sources by prefix."""
        return _from_prefixed_id(
            cls, data, {"tok_": "token", "btok_": "token", "src_": "source"}, "payment source"
        )


@dataclass(frozen=True, slots=True)
class ChargeSourceParams:
    """The payment source a charge is created from."""

    token: str | None = None
    source: str | None = None
    card: str | None = None
    bank_account: str | None = None
    account: str | None = None

    def __post_init__(self) -> None:
        _single_id(self)

    def to_json(self) -> str:
        """The wire form: the bare id."""
        return _single_id(self)

    @classmethod
    def from_json(cls, data: Any) -> ChargeSourceParams:
        """Read a bare id, telling the kinds apart by prefix."""
        return _from_prefixed_id(
            cls,
            data,
            {
                "tok_": "token",
                "btok_": "token",
                "src_": "source",
                "card_": "card",
                "ba_": "bank_account",
                "acct_": "account",
            },
            "charge source",
        )


@dataclass(slots=True)
class BankAccountParams:
    """Raw bank account details for creating a bank account source."""

    country: str = ""
    currency: Currency = field(default_factory=Currency.default)
    account_holder_name: str | None = None
    account_holder_type: str | None = None
    routing_number: str | None = None
    account_number: str = ""

    def __post_init__(self) -> None:
        self.currency = Currency(self.currency)

    def to_params(self) -> dict[str, Any]:
        """The request parameters; the holder type is not sent."""
        return {
            "object": "bank_account",
            "country": self.country,
            "currency": self.currency.value,
            "account_holder_name": self.account_holder_name,
            "routing_number": self.routing_number,
            "account_number": self.account_number,
        }


@dataclass(slots=True)
class CardParams:
    """Raw card details for creating a card source."""

    exp_month: str = ""
    exp_year: str = ""
    number: str = ""
    name: str | None = None
    cvc: str | None = None

    def to_params(self) -> dict[str, Any]:
        """The request parameters, tagged with the object kind."""
        return {
            "object": "card",
            "exp_month": self.exp_month,
            "exp_year": self.exp_year,
            "number": self.number,
            "name": self.name,
            "cvc": self.cvc,
        }


@dataclass(slots=True)
class CaptureCharge:
    """Parameters for capturing a charge created with capture disabled."""

    amount: int | None = None
    application_fee: int | None = None
    receipt_email: str | None = None
    statement_descriptor: str | None = None

    def __post_init__(self) -> None:
        _check_unsigned(self, "amount", "application_fee")

    def to_params(self) -> dict[str, Any]:
        """The request parameters, leaving out those not set."""
        return _compact(self)


@dataclass(slots=True)
class AttachPaymentMethod:
    """Parameters for attaching a payment method to a customer."""

    customer: str

    def to_params(self) -> dict[str, Any]:
        """The request parameters."""
        return {"customer": self.customer}