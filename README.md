# stripe_resources

Plain Python models for the values a payments API exchanges: currency codes,
card brands and types, API versions, status and reason enums, and the
parameter objects sent when capturing charges, confirming payment intents,
attaching payment methods, managing subscriptions and more.

The package has no third-party dependencies; it is built on `enum` and
`dataclasses`. It supports Python 3.11 and later. The `test` extra adds
pytest for running the test suite.

## Modules

- `stripe_resources.currency`: `Currency` (lower-case ISO 4217 codes,
  default `USD`), `parse_currency`, which raises `ParseCurrencyError`
  (a `ValueError`) for an unknown code.
- `stripe_resources.card`: `CardBrand` and `CardType`; any unrecognised
  string maps to their `UNKNOWN` member, which is also the default.
- `stripe_resources.api_types`: `ApiVersion`, and the either-a-value-or-a-keyword
  types `DelayDays` (days or `minimum`), `Scheduled` (timestamp or `now`),
  `UpTo` (bound or `inf`) and `PaymentIntentOffSession` (flag or
  `one_off`/`recurring`), with `DelayDaysOther`, `ScheduledOther`,
  `UpToOther` and `OffSessionOther`. Each has `to_json` and `from_json`;
  numbers are range-checked and bad input raises `ValueError`.
- `stripe_resources.balance`: `BalanceTransactionStatus`, `FeeType`,
  `BankAccountStatus`.
- `stripe_resources.issuing`: issuing authorization, card, dispute and
  transaction enums, `MerchantCategory` and the `MerchantData` dataclass
  with `to_json`/`from_json`.
- `stripe_resources.payments`: `PaymentError` and `PaymentErrorType`,
  `PaymentIntentMethodType`, `CaptureMethod`, `ConfirmationMethod`,
  `PaymentIntentNextActionType`, the payment intent parameter models,
  `PaymentSourceParams`, `ChargeSourceParams`, `CardParams`,
  `BankAccountParams`, `CaptureCharge`, `AttachPaymentMethod`.
- `stripe_resources.billing`: customer payment method listing, bank account
  verification, upcoming invoice, invoice line item, subscription
  cancellation, usage record, login link and setup intent parameter models,
  plus `CustomerPaymentMethodRetrievalType` and `UsageRecordAction`.
- `stripe_resources.statuses`: source, order, recipient, review, token and
  webhook endpoint enums.

## Examples

```python
from stripe_resources.currency import Currency, parse_currency

assert parse_currency("eur") is Currency.EUR
assert str(Currency.default()) == "usd"
```

```python
from stripe_resources.api_types import DelayDays, Scheduled

DelayDays.days(7).to_json()       # 7
DelayDays.minimum().to_json()     # "minimum"
Scheduled.from_json("now") == Scheduled.now()   # True
```

Parameter models produce dictionaries with unset optional fields left out:

```python
from stripe_resources.payments import CapturePaymentIntent

CapturePaymentIntent(amount_to_capture=500).to_params()
# {"amount_to_capture": 500}
```

Some enums are open: `PaymentErrorType`, `CaptureMethod`,
`ConfirmationMethod` and `PaymentIntentNextActionType` read any
unrecognised string as `OTHER`, and calling `to_json` on `OTHER` raises
`ValueError`, since it cannot be sent in a request.

`PaymentSourceParams` and `ChargeSourceParams` hold exactly one id;
`from_json` tells the kinds apart by prefix (`tok_`/`btok_`, `src_`,
`card_`, `ba_`, `acct_`).

## What it does not do

This package only models values and builds parameter dictionaries. It has
no HTTP client: it does not send requests, authenticate, paginate or parse
full API resources such as charges, customers or invoices.