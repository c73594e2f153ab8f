import pytest

from stripe_resources.billing import (
    CancelSetupIntent,
    CancelSubscription,
    ConfirmSetupIntent,
    CreateInvoiceLineItem,
    CreateLoginLink,
    CreateUsageRecord,
    CustomerPaymentMethodRetrieval,
    CustomerPaymentMethodRetrievalType,
    RetrieveUpcomingInvoice,
    SubscriptionItemFilter,
    UsageRecordAction,
    VerifyBankAccount,
)
from stripe_resources.currency import Currency


@pytest.mark.parametrize(
    "member, wire",
    [
        (CustomerPaymentMethodRetrievalType.CARD, "card"),
        (CustomerPaymentMethodRetrievalType.SEPA_DEBIT, "sepa_debit"),
        (CustomerPaymentMethodRetrievalType.AFTERPAY_CLEARPAY, "afterpay_clearpay"),
        (CustomerPaymentMethodRetrievalType.P24, "p24"),
        (CustomerPaymentMethodRetrievalType.WECHAT_PAY, "wechat_pay"),
    ],
)
def test_retrieval_type_wire_values(member, wire):
    assert member.value == wire
    assert CustomerPaymentMethodRetrievalType(wire) is member


def test_retrieval_type_rejects_unknown():
    with pytest.raises(ValueError):
        CustomerPaymentMethodRetrievalType("cash")


def test_retrieval_minimal_has_only_type():
    params = CustomerPaymentMethodRetrieval(CustomerPaymentMethodRetrievalType.CARD).to_params()
    assert params == {"type": "card"}


def test_retrieval_full_params_and_order():
    retrieval = CustomerPaymentMethodRetrieval(
        "sepa_debit",
        ending_before="pm_a",
        expand=["data.customer"],
        limit=5,
        starting_after="pm_b",
    )
    params = retrieval.to_params()
    assert list(params) == ["ending_before", "expand", "limit", "starting_after", "type"]
    assert params["expand"] == ["data.customer"]
    assert params["limit"] == 5
    assert params["type"] == "sepa_debit"
    assert retrieval.type_ is CustomerPaymentMethodRetrievalType.SEPA_DEBIT


def test_retrieval_limit_checked():
    with pytest.raises(ValueError):
        CustomerPaymentMethodRetrieval("card", limit=2**31)
    with pytest.raises(TypeError):
        CustomerPaymentMethodRetrieval("card", limit="5")


def test_verify_bank_account():
    assert VerifyBankAccount().to_params() == {}
    params = VerifyBankAccount(amounts=[32, 45], verification_method="skip").to_params()
    assert params == {"amounts": [32, 45], "verification_method": "skip"}


def test_verify_bank_account_rejects_non_integer_amount():
    with pytest.raises(TypeError):
        VerifyBankAccount(amounts=[1.5])


def test_upcoming_invoice_requires_only_customer():
    assert RetrieveUpcomingInvoice("cus_1").to_params() == {"customer": "cus_1"}


def test_upcoming_invoice_nests_item_filter():
    item_filter = SubscriptionItemFilter(id="si_1", quantity=3, metadata={"k": "v"})
    invoice = RetrieveUpcomingInvoice(
        "cus_1",
        subscription="sub_1",
        subscription_items=item_filter,
        subscription_prorate=True,
        subscription_tax_percent=7.5,
    )
    params = invoice.to_params()
    assert params["customer"] == "cus_1"
    assert params["subscription_items"] == {"id": "si_1", "metadata": {"k": "v"}, "quantity": 3}
    assert params["subscription_prorate"] is True
    assert params["subscription_tax_percent"] == 7.5
    assert "coupon" not in params


def test_subscription_item_filter_quantity_unsigned():
    with pytest.raises(ValueError):
        SubscriptionItemFilter(quantity=-1)


def test_invoice_line_item():
    assert CreateInvoiceLineItem().to_params() == {}
    item = CreateInvoiceLineItem(amount=-200, currency="eur", customer="cus_1", discountable=False)
    assert item.currency is Currency.EUR
    assert item.to_params() == {
        "amount": -200,
        "currency": "eur",
        "customer": "cus_1",
        "discountable": False,
    }


def test_invoice_line_item_rejects_unknown_currency():
    with pytest.raises(ValueError):
        CreateInvoiceLineItem(currency="xyz")


def test_cancel_subscription():
    assert CancelSubscription().to_params() == {}
    assert CancelSubscription(at_period_end=True).to_params() == {"at_period_end": True}


def test_usage_record_action_values():
    assert UsageRecordAction("increment") is UsageRecordAction.INCREMENT
    assert UsageRecordAction.SET.value == "set"


def test_usage_record_defaults_keep_quantity():
    assert CreateUsageRecord().to_params() == {"quantity": 0}


def test_usage_record_full():
    record = CreateUsageRecord(quantity=10, action="set", timestamp=1_600_000_000)
    assert record.action is UsageRecordAction.SET
    assert record.to_params() == {"quantity": 10, "action": "set", "timestamp": 1_600_000_000}


def test_usage_record_quantity_unsigned():
    with pytest.raises(ValueError):
        CreateUsageRecord(quantity=-1)


def test_login_link():
    assert CreateLoginLink().to_params() == {}
    link = CreateLoginLink(redirect_url="https://example.com/back")
    assert link.to_params() == {"redirect_url": "https://example.com/back"}
    assert CreateLoginLink(expand=["account"]).to_params() == {"expand": ["account"]}


def test_confirm_setup_intent():
    assert ConfirmSetupIntent().to_params() == {}
    confirm = ConfirmSetupIntent(payment_method="pm_1", redirect_url="https://example.com/r")
    assert confirm.to_params() == {"payment_method": "pm_1", "redirect_url": "https://example.com/r"}


def test_cancel_setup_intent_is_empty():
    assert CancelSetupIntent().to_params() == {}