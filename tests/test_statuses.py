import pytest

from stripe_resources.statuses import (
    OrderStatusFilter,
    RecipientType,
    ReviewReason,
    SourceRedirectFlowFailureReason,
    SourceRedirectFlowStatus,
    SourceStatus,
    SourceUsage,
    TokenType,
    WebhookEndpointStatus,
)


@pytest.mark.parametrize(
    "enum_cls",
    [
        SourceStatus,
        SourceUsage,
        SourceRedirectFlowFailureReason,
        SourceRedirectFlowStatus,
        OrderStatusFilter,
        RecipientType,
        ReviewReason,
        TokenType,
        WebhookEndpointStatus,
    ],
)
def test_round_trip_through_value(enum_cls):
    for member in enum_cls:
        assert enum_cls(str(member)) is member
        assert str(member) == member.value


@pytest.mark.parametrize(
    "enum_cls",
    [
        SourceStatus,
        SourceUsage,
        SourceRedirectFlowFailureReason,
        SourceRedirectFlowStatus,
        OrderStatusFilter,
        RecipientType,
        ReviewReason,
        TokenType,
        WebhookEndpointStatus,
    ],
)
def test_values_are_snake_case(enum_cls):
    for member in enum_cls:
        assert member.value == member.name.lower()
        assert enum_cls(member.name.lower()) is member


@pytest.mark.parametrize(
    "enum_cls",
    [
        SourceStatus,
        SourceUsage,
        SourceRedirectFlowFailureReason,
        SourceRedirectFlowStatus,
        OrderStatusFilter,
        RecipientType,
        ReviewReason,
        TokenType,
        WebhookEndpointStatus,
    ],
)
def test_unknown_value_raises(enum_cls):
    with pytest.raises(ValueError):
        enum_cls("not_a_real_value")


@pytest.mark.parametrize(
    "enum_cls, expected",
    [
        (SourceStatus, SourceStatus.PENDING),
        (SourceRedirectFlowFailureReason, SourceRedirectFlowFailureReason.DECLINED),
        (SourceRedirectFlowStatus, SourceRedirectFlowStatus.PENDING),
        (RecipientType, RecipientType.CORPORATION),
        (ReviewReason, ReviewReason.APPROVED),
        (TokenType, TokenType.ACCOUNT),
    ],
)
def test_defaults(enum_cls, expected):
    assert enum_cls.default() is expected


def test_pinned_wire_values():
    assert SourceUsage.SINGLE_USE == "single_use"
    assert SourceRedirectFlowStatus.NOT_REQUIRED.value == "not_required"
    assert f"{ReviewReason.REFUNDED_AS_FRAUD}" == "refunded_as_fraud"
    assert TokenType("bank_account") is TokenType.BANK_ACCOUNT


def test_member_counts():
    assert len(SourceStatus) == 5
    assert len(OrderStatusFilter) == 4
    assert [m.value for m in WebhookEndpointStatus] == ["disabled", "enabled"]
    assert SourceStatus("chargeable") is SourceStatus.CHARGEABLE
    assert WebhookEndpointStatus("enabled") is WebhookEndpointStatus.ENABLED


def test_string_formatting_uses_value():
    assert "status=%s" % OrderStatusFilter("fulfilled") == "status=fulfilled"
    assert RecipientType("individual") + "" == "individual"