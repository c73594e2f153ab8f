import pytest

from stripe_resources.issuing import (
    IssuingAuthorizationCheck,
    IssuingAuthorizationMethod,
    IssuingAuthorizationReason,
    IssuingAuthorizationWalletProvider,
    IssuingCardPinStatus,
    IssuingCardShippingStatus,
    IssuingCardShippingType,
    IssuingCardType,
    IssuingDisputeReason,
    IssuingDisputeStatus,
    IssuingTransactionType,
    MerchantCategory,
    MerchantData,
)


@pytest.mark.parametrize(
    ("enum", "expected"),
    [
        (IssuingAuthorizationCheck, IssuingAuthorizationCheck.NOT_PROVIDED),
        (IssuingAuthorizationMethod, IssuingAuthorizationMethod.ONLINE),
        (IssuingAuthorizationReason, IssuingAuthorizationReason.AUTHENTICATION_FAILED),
        (IssuingAuthorizationWalletProvider, IssuingAuthorizationWalletProvider.APPLE_PAY),
        (IssuingCardShippingType, IssuingCardShippingType.INDIVIDUAL),
        (IssuingCardType, IssuingCardType.PHYSICAL),
        (IssuingDisputeStatus, IssuingDisputeStatus.UNSUBMITTED),
        (IssuingTransactionType, IssuingTransactionType.CAPTURE),
        (MerchantCategory, MerchantCategory.MISCELLANEOUS),
    ],
)
def test_defaults(enum, expected):
    assert enum.default() is expected


@pytest.mark.parametrize(
    ("member", "text"),
    [
        (IssuingAuthorizationWalletProvider.APPLE_PAY, "apple_pay"),
        (IssuingAuthorizationWalletProvider.SAMSUNG_PAY, "samsung_pay"),
        (IssuingCardPinStatus.BLOCKED, "blocked"),
        (IssuingCardShippingStatus.DELIVERED, "delivered"),
        (IssuingCardType.VIRTUAL, "virtual"),
        (IssuingDisputeReason.FRAUDULENT, "fraudulent"),
        (IssuingDisputeStatus.UNDER_REVIEW, "under_review"),
        (IssuingTransactionType.CASH_WITHDRAWAL, "cash_withdrawal"),
        (IssuingTransactionType.REFUND_REVERSAL, "refund_reversal"),
    ],
)
def test_string_forms(member, text):
    assert str(member) == text
    assert f"{member}" == text
    assert type(member)(text) is member


def test_authorization_enum_wire_values():
    assert IssuingAuthorizationCheck("not_provided") is IssuingAuthorizationCheck.NOT_PROVIDED
    assert IssuingAuthorizationMethod("keyed_in") is IssuingAuthorizationMethod.KEYED_IN


@pytest.mark.parametrize(
    "enum",
    [
        IssuingAuthorizationCheck,
        IssuingAuthorizationMethod,
        IssuingAuthorizationReason,
        IssuingCardShippingStatus,
        IssuingTransactionType,
        MerchantCategory,
    ],
)
def test_unknown_value_rejected(enum):
    with pytest.raises(ValueError):
        enum("no_such_value")


def test_merchant_category_renamed_values():
    assert MerchantCategory("heating_plumbing_a_c") is MerchantCategory.HEATING_PLUMBING_A_C
    assert (
        MerchantCategory("u_s_federal_government_agencies_or_departments")
        is MerchantCategory.U_S_FEDERAL_GOVERNMENT_AGENCIES_OR_DEPARTMENTS
    )
    assert MerchantCategory.T_UI_TRAVEL_GERMANY.value == "t_ui_travel_germany"


def test_merchant_category_values_are_snake_case_and_unique():
    values = [member.value for member in MerchantCategory]
    assert len(values) == len(set(values))
    for member in MerchantCategory:
        assert member.value == member.value.lower()
        assert member.name.lower() == member.value
        assert MerchantCategory(member.value) is member


def test_merchant_data_defaults():
    data = MerchantData()
    assert data.network_id == ""
    assert data.category is MerchantCategory.MISCELLANEOUS
    assert data.to_json() == {"network_id": "", "category": "miscellaneous"}


def test_merchant_data_skips_unset_fields():
    data = MerchantData(network_id="net_1", category=MerchantCategory.BAKERIES, city="Springfield")
    assert data.to_json() == {
        "network_id": "net_1",
        "category": "bakeries",
        "city": "Springfield",
    }


def test_merchant_data_round_trip():
    data = MerchantData(
        network_id="net_42",
        category=MerchantCategory.HEATING_PLUMBING_A_C,
        name="Example Shop",
        city="Springfield",
        state="XX",
        country="US",
        postal_code="00000",
    )
    restored = MerchantData.from_json(data.to_json())
    assert restored == data
    assert restored.to_json()["category"] == "heating_plumbing_a_c"


def test_merchant_data_from_json_accepts_nulls_and_extra_keys():
    data = MerchantData.from_json(
        {"network_id": "n", "category": "florists", "name": None, "extra": 1}
    )
    assert data.name is None
    assert data.category is MerchantCategory.FLORISTS
    assert data.to_json() == {"network_id": "n", "category": "florists"}


@pytest.mark.parametrize(
    "payload",
    [
        {"category": "florists"},
        {"network_id": "n"},
        {"network_id": 5, "category": "florists"},
        {"network_id": "n", "category": "unknown_category"},
        {"network_id": "n", "category": "florists", "city": 3},
        ["network_id", "category"],
    ],
)
def test_merchant_data_from_json_errors(payload):
    with pytest.raises(ValueError):
        MerchantData.from_json(payload)