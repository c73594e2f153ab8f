import pytest

from stripe_resources.balance import BalanceTransactionStatus, BankAccountStatus, FeeType


def test_balance_status_default():
    assert BalanceTransactionStatus.default() is BalanceTransactionStatus.PENDING


def test_balance_status_strings():
    assert str(BalanceTransactionStatus.AVAILABLE) == "available"
    assert BalanceTransactionStatus("pending") is BalanceTransactionStatus.PENDING


def test_fee_type_default_and_strings():
    assert FeeType.default() is FeeType.APPLICATION_FEE
    assert str(FeeType.STRIPE_FEE) == "stripe_fee"
    assert FeeType("tax") is FeeType.TAX


def test_bank_account_status_strings():
    assert str(BankAccountStatus.VERIFICATION_FAILED) == "verification_failed"
    assert BankAccountStatus("verified") is BankAccountStatus.VERIFIED


@pytest.mark.parametrize("enum", [BalanceTransactionStatus, FeeType, BankAccountStatus])
def test_round_trip_through_string(enum):
    for member in enum:
        assert enum(str(member)) is member
        assert member.value == member.name.lower()


@pytest.mark.parametrize("enum", [BalanceTransactionStatus, FeeType, BankAccountStatus])
def test_unknown_value_rejected(enum):
    with pytest.raises(ValueError):
        enum("bogus")