import pytest

from stripe_resources.currency import Currency, ParseCurrencyError, parse_currency


@pytest.mark.parametrize("currency", list(Currency))
def test_round_trip_through_text(currency):
    assert parse_currency(str(currency)) is currency


@pytest.mark.parametrize("currency", list(Currency))
def test_codes_are_three_lower_case_letters(currency):
    code = str(currency)
    assert len(code) == 3
    assert code.isalpha() and code.islower()
    assert code == currency.name.lower()
    assert parse_currency(code) is currency


def test_known_codes_parse():
    assert parse_currency("usd") is Currency.USD
    assert parse_currency("eur") is Currency.EUR
    assert parse_currency("try") is Currency.TRY


def test_display_is_code():
    assert str(parse_currency("aed")) == "aed"
    assert f"{parse_currency('jpy')}" == "jpy"
    assert str(Currency.AED) == "aed"


def test_default_is_usd():
    assert Currency.default() is Currency.USD


@pytest.mark.parametrize("text", ["xyz", "USD", "", " usd", "us"])
def test_unknown_code_raises(text):
    with pytest.raises(ParseCurrencyError) as info:
        parse_currency(text)
    assert str(info.value) == "unknown currency code"


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_currency("nope")


def test_codes_are_unique():
    codes = [c.value for c in Currency]
    assert len(codes) == len(set(codes))
    assert {parse_currency(code) for code in codes} == set(Currency)