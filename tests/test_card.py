import pytest

from stripe_resources.card import CardBrand, CardType


@pytest.mark.parametrize("brand", list(CardBrand))
def test_brand_round_trip(brand):
    assert CardBrand(str(brand)) is brand


@pytest.mark.parametrize("card_type", list(CardType))
def test_type_round_trip(card_type):
    assert CardType(str(card_type)) is card_type


def test_brand_wire_names():
    assert CardBrand("American Express") is CardBrand.AMERICAN_EXPRESS
    assert CardBrand("Diners Club") is CardBrand.DINERS_CLUB
    assert str(CardBrand.MASTER_CARD) == "MasterCard"


def test_unrecognised_brand_is_unknown():
    assert CardBrand("Maestro") is CardBrand.UNKNOWN
    assert CardBrand("visa") is CardBrand.UNKNOWN


def test_unrecognised_type_is_unknown():
    assert CardType("charge") is CardType.UNKNOWN
    assert CardType("Credit") is CardType.UNKNOWN


def test_type_wire_names():
    assert CardType("credit") is CardType.CREDIT
    assert CardType("prepaid") is CardType.PREPAID


def test_defaults_are_unknown():
    assert CardBrand.default() is CardBrand.UNKNOWN
    assert CardType.default() is CardType.UNKNOWN


def test_non_string_values_are_rejected():
    with pytest.raises(ValueError):
        CardBrand(5)
    with pytest.raises(ValueError):
        CardType(None)