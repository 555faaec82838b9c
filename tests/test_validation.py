from decimal import Decimal

import pytest

from catalog_api.domain.schemas import ProductDetails, ProductType
from catalog_api.domain.validation import (
    COST_NOT_A_NUMBER,
    COST_REQUIRED,
    INVALID_TYPE,
    INVENTORY_NOT_A_NUMBER,
    INVENTORY_REQUIRED,
    NAME_REQUIRED,
    NEGATIVE_COST,
    NEGATIVE_INVENTORY,
    TYPE_REQUIRED,
    Invalid,
    Valid,
    parse_type_filter,
    validate_product_details,
)


def details(**overrides):
    fields = {"name": "Dune", "type": "book", "inventory": 3}
    fields.update(overrides)
    return ProductDetails(**fields)


def test_valid_details_are_coerced():
    result = validate_product_details(details(name="  Dune ", inventory=3.9))

    assert isinstance(result, Valid)
    assert result.product.name == "  Dune "
    assert result.product.type is ProductType.BOOK
    assert result.product.inventory == 3
    assert result.product.cost is None


@pytest.mark.parametrize("name", [None, "", "   ", 42, ["Dune"]])
def test_strict_name_rejects_missing_blank_and_non_text(name):
    assert validate_product_details(details(name=name)) == Invalid(NAME_REQUIRED)


def test_permissive_name_stringifies_non_null_values():
    result = validate_product_details(details(name=123), name_policy="permissive")

    assert isinstance(result, Valid)
    assert result.product.name == "123"


def test_permissive_name_only_needs_a_value():
    result = validate_product_details(details(name=None), name_policy="permissive")
    assert result == Invalid(NAME_REQUIRED)


@pytest.mark.parametrize("name", ["", "  "])
def test_permissive_name_accepts_blank_text(name):
    result = validate_product_details(details(name=name), name_policy="permissive")

    assert isinstance(result, Valid)
    assert result.product.name == name


def test_name_is_checked_before_everything_else():
    result = validate_product_details(ProductDetails(name="", type="vehicle", inventory=-1))
    assert result == Invalid(NAME_REQUIRED)


@pytest.mark.parametrize(
    "product_type, reason",
    [
        (None, TYPE_REQUIRED),
        ("", TYPE_REQUIRED),
        ("vehicle", INVALID_TYPE),
        ("Book", INVALID_TYPE),
        (" book", INVALID_TYPE),
        (1, INVALID_TYPE),
    ],
)
def test_type_must_be_an_exact_enum_value(product_type, reason):
    assert validate_product_details(details(type=product_type)) == Invalid(reason)


def test_type_is_checked_before_inventory():
    result = validate_product_details(details(type="vehicle", inventory=-1))
    assert result == Invalid(INVALID_TYPE)


@pytest.mark.parametrize(
    "inventory, reason",
    [
        (None, INVENTORY_REQUIRED),
        ("5", INVENTORY_NOT_A_NUMBER),
        (True, INVENTORY_NOT_A_NUMBER),
        (float("nan"), INVENTORY_NOT_A_NUMBER),
        (float("inf"), INVENTORY_NOT_A_NUMBER),
        (-1, NEGATIVE_INVENTORY),
        (-0.5, NEGATIVE_INVENTORY),
    ],
)
def test_inventory_rejections(inventory, reason):
    assert validate_product_details(details(inventory=inventory)) == Invalid(reason)


def test_zero_inventory_is_accepted():
    result = validate_product_details(details(inventory=0))

    assert isinstance(result, Valid)
    assert result.product.inventory == 0


def test_cost_is_ignored_unless_enabled():
    result = validate_product_details(details(cost=-5))

    assert isinstance(result, Valid)
    assert result.product.cost is None


@pytest.mark.parametrize(
    "cost, reason",
    [(None, COST_REQUIRED), ("9.99", COST_NOT_A_NUMBER), (-0.01, NEGATIVE_COST)],
)
def test_cost_rejections_when_enabled(cost, reason):
    result = validate_product_details(details(cost=cost), cost_enabled=True)
    assert result == Invalid(reason)


def test_cost_becomes_decimal():
    result = validate_product_details(details(cost=9.99), cost_enabled=True)

    assert isinstance(result, Valid)
    assert result.product.cost == Decimal("9.99")


def test_inventory_is_checked_before_cost():
    result = validate_product_details(details(inventory=-1, cost=None), cost_enabled=True)
    assert result == Invalid(NEGATIVE_INVENTORY)


def test_parse_type_filter():
    assert parse_type_filter(None) is None
    assert parse_type_filter("food") is ProductType.FOOD
    assert parse_type_filter("vehicle") == Invalid(INVALID_TYPE)
    assert parse_type_filter(["book"]) == Invalid(INVALID_TYPE)


def test_huge_integers_are_numbers():
    huge = 10**400

    result = validate_product_details(details(inventory=huge, cost=huge), cost_enabled=True)

    assert isinstance(result, Valid)
    assert result.product.inventory == huge
    assert result.product.cost == Decimal(huge)


def test_huge_negative_integer_inventory_is_negative():
    assert validate_product_details(details(inventory=-(10**400))) == Invalid(NEGATIVE_INVENTORY)
