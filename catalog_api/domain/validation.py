# catalog_api/domain/validation.py
"""
Admissibility rules for product proposals.

Checks run in a fixed order (name, type, inventory, cost) and stop at the
first failure, so a caller only ever gets one reason back. Nothing here
raises for bad input, every function returns Valid / Invalid.
"""
import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any

from catalog_api.domain.schemas import NewProduct, ProductDetails, ProductType

NAME_REQUIRED = "Product name is required"
TYPE_REQUIRED = "Product type is required"
INVALID_TYPE = "Invalid product type"
INVENTORY_REQUIRED = "Inventory is required"
INVENTORY_NOT_A_NUMBER = "Inventory must be a number"
NEGATIVE_INVENTORY = "Inventory cannot be negative"
COST_REQUIRED = "Cost is required"
COST_NOT_A_NUMBER = "Cost must be a number"
NEGATIVE_COST = "Cost cannot be negative"

PRODUCT_TYPES = frozenset(t.value for t in ProductType)


@dataclass(frozen=True)
class Valid:
    product: NewProduct


@dataclass(frozen=True)
class Invalid:
    reason: str


def _is_number(value: Any) -> bool:
    # bool is a subclass of int, but True is not an inventory count
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # only floats can be nan/inf, and huge ints overflow float()
    return not isinstance(value, float) or math.isfinite(value)


def check_name(value: Any, name_policy: str = "strict") -> str | Invalid:
    if value is None:
        return Invalid(NAME_REQUIRED)

    if name_policy == "permissive":
        return str(value)

    if not isinstance(value, str) or not value.strip():
        return Invalid(NAME_REQUIRED)
    return value


def check_type(value: Any) -> ProductType | Invalid:
    if value is None or value == "":
        return Invalid(TYPE_REQUIRED)
    if not isinstance(value, str) or value not in PRODUCT_TYPES:
        return Invalid(INVALID_TYPE)
    return ProductType(value)


def check_inventory(value: Any) -> int | Invalid:
    if value is None:
        return Invalid(INVENTORY_REQUIRED)
    if not _is_number(value):
        return Invalid(INVENTORY_NOT_A_NUMBER)
    # compare before truncating, int(-0.5) would be 0
    if value < 0:
        return Invalid(NEGATIVE_INVENTORY)
    return int(value)


def check_cost(value: Any) -> Decimal | Invalid:
    if value is None:
        return Invalid(COST_REQUIRED)
    if not _is_number(value):
        return Invalid(COST_NOT_A_NUMBER)
    if value < 0:
        return Invalid(NEGATIVE_COST)
    return Decimal(str(value))


def validate_product_details(
    details: ProductDetails,
    name_policy: str = "strict",
    cost_enabled: bool = False,
) -> Valid | Invalid:
    """
    Decide whether ``details`` can become a Product.

    Returns ``Valid`` with the coerced fields, or ``Invalid`` with the reason
    of the first failing check.
    """
    name = check_name(details.name, name_policy)
    if isinstance(name, Invalid):
        return name

    product_type = check_type(details.type)
    if isinstance(product_type, Invalid):
        return product_type

    inventory = check_inventory(details.inventory)
    if isinstance(inventory, Invalid):
        return inventory

    cost = None
    if cost_enabled:
        cost = check_cost(details.cost)
        if isinstance(cost, Invalid):
            return cost

    return Valid(NewProduct(name=name, type=product_type, inventory=inventory, cost=cost))


def parse_type_filter(value: Any) -> ProductType | None | Invalid:
    """``None`` means no filter, anything outside the enum is rejected."""
    if value is None:
        return None
    if not isinstance(value, str) or value not in PRODUCT_TYPES:
        return Invalid(INVALID_TYPE)
    return ProductType(value)
