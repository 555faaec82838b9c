# catalog_api/services/product_service.py
from typing import Any

from catalog_api.domain.errors import NotFoundError, ValidationError
from catalog_api.domain.schemas import Product, ProductDetails, ProductId
from catalog_api.domain.validation import Invalid, parse_type_filter
from catalog_api.repos.catalog_repo import CatalogStore
from catalog_api.utils.logging import get_logger

logger = get_logger(__name__)

NO_PRODUCTS_FOUND = "No products found"
PRODUCT_NOT_FOUND = "Product not found"


class ProductService:
    """
    Use cases of the product catalog.
    command (create) changes the store
    queries (list, get) only read
    The store returns outcome values, they become domain exceptions here.
    """

    def __init__(self, store: CatalogStore, empty_result_policy: str = "empty"):
        self.store = store
        self.empty_result_policy = empty_result_policy

    #command
    def create_product(self, details: ProductDetails) -> ProductId:
        result = self.store.create(details)

        if isinstance(result, Invalid):
            logger.warning(f"Rejected product proposal: {result.reason}")
            raise ValidationError(result.reason)

        logger.info(f"Created product {result.id}")
        return result

    #queries
    def list_products(self, type_filter: Any = None) -> list[Product]:
        parsed = parse_type_filter(type_filter)
        if isinstance(parsed, Invalid):
            logger.warning(f"Rejected type filter {type_filter!r}")
            raise ValidationError(parsed.reason)

        products = self.store.list(parsed)
        logger.info(f"Listing {len(products)} products (type={type_filter})")

        if not products and self.empty_result_policy == "not_found":
            raise NotFoundError(NO_PRODUCTS_FOUND)
        return products

    def get_product(self, product_id: int) -> Product:
        product = self.store.get_by_id(product_id)
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product
