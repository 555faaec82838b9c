# catalog_api/repos/catalog_repo.py
import threading

from catalog_api.domain.schemas import Product, ProductDetails, ProductId, ProductType
from catalog_api.domain.validation import Invalid, validate_product_details


class CatalogStore:
    """
    In-memory catalog: id -> Product, insertion ordered.
    -create validates, then assigns the id and inserts under the lock
    -reads snapshot under the same lock
    """

    def __init__(self, name_policy: str = "strict", cost_enabled: bool = False):
        self.name_policy = name_policy
        self.cost_enabled = cost_enabled
        self._products: dict[int, Product] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def create(self, details: ProductDetails) -> ProductId | Invalid:
        result = validate_product_details(
            details,
            name_policy=self.name_policy,
            cost_enabled=self.cost_enabled,
        )
        if isinstance(result, Invalid):
            return result

        fields = result.product.model_dump()
        # next id and insert are one unit, nobody sees a computed but unused id
        with self._lock:
            product_id = max(self._products, default=0) + 1
            self._products[product_id] = Product(id=product_id, **fields)

        return ProductId(id=product_id)

    def list(self, type_filter: ProductType | None = None) -> list[Product]:
        with self._lock:
            products = list(self._products.values())

        if type_filter is None:
            return products
        return [p for p in products if p.type == type_filter]

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            return self._products.get(product_id)
