"""In-memory product repository."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable

from quoteflow.catalog.seed import default_products
from quoteflow.exceptions import CatalogError
from quoteflow.model import Product


class ProductRepository:
    """Process-local product store keyed by id, preserving insertion order.

    Construct one explicitly and pass it where needed; there is no shared
    global instance.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._storage: dict[str, Product] = {}
        self.save_all(products)

    @classmethod
    def with_defaults(cls) -> ProductRepository:
        """Return a repository seeded with the default catalog."""
        return cls(default_products())

    def find_all(self) -> list[Product]:
        return list(self._storage.values())

    def find_by_id(self, product_id: str) -> Product | None:
        return self._storage.get(product_id)

    def get(self, product_id: str) -> Product:
        """Return the product with *product_id* or raise CatalogError."""
        product = self._storage.get(product_id)
        if product is None:
            raise CatalogError(f"Unknown product id: {product_id!r}")
        return product

    def find_where(self, predicate: Callable[[Product], bool]) -> list[Product]:
        return [product for product in self._storage.values() if predicate(product)]

    def find_by_type(self, product_type: str) -> list[Product]:
        return self.find_where(lambda product: product.product_type == product_type)

    def find_by_price_range(self, min_price: float = -math.inf, max_price: float = math.inf) -> list[Product]:
        """Return products whose base price lies in ``[min_price, max_price]``."""
        return self.find_where(lambda product: min_price <= product.base_price <= max_price)

    def save(self, product: Product) -> Product:
        self._storage[product.id] = product
        return product

    def save_all(self, products: Iterable[Product]) -> list[Product]:
        saved = list(products)
        for product in saved:
            self._storage[product.id] = product
        return saved

    def delete_by_id(self, product_id: str) -> bool:
        return self._storage.pop(product_id, None) is not None

    def delete(self, product: Product) -> bool:
        return self.delete_by_id(product.id)

    def count(self) -> int:
        return len(self._storage)

    def exists(self, product_id: str) -> bool:
        return product_id in self._storage

    def clear(self) -> None:
        self._storage.clear()
