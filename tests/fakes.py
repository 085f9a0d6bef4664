"""In-memory product store for application-level tests."""

import threading
from typing import Dict, List, Optional

from product_service.dal import ProductStore
from product_service.dal.results import StoreResult
from product_service.models.product import Product


class InMemoryProductStore(ProductStore):
    """Dict-backed store with the same conditional semantics as the DynamoDB table."""

    def __init__(self, products: Optional[List[Product]] = None):
        self._lock = threading.Lock()
        self._products: Dict[str, Product] = {p.id: p for p in products or []}

    def list_products(self) -> List[Product]:
        with self._lock:
            return list(self._products.values())[:100]

    def get_by_id(self, product_id: str) -> StoreResult:
        with self._lock:
            product = self._products.get(product_id)
        return StoreResult.ok(product) if product else StoreResult.not_found()

    def create(self, product: Product) -> StoreResult:
        with self._lock:
            if product.id in self._products:
                return StoreResult.conflict()
            self._products[product.id] = product
        return StoreResult.ok(product)

    def update(self, product: Product) -> StoreResult:
        with self._lock:
            if product.id not in self._products:
                return StoreResult.not_found()
            self._products[product.id] = product
        return StoreResult.ok(product)

    def delete(self, product_id: str) -> StoreResult:
        with self._lock:
            product = self._products.pop(product_id, None)
        return StoreResult.ok(product) if product else StoreResult.not_found()


class BrokenProductStore(ProductStore):
    """Store whose backend is unreachable."""

    def __init__(self, cause: Exception):
        self.cause = cause

    def list_products(self) -> List[Product]:
        raise self.cause

    def get_by_id(self, product_id: str) -> StoreResult:
        return StoreResult.backend_error(self.cause)

    def create(self, product: Product) -> StoreResult:
        return StoreResult.backend_error(self.cause)

    def update(self, product: Product) -> StoreResult:
        return StoreResult.backend_error(self.cause)

    def delete(self, product_id: str) -> StoreResult:
        return StoreResult.backend_error(self.cause)
