"""
Result values returned by the product store point operations.

A point operation never raises for a backend failure. It reports what
happened as a ``StoreResult`` so the application layer can tell a missing
product, an id conflict and a broken backend apart.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from product_service.models.product import Product


class StoreOutcome(str, Enum):
    """Outcome of a store point operation."""

    OK = 'ok'
    NOT_FOUND = 'not_found'
    CONFLICT = 'conflict'
    BACKEND_ERROR = 'backend_error'


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a point operation, with the product on success or the cause on backend failure."""

    outcome: StoreOutcome
    product: Optional[Product] = None
    cause: Optional[Exception] = None

    @classmethod
    def ok(cls, product: Product) -> 'StoreResult':
        return cls(outcome=StoreOutcome.OK, product=product)

    @classmethod
    def not_found(cls) -> 'StoreResult':
        return cls(outcome=StoreOutcome.NOT_FOUND)

    @classmethod
    def conflict(cls) -> 'StoreResult':
        return cls(outcome=StoreOutcome.CONFLICT)

    @classmethod
    def backend_error(cls, cause: Exception) -> 'StoreResult':
        return cls(outcome=StoreOutcome.BACKEND_ERROR, cause=cause)

    @property
    def is_ok(self) -> bool:
        return self.outcome is StoreOutcome.OK
