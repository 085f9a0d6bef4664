"""
Data Access Layer (DAL) for the products API.

This module provides the product store interface and the factory that wires
the DynamoDB implementation from environment configuration.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

import boto3

from product_service.dal.results import StoreOutcome, StoreResult
from product_service.models.product import Product

if TYPE_CHECKING:
    from product_service.handlers.models.env_vars import ProductHandlerEnvVars

OFFLINE_REGION = 'localhost'


class ProductStore(ABC):
    """Abstract base class for product store implementations."""

    @abstractmethod
    def list_products(self) -> List[Product]:
        """Return up to one page of products. Backend failures propagate."""
        pass

    @abstractmethod
    def get_by_id(self, product_id: str) -> StoreResult:
        """Retrieve a product by its id."""
        pass

    @abstractmethod
    def create(self, product: Product) -> StoreResult:
        """Store a product only if its id is not taken yet."""
        pass

    @abstractmethod
    def update(self, product: Product) -> StoreResult:
        """Replace a product only if its id already exists."""
        pass

    @abstractmethod
    def delete(self, product_id: str) -> StoreResult:
        """Delete a product, returning the deleted record."""
        pass


def build_dynamodb_resource(env_vars: 'ProductHandlerEnvVars'):
    """
    Create the DynamoDB service resource for the configured backend.

    Args:
        env_vars: Handler environment configuration

    Returns:
        boto3 DynamoDB service resource, pointed at DynamoDB Local when offline
    """
    if env_vars.IS_OFFLINE:
        return boto3.resource('dynamodb', region_name=OFFLINE_REGION, endpoint_url=env_vars.OFFLINE_ENDPOINT)
    return boto3.resource('dynamodb', region_name=env_vars.REGION)


def get_product_store(env_vars: 'ProductHandlerEnvVars') -> ProductStore:
    """
    Factory function to get the product store for the configured backend.

    Args:
        env_vars: Handler environment configuration

    Returns:
        Product store instance
    """
    # Import here to avoid circular imports
    from product_service.dal.dynamodb_store import DynamoDbProductStore

    return DynamoDbProductStore(table_name=env_vars.TABLE_NAME, dynamodb=build_dynamodb_resource(env_vars))


__all__ = [
    'ProductStore',
    'StoreOutcome',
    'StoreResult',
    'build_dynamodb_resource',
    'get_product_store',
]
