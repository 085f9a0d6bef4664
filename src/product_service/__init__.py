"""
Products API Service Module.

Serverless CRUD API for the Product resource, organized in the three-layer
architecture pattern:

- handlers: Lambda entry points, middleware, error mapping and configuration
- logic: Per-operation orchestration of validation, store calls and responses
- dal: Product store contract and its DynamoDB implementation
- models: Product domain model and response bodies
"""

__version__ = "1.0.0"
__description__ = "Serverless Product CRUD API on AWS Lambda and DynamoDB"

from product_service.models.product import Product
from product_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "Product",
    "logger",
    "tracer",
    "metrics",
]
