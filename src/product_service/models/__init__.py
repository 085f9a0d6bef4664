"""
Service Models Package

Pydantic models used throughout the service: the Product domain model and
the response bodies returned by the handlers.
"""

from .output import CreateProductOutput, DeleteProductOutput, ErrorOutput, UpdateProductOutput
from .product import InvalidProductError, Product

__all__ = [
    # Domain models
    "Product",
    "InvalidProductError",

    # Output models
    "CreateProductOutput",
    "UpdateProductOutput",
    "DeleteProductOutput",
    "ErrorOutput",
]
