"""
Business Logic Layer Module.

Orchestrates each product operation between the handlers and the data access
layer: input validation, the single store call, and mapping store results to
responses or domain errors.
"""

from product_service.logic.products_application import ProductsApplication

__all__ = [
    "ProductsApplication",
]
