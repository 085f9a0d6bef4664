"""
AWS Lambda Handlers Module.

Entry points for the products API. Each handler runs behind the same
middleware stack (error mapping, tracing, metrics, logging) and delegates to
the logic layer. Handlers live in ``products_handler``; importing that module
builds the application from the environment.
"""

from product_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
