"""
Middleware stack wrapped around every product Lambda handler.

From the inside out: domain error mapping, X-Ray tracing, CloudWatch metrics
flush (with cold start metric) and structured logging with the Lambda
context and API Gateway correlation id. A last error mapping layer wraps the
whole stack.
"""

import functools
from typing import Any, Callable, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from product_service.handlers.utils.errors import (
    ProductServiceError,
    error_to_response,
    unknown_error_response,
)
from product_service.handlers.utils.observability import logger, metrics, tracer

LambdaHandler = Callable[[Dict[str, Any], LambdaContext], Dict[str, Any]]


def error_handler_middleware(handler: LambdaHandler) -> LambdaHandler:
    """Turn domain errors into their mapped responses and anything else into a 500."""

    @functools.wraps(handler)
    def wrapper(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
        try:
            return handler(event, context)
        except ProductServiceError as e:
            logger.warning('Request failed', extra={
                'error_kind': e.kind.value,
                'error_message': e.message,
            })
            return error_to_response(e)
        except Exception:
            logger.exception('Unhandled error in handler', extra={'function_name': handler.__name__})
            return unknown_error_response()

    return wrapper


def with_middlewares(handler: LambdaHandler) -> LambdaHandler:
    """
    Wrap a Lambda handler with the full middleware stack.

    Error mapping wraps both the handler and the whole stack; a failure inside
    the Powertools layers also returns a ``{code, message}`` body.
    """
    wrapped = error_handler_middleware(handler)
    wrapped = tracer.capture_lambda_handler(wrapped)
    wrapped = metrics.log_metrics(wrapped, capture_cold_start_metric=True)
    wrapped = logger.inject_lambda_context(wrapped, correlation_id_path=correlation_paths.API_GATEWAY_REST)
    return error_handler_middleware(wrapped)
