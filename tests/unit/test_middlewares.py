"""Unit tests for the handler middleware stack and the metrics observer."""

import json
from unittest.mock import Mock

from aws_lambda_powertools.metrics import MetricUnit

from product_service.handlers.utils.errors import ExistingItemError
from product_service.handlers.utils.middlewares import error_handler_middleware, with_middlewares
from product_service.handlers.utils.product_metrics import ProductMetrics


class TestErrorHandlerMiddleware:

    def test_passes_response_through(self):
        handler = error_handler_middleware(lambda event, context: {"statusCode": 204})

        assert handler({}, None) == {"statusCode": 204}

    def test_domain_error_is_mapped(self):
        def handler(event, context):
            raise ExistingItemError("Product with id: p1 already exist")

        response = error_handler_middleware(handler)({}, None)

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {
            "code": "database_error",
            "message": "Product with id: p1 already exist",
        }

    def test_unexpected_error_is_unknown_error(self):
        def handler(event, context):
            raise KeyError("boom")

        response = error_handler_middleware(handler)({}, None)

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["message"] == "unknown error"


def test_with_middlewares_keeps_handler_name(api_gateway_event, lambda_context):
    def list_things(event, context):
        return {"statusCode": 200, "body": "[]"}

    wrapped = with_middlewares(list_things)

    assert wrapped.__name__ == "list_things"
    assert wrapped(api_gateway_event(), lambda_context)["statusCode"] == 200


class TestProductMetrics:

    def test_counter_with_product_id(self):
        metrics = Mock()

        ProductMetrics(metrics).count_delete_product("p1")

        metrics.add_metric.assert_called_once_with(name="productDeleted", unit=MetricUnit.Count, value=1)
        metrics.add_metadata.assert_called_once_with(key="productId", value="p1")

    def test_list_counter_has_no_metadata(self):
        metrics = Mock()

        ProductMetrics(metrics).count_get_products()

        metrics.add_metric.assert_called_once_with(name="getProducts", unit=MetricUnit.Count, value=1)
        metrics.add_metadata.assert_not_called()

    def test_emission_failure_is_contained(self):
        metrics = Mock()
        metrics.add_metadata.side_effect = ValueError("metadata rejected")

        ProductMetrics(metrics).count_update_product("p1")

        metrics.add_metric.assert_called_once()


def test_failure_inside_powertools_layers_is_mapped(api_gateway_event):
    def list_things(event, context):
        return {"statusCode": 200, "body": "[]"}

    # No Lambda context, so building the logger context fails before the handler runs
    response = with_middlewares(list_things)(api_gateway_event(), None)

    assert response["statusCode"] == 500
    assert json.loads(response["body"]) == {"code": "internal_server_error", "message": "unknown error"}
