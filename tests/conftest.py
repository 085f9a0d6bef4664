"""
Pytest configuration and shared fixtures for the products API.

Environment variables are set at import time so that modules reading them
when first imported (the handlers module builds its application then) see
the test configuration.
"""

import json
import os
from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock

os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "TABLE_NAME": "test-products-table",
    "REGION": "us-east-1",
    "POWERTOOLS_SERVICE_NAME": "test-products-api",
    "POWERTOOLS_METRICS_NAMESPACE": "TestProductsApi",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

import boto3
import pytest
from moto import mock_aws

from product_service.dal.dynamodb_store import DynamoDbProductStore
from product_service.handlers.utils.product_metrics import ProductMetrics
from product_service.logic.products_application import ProductsApplication
from product_service.models.product import Product
from product_service.security.secrets_service import SecretsService

TEST_TABLE_NAME = "test-products-table"


# DynamoDB fixtures
@pytest.fixture
def dynamodb_resource():
    """DynamoDB resource backed by moto."""
    with mock_aws():
        yield boto3.resource("dynamodb", region_name="us-east-1")


@pytest.fixture
def products_table(dynamodb_resource):
    """Create the single-table design products table."""
    table = dynamodb_resource.create_table(
        TableName=TEST_TABLE_NAME,
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    table.wait_until_exists()
    yield table


@pytest.fixture
def product_store(dynamodb_resource, products_table) -> DynamoDbProductStore:
    """Product store bound to the mocked table."""
    return DynamoDbProductStore(table_name=TEST_TABLE_NAME, dynamodb=dynamodb_resource)


@pytest.fixture
def metrics_observer() -> Mock:
    """Metrics observer that records calls instead of emitting."""
    return Mock(spec=ProductMetrics)


@pytest.fixture
def dynamodb_application(product_store, metrics_observer) -> ProductsApplication:
    """Application wired to the mocked DynamoDB table."""
    return ProductsApplication(store=product_store, metrics=metrics_observer, secrets=SecretsService())


# Sample data fixtures
@pytest.fixture
def sample_product() -> Product:
    return Product(id="p1", name="Widget", price=9.99)


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway REST proxy events."""

    def make_event(
        method: str = "GET",
        path: str = "/products",
        path_parameters: Optional[Dict[str, str]] = None,
        body: Any = None,
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "httpMethod": method,
            "path": path,
            "resource": path,
            "headers": {"Content-Type": "application/json"},
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
            },
            "pathParameters": path_parameters,
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return make_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-products-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-products-function"
    context.memory_limit_in_mb = 512
    context.get_remaining_time_in_millis = lambda: 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-products-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
