"""
Business Logic Layer for product management.

``ProductsApplication`` orchestrates one operation per request: extract and
validate the input, make a single call to the product store, and turn the
store result into a response or a domain error. Domain errors are mapped to
HTTP responses by the handler middleware.
"""

import json
from typing import Any, Dict, Mapping, Optional

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from product_service.dal import ProductStore, get_product_store
from product_service.dal.results import StoreOutcome, StoreResult
from product_service.handlers.models.env_vars import ProductHandlerEnvVars, get_handler_env_vars
from product_service.handlers.utils.errors import (
    ExistingItemError,
    NotFoundError,
    SystemFailureError,
    ValidationError,
)
from product_service.handlers.utils.observability import logger, tracer
from product_service.handlers.utils.product_metrics import ProductMetrics
from product_service.handlers.utils.responses import create_api_response
from product_service.models.output import CreateProductOutput, DeleteProductOutput, UpdateProductOutput
from product_service.models.product import InvalidProductError, Product
from product_service.security.secrets_service import SecretsService

MISSING_ID_MESSAGE = "Missing 'id' parameter in path"
MISSING_BODY_INFO_MESSAGE = 'Missing info on body'
INVALID_JSON_MESSAGE = 'Invalid JSON in request body'
REQUIRED_PRODUCT_FIELDS = ('id', 'name', 'price')


class ProductsApplication:
    """Manages listing, retrieval, creation, modification and deletion of products."""

    def __init__(
        self,
        store: ProductStore,
        metrics: Optional[ProductMetrics] = None,
        secrets: Optional[SecretsService] = None,
    ):
        """
        Initialize the products application.

        Args:
            store: Product store implementation
            metrics: Metrics observer, defaults to the Powertools backed one
            secrets: Secrets loaded from the vault files, defaults to the standard files.
                None of the product operations read it; it is available to
                handlers that need credentials.
        """
        self.store = store
        self.metrics = metrics or ProductMetrics()
        self.secrets = secrets or SecretsService.with_defaults()

    @classmethod
    def using_env(cls, env_vars: Optional[ProductHandlerEnvVars] = None) -> 'ProductsApplication':
        """
        Build the application from environment configuration.

        Connects to DynamoDB Local when ``IS_OFFLINE`` is true, otherwise to
        the table in ``REGION``.
        """
        env_vars = env_vars or get_handler_env_vars()
        logger.info('Building products application', extra={
            'table_name': env_vars.TABLE_NAME,
            'is_offline': env_vars.IS_OFFLINE,
        })
        return cls(store=get_product_store(env_vars))

    @tracer.capture_method
    def get_products(self, event: APIGatewayProxyEvent) -> Dict[str, Any]:
        """List the first page of products. An empty table is a successful empty list."""
        products = self.store.list_products()
        products_info = [product.to_dict() for product in products]

        if not products_info:
            logger.warning('No items found')
        else:
            logger.info('Products retrieved', extra={'products_count': len(products_info)})

        self.metrics.count_get_products()
        return create_api_response(status_code=200, body=json.dumps(products_info))

    @tracer.capture_method
    def get_product(self, event: APIGatewayProxyEvent) -> Dict[str, Any]:
        """Return the product whose id is in the path."""
        product_id = self.validate_product_id(event)
        tracer.put_annotation('product_id', product_id)

        result = self.store.get_by_id(product_id)
        self._raise_for_backend_error(result, 'retrieving', product_id)
        if result.outcome is StoreOutcome.NOT_FOUND:
            logger.warning(f'No item with ID {product_id} found')
            raise NotFoundError(f'No item with ID {product_id} found')

        logger.info(f'Product retrieved with ID {product_id}', extra={'product': result.product.to_dict()})
        self.metrics.count_get_single_product(product_id)
        return create_api_response(status_code=200, body=result.product.model_dump_json())

    @tracer.capture_method
    def post_product(self, event: APIGatewayProxyEvent) -> Dict[str, Any]:
        """Create a product when no product with the same id exists."""
        product = self.create_product(self.validate_product_info(event))
        tracer.put_annotation('product_id', product.id)

        result = self.store.create(product)
        self._raise_for_backend_error(result, 'creating', product.id)
        if result.outcome is StoreOutcome.CONFLICT:
            logger.warning('Product not created', extra={'product_id': product.id})
            raise ExistingItemError(f'Product with id: {product.id} already exist')

        logger.info(f'Product created with ID {product.id}')
        self.metrics.count_create_product(product.id)
        response = CreateProductOutput(product=result.product)
        return create_api_response(status_code=201, body=response.model_dump_json())

    @tracer.capture_method
    def put_product(self, event: APIGatewayProxyEvent) -> Dict[str, Any]:
        """Replace a product when a product with the same id exists."""
        product = self.create_product(self.validate_product_info(event))
        tracer.put_annotation('product_id', product.id)

        result = self.store.update(product)
        self._raise_for_backend_error(result, 'updating', product.id)
        if result.outcome is StoreOutcome.NOT_FOUND:
            logger.warning('Product not updated', extra={'product_id': product.id})
            raise NotFoundError(f'Product not updated, No item with ID {product.id} found')

        logger.info(f'Product updated with ID {product.id}')
        self.metrics.count_update_product(product.id)
        response = UpdateProductOutput(new_product=result.product)
        return create_api_response(status_code=200, body=response.model_dump_json())

    @tracer.capture_method
    def delete_product(self, event: APIGatewayProxyEvent) -> Dict[str, Any]:
        """Delete the product whose id is in the path, returning the deleted record."""
        product_id = self.validate_product_id(event)
        tracer.put_annotation('product_id', product_id)

        result = self.store.delete(product_id)
        self._raise_for_backend_error(result, 'deleting', product_id)
        if result.outcome is StoreOutcome.NOT_FOUND:
            logger.warning(f'No item with ID {product_id} found')
            raise NotFoundError(f'No item with ID {product_id} found')

        logger.info(f'Product deleted with ID {product_id}')
        self.metrics.count_delete_product(product_id)
        response = DeleteProductOutput(message=f'product id {product_id} deleted', deleted_product=result.product)
        return create_api_response(status_code=200, body=response.model_dump_json(by_alias=True))

    def create_product(self, info: Mapping[str, Any]) -> Product:
        """
        Build a Product from validated request info.

        Raises:
            ValidationError: If the info does not form a valid product, e.g. a negative price
        """
        try:
            return Product.from_info(info)
        except InvalidProductError as e:
            logger.warning(e.message, extra={'product_info': dict(info)})
            raise ValidationError(e.message)

    def validate_product_info(self, event: APIGatewayProxyEvent) -> Mapping[str, Any]:
        """
        Extract the ``product`` object from the request body.

        Raises:
            ValidationError: If the body is not JSON or lacks a truthy id, name or price
        """
        try:
            body = json.loads(event.body or '{}')
        except json.JSONDecodeError:
            logger.warning(INVALID_JSON_MESSAGE)
            raise ValidationError(INVALID_JSON_MESSAGE)

        info = body.get('product') if isinstance(body, dict) else None
        if not isinstance(info, dict) or not all(info.get(field) for field in REQUIRED_PRODUCT_FIELDS):
            logger.warning(MISSING_BODY_INFO_MESSAGE)
            raise ValidationError(MISSING_BODY_INFO_MESSAGE)
        return info

    def validate_product_id(self, event: APIGatewayProxyEvent) -> str:
        """
        Extract the product id path parameter.

        Raises:
            ValidationError: If the id is missing or empty
        """
        product_id = (event.path_parameters or {}).get('id')
        if not product_id:
            logger.warning(MISSING_ID_MESSAGE)
            raise ValidationError(MISSING_ID_MESSAGE)
        return product_id

    def _raise_for_backend_error(self, result: StoreResult, action: str, product_id: str) -> None:
        if result.outcome is StoreOutcome.BACKEND_ERROR:
            logger.error(f'Backend failure while {action} product', extra={
                'product_id': product_id,
                'cause': str(result.cause),
            })
            raise SystemFailureError(f'Error {action} product with ID {product_id}')
