"""
DynamoDB implementation of the product store.

Products live in a single-table design: each record is keyed by
``PK = SK = PRODUCT#<id>`` and carries the product attributes. Uniqueness on
create and existence on update/delete are enforced by DynamoDB conditional
writes, evaluated atomically by the table.
"""

from decimal import Decimal, DecimalException
from typing import Any, Dict, List

from botocore.exceptions import BotoCoreError, ClientError

from product_service.dal import ProductStore
from product_service.dal.results import StoreResult
from product_service.handlers.utils.observability import logger, tracer
from product_service.models.product import InvalidProductError, Product

KEY_PREFIX = 'PRODUCT#'
SCAN_PAGE_SIZE = 100
CONDITIONAL_CHECK_FAILED = 'ConditionalCheckFailedException'

ITEM_NOT_EXISTS_CONDITION = 'attribute_not_exists(PK) AND attribute_not_exists(SK)'
ITEM_EXISTS_CONDITION = 'attribute_exists(PK) AND attribute_exists(SK)'


def product_key(product_id: str) -> Dict[str, str]:
    """Composite primary key derived from a product id."""
    key = f'{KEY_PREFIX}{product_id}'
    return {'PK': key, 'SK': key}


def to_record(product: Product) -> Dict[str, Any]:
    """Map a Product to its DynamoDB item."""
    return {
        **product_key(product.id),
        'id': product.id,
        'name': product.name,
        # DynamoDB numbers must be Decimal; str() keeps the float's shortest repr
        'price': Decimal(str(product.price)),
    }


def from_record(item: Dict[str, Any]) -> Product:
    """
    Map a DynamoDB item back to a Product, dropping the key attributes.

    Raises:
        InvalidProductError: If the stored attributes do not form a valid Product
    """
    price = item.get('price')
    return Product.from_info({
        'id': item.get('id'),
        'name': item.get('name'),
        'price': float(price) if isinstance(price, Decimal) else price,
    })


class DynamoDbProductStore(ProductStore):
    """Product store backed by a DynamoDB table."""

    def __init__(self, table_name: str, dynamodb: Any) -> None:
        """
        Initialize the DynamoDB product store.

        Args:
            table_name: Name of the DynamoDB table
            dynamodb: boto3 DynamoDB service resource, shared for the process lifetime
        """
        self.table_name = table_name
        self.table = dynamodb.Table(table_name)
        logger.debug(f'DynamoDB product store initialized for table: {table_name}')

    def _backend_error(self, operation: str, product_id: str, error: Exception) -> StoreResult:
        if isinstance(error, ClientError):
            error_code = error.response['Error']['Code']
        else:
            error_code = type(error).__name__
        logger.error(f'DynamoDB error during {operation}', extra={
            'error_code': error_code,
            'error': str(error),
            'table_name': self.table_name,
            'product_id': product_id,
        })
        return StoreResult.backend_error(error)

    @tracer.capture_method
    def list_products(self) -> List[Product]:
        """
        Scan one page of products.

        Returns:
            Products in the first scan page, empty when the table has none

        Raises:
            ClientError: If the DynamoDB scan fails
            InvalidProductError: If a stored record is not a valid product
        """
        response = self.table.scan(Limit=SCAN_PAGE_SIZE)
        items = response.get('Items', [])
        if not items:
            return []

        products = [from_record(item) for item in items]
        tracer.put_annotation('products_listed', len(products))
        return products

    @tracer.capture_method
    def get_by_id(self, product_id: str) -> StoreResult:
        """Point lookup by the derived key."""
        try:
            response = self.table.get_item(Key=product_key(product_id))
            item = response.get('Item')
            if not item:
                logger.info(f'Product not found: {product_id}')
                return StoreResult.not_found()
            return StoreResult.ok(from_record(item))
        except (ClientError, BotoCoreError, InvalidProductError) as e:
            return self._backend_error('GetItem', product_id, e)

    @tracer.capture_method
    def create(self, product: Product) -> StoreResult:
        """
        Conditional put that only succeeds when no record has this id.

        A price outside the DynamoDB number range fails serialization and is
        reported as a backend error.
        """
        try:
            self.table.put_item(Item=to_record(product), ConditionExpression=ITEM_NOT_EXISTS_CONDITION)
        except ClientError as e:
            if e.response['Error']['Code'] == CONDITIONAL_CHECK_FAILED:
                logger.info(f'Product already exists: {product.id}')
                return StoreResult.conflict()
            return self._backend_error('PutItem', product.id, e)
        except (BotoCoreError, DecimalException) as e:
            return self._backend_error('PutItem', product.id, e)

        tracer.put_annotation('product_created', product.id)
        return StoreResult.ok(product)

    @tracer.capture_method
    def update(self, product: Product) -> StoreResult:
        """Conditional put that only succeeds when a record with this id exists."""
        try:
            self.table.put_item(Item=to_record(product), ConditionExpression=ITEM_EXISTS_CONDITION)
        except ClientError as e:
            if e.response['Error']['Code'] == CONDITIONAL_CHECK_FAILED:
                logger.info(f'Product not found for update: {product.id}')
                return StoreResult.not_found()
            return self._backend_error('PutItem', product.id, e)
        except (BotoCoreError, DecimalException) as e:
            return self._backend_error('PutItem', product.id, e)

        tracer.put_annotation('product_updated', product.id)
        return StoreResult.ok(product)

    @tracer.capture_method
    def delete(self, product_id: str) -> StoreResult:
        """Conditional delete returning the prior record."""
        if not product_id:
            return StoreResult.not_found()

        try:
            response = self.table.delete_item(
                Key=product_key(product_id),
                ConditionExpression='attribute_exists(PK)',
                ReturnValues='ALL_OLD',
            )
            deleted_item = response.get('Attributes')
            if not deleted_item:
                logger.info(f'Product not found for deletion: {product_id}')
                return StoreResult.not_found()
            return StoreResult.ok(from_record(deleted_item))
        except ClientError as e:
            if e.response['Error']['Code'] == CONDITIONAL_CHECK_FAILED:
                logger.info(f'Product not found for deletion: {product_id}')
                return StoreResult.not_found()
            return self._backend_error('DeleteItem', product_id, e)
        except (BotoCoreError, InvalidProductError) as e:
            return self._backend_error('DeleteItem', product_id, e)
