"""
Business metrics for the product operations.

``ProductMetrics`` is the observer the application layer notifies after each
successful operation. Emission is fire-and-forget: a failure to record a
metric is logged and never changes the response.
"""

from typing import Optional

from aws_lambda_powertools.metrics import Metrics, MetricUnit

from product_service.handlers.utils.observability import logger
from product_service.handlers.utils.observability import metrics as default_metrics

PRODUCT_ID_METADATA = 'productId'


class ProductMetrics:
    """Counters for list, get, create, update and delete."""

    def __init__(self, metrics: Optional[Metrics] = None):
        self.metrics = metrics or default_metrics

    def _count(self, name: str, product_id: Optional[str] = None) -> None:
        try:
            self.metrics.add_metric(name=name, unit=MetricUnit.Count, value=1)
            if product_id is not None:
                self.metrics.add_metadata(key=PRODUCT_ID_METADATA, value=product_id)
        except Exception as e:
            logger.warning('Failed to record metric', extra={'metric_name': name, 'error': str(e)})

    def count_get_products(self) -> None:
        self._count('getProducts')

    def count_get_single_product(self, product_id: str) -> None:
        self._count('getProduct', product_id)

    def count_create_product(self, product_id: str) -> None:
        self._count('createProduct', product_id)

    def count_update_product(self, product_id: str) -> None:
        self._count('updateProduct', product_id)

    def count_delete_product(self, product_id: str) -> None:
        self._count('productDeleted', product_id)
