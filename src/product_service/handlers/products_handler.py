"""
Products Handler - Lambda functions for the product CRUD API.

One Lambda handler per operation, all sharing the application instance built
when the execution environment starts:

- GET    /products          -> get_products_handler
- GET    /products/{id}     -> get_product_handler
- POST   /products          -> post_product_handler
- PUT    /products          -> put_product_handler
- DELETE /products/{id}     -> delete_product_handler
"""

from typing import Any, Dict

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from product_service.handlers.utils.middlewares import with_middlewares
from product_service.logic.products_application import ProductsApplication

# Built once per execution environment and reused across invocations
products_application = ProductsApplication.using_env()


@with_middlewares
def get_products_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return products_application.get_products(APIGatewayProxyEvent(event))


@with_middlewares
def get_product_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return products_application.get_product(APIGatewayProxyEvent(event))


@with_middlewares
def post_product_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return products_application.post_product(APIGatewayProxyEvent(event))


@with_middlewares
def put_product_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return products_application.put_product(APIGatewayProxyEvent(event))


@with_middlewares
def delete_product_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return products_application.delete_product(APIGatewayProxyEvent(event))
