"""
Environment variable models for type-safe configuration.

Parsed once per process with aws-lambda-env-modeler; the product handlers
read the table, region and backend mode from here.
"""

from typing import Annotated

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class ProductHandlerEnvVars(BaseModel):
    """Environment variables for the product Lambda handlers."""

    # DynamoDB table holding the products
    TABLE_NAME: Annotated[str, Field(
        description='DynamoDB table name for product storage',
        min_length=1
    )]

    REGION: Annotated[str, Field(
        description='AWS region of the DynamoDB table'
    )] = 'us-east-1'

    # Local DynamoDB instead of AWS (serverless-offline, docker)
    IS_OFFLINE: Annotated[bool, Field(
        description='Use the local DynamoDB endpoint'
    )] = False

    OFFLINE_ENDPOINT: Annotated[str, Field(
        description='DynamoDB Local endpoint used when IS_OFFLINE is true'
    )] = 'http://localhost:8000'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'products-api'

    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'


def get_handler_env_vars() -> ProductHandlerEnvVars:
    """
    Get typed environment variables for the product handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=ProductHandlerEnvVars)
