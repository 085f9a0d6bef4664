"""
Output models for API responses using Pydantic.

Response bodies returned by the product handlers. Field names follow the
public API, including the literal ``deleted product`` key on deletion.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from product_service.models.product import Product


class CreateProductOutput(BaseModel):
    """Response model for successful product creation."""

    message: Annotated[str, Field(
        default='Product created',
        description='Result message',
    )] = 'Product created'

    product: Annotated[Product, Field(
        description='The product as stored'
    )]


class UpdateProductOutput(BaseModel):
    """Response model for successful product update."""

    message: Annotated[str, Field(
        default='Product updated',
        description='Result message',
    )] = 'Product updated'

    new_product: Annotated[Product, Field(
        description='The product after the update'
    )]


class DeleteProductOutput(BaseModel):
    """Response model for successful product deletion."""

    model_config = ConfigDict(populate_by_name=True)

    message: Annotated[str, Field(
        description='Result message',
        examples=['product id p1 deleted']
    )]

    deleted_product: Annotated[Product, Field(
        alias='deleted product',
        description='The product record before deletion'
    )]


class ErrorOutput(BaseModel):
    """Error body returned for every failed request."""

    code: Annotated[str, Field(
        description='Machine readable error code',
        examples=['validation_error', 'not_found']
    )]

    message: Annotated[str, Field(
        description='Human readable error message',
        examples=["Missing 'id' parameter in path"]
    )]
