"""
Product domain model.

The Product is the only entity of the service. It is immutable: updates build
a new instance from a request body or from a stored record.
"""

from typing import Annotated, Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

INVALID_PRODUCT_MESSAGE = 'Invalid product info'


class InvalidProductError(ValueError):
    """Raised when product info cannot build a valid Product."""

    def __init__(self, message: str = INVALID_PRODUCT_MESSAGE):
        super().__init__(message)
        self.message = message


class Product(BaseModel):
    """Core Product domain model."""

    model_config = ConfigDict(frozen=True)

    id: Annotated[str, Field(
        min_length=1,
        description='Unique identifier for the product',
        examples=['p1']
    )]

    name: Annotated[str, Field(
        min_length=1,
        description='Product name',
        examples=['Widget']
    )]

    price: Annotated[float, Field(
        strict=True,
        gt=0,
        allow_inf_nan=False,
        description='Unit price, strictly positive',
        examples=[9.99]
    )]

    @classmethod
    def from_info(cls, info: Mapping[str, Any]) -> 'Product':
        """
        Build a Product from its plain projection.

        Args:
            info: Mapping with ``id``, ``name`` and ``price``

        Returns:
            Product instance

        Raises:
            InvalidProductError: If a field is missing or empty, or the price is not a positive number
        """
        try:
            return cls(id=info['id'], name=info['name'], price=info['price'])
        except (KeyError, TypeError, PydanticValidationError) as e:
            raise InvalidProductError() from e

    def to_dict(self) -> Dict[str, Any]:
        """Plain ``{id, name, price}`` projection."""
        return self.model_dump()
