"""Secrets access for the product handlers."""

from product_service.security.secrets_service import SecretNotFoundError, SecretsService

__all__ = [
    "SecretNotFoundError",
    "SecretsService",
]
