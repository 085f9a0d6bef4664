"""
Vault file secrets for Lambda applications.

Secrets are delivered by a sidecar as JSON files of the form
``{"data": {"KEY": "value"}}``. The service reads them once when it is built;
a missing or malformed file is logged and the secrets loaded so far are kept.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from product_service.handlers.utils.observability import logger

FILE_SECRET_DEFAULT_VALUE = '/tmp/vault/secrets.json'
FILE_STACK_SECRET_DEFAULT_VALUE = '/tmp/vault/secretsStack.json'
FILE_ENCODING = 'utf-8'
ERROR_READING_FILES_SECRETS = 'Error reading or parsing secret files'


class SecretNotFoundError(Exception):
    """Exception raised when secret is not found."""
    pass


class SecretsService:
    """Read-only key-value view over the vault secret files."""

    def __init__(self, secrets: Optional[Dict[str, str]] = None):
        self._secrets = dict(secrets or {})

    @classmethod
    def from_files(cls, paths: Iterable[Union[str, Path]]) -> 'SecretsService':
        """
        Load secrets from vault files, later files overriding earlier ones.

        Args:
            paths: Secret files to read, in priority order (lowest first)

        Returns:
            SecretsService with every secret that could be loaded
        """
        data: Dict[str, str] = {}
        for path in paths:
            try:
                content = Path(path).read_text(encoding=FILE_ENCODING)
                data.update(json.loads(content).get('data') or {})
            except (OSError, ValueError, AttributeError) as e:
                logger.error(ERROR_READING_FILES_SECRETS, extra={
                    'path': str(path),
                    'error': str(e),
                })
                break

        logger.debug('Secrets loaded', extra={'secret_count': len(data)})
        return cls(data)

    @classmethod
    def with_defaults(cls) -> 'SecretsService':
        """Load the default vault files."""
        return cls.from_files([FILE_SECRET_DEFAULT_VALUE, FILE_STACK_SECRET_DEFAULT_VALUE])

    def get_secret(self, key: str) -> str:
        """
        Return a secret value.

        Raises:
            SecretNotFoundError: If the key is unknown or empty
        """
        value = self._secrets.get(key)
        if not value:
            raise SecretNotFoundError(f'Secret {key} not found')
        return value
