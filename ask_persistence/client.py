"""DynamoDB client configuration for the persistence adapter.

Uses aioboto3 for async operations.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import aioboto3
from botocore.config import Config

from .config import DynamoDBSettings

logger = logging.getLogger(__name__)


class DynamoDBClient:
    """
    Shared DynamoDB client configuration.

    Provides an async context manager for the DynamoDB resource. Anything
    not passed explicitly is loaded from DynamoDBSettings (environment
    variables or .env).

    Retries are disabled at the botocore level: a failed call surfaces to
    the adapter on the first attempt.

    Example:
        client = DynamoDBClient()

        async with client.resource() as dynamodb:
            table = await dynamodb.Table('skill_attributes')
            await table.get_item(Key={'id': 'amzn1.ask.account.XYZ'})
    """

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        region_name: Optional[str] = None,
        access_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        settings: Optional[DynamoDBSettings] = None,
        session: Optional[aioboto3.Session] = None,
    ):
        """
        Initialize DynamoDB client configuration.

        Args:
            endpoint_url: DynamoDB endpoint (overrides settings).
            region_name: AWS region (overrides settings).
            access_key: AWS access key (overrides settings).
            secret_key: AWS secret key (overrides settings).
            settings: Connection settings; read from the environment if omitted.
            session: aioboto3 session to reuse.
        """
        settings = settings or DynamoDBSettings()
        self._endpoint_url = endpoint_url or settings.DYNAMODB_ENDPOINT
        self._region_name = region_name or settings.DYNAMODB_REGION
        self._access_key = access_key or settings.DYNAMODB_ACCESS_KEY
        self._secret_key = secret_key or settings.DYNAMODB_SECRET_KEY
        self._session = session or aioboto3.Session()

        self._config = Config(
            retries={
                'max_attempts': 1,
                'mode': 'standard'
            },
            connect_timeout=settings.DYNAMODB_CONNECT_TIMEOUT,
            read_timeout=settings.DYNAMODB_READ_TIMEOUT,
        )

        logger.debug(f"DynamoDB client configured for {self._endpoint_url or 'AWS'} ({self._region_name})")

    @property
    def _resource_config(self) -> Dict[str, Any]:
        """Get configuration dict for resource creation, skipping unset values."""
        resource_config = {
            'region_name': self._region_name,
            'config': self._config,
        }
        if self._endpoint_url:
            resource_config['endpoint_url'] = self._endpoint_url
        if self._access_key and self._secret_key:
            resource_config['aws_access_key_id'] = self._access_key
            resource_config['aws_secret_access_key'] = self._secret_key
        return resource_config

    @asynccontextmanager
    async def resource(self):
        """
        Get async DynamoDB resource context manager.

        Yields:
            DynamoDB service resource.
        """
        async with self._session.resource('dynamodb', **self._resource_config) as dynamodb:
            yield dynamodb

    @asynccontextmanager
    async def table(self, table_name: str):
        """
        Get a table within a resource context.

        Args:
            table_name: Name of the DynamoDB table.

        Yields:
            Table resource.
        """
        async with self.resource() as dynamodb:
            yield await dynamodb.Table(table_name)

    def __repr__(self) -> str:
        return f"DynamoDBClient(endpoint={self._endpoint_url}, region={self._region_name})"
