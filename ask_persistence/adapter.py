"""DynamoDB persistence adapter for request attributes.

Table Design:
    One item per partition key:
    - <partition_key_name> (HASH, S) - identifier from the key generator
    - <attributes_name> (M) - the attributes document, replaced on every write
"""
import logging
from typing import Any, Dict, Optional, Union

from botocore.exceptions import ClientError

from .client import DynamoDBClient
from .config import AdapterConfig, DEFAULT_ATTRIBUTES_NAME, DEFAULT_PARTITION_KEY_NAME
from .context import RequestContext
from .exceptions import ProvisioningFailure, StoreOperationFailure, error_message
from .interfaces import PersistenceAdapter
from .partition_keys import PartitionKeyGenerator, PartitionKeyGenerators
from .serialization import from_dynamo, to_dynamo

logger = logging.getLogger(__name__)


def _error_code(exc: Exception) -> Optional[str]:
    """DynamoDB error code of a botocore ClientError, None for anything else."""
    if isinstance(exc, ClientError):
        return exc.response.get('Error', {}).get('Code')
    return None


class DynamoDbPersistenceAdapter(PersistenceAdapter):
    """
    Stores attributes documents in a DynamoDB table.

    Every operation derives the identifier from the request context with the
    configured partition key generator, then issues exactly one DynamoDB call.
    Generator failures propagate as-is; store failures are wrapped in
    StoreOperationFailure. Nothing is retried.

    Use the create() factory when the table should be provisioned: Python
    constructors cannot await, so table creation happens there. The
    constructor rejects create_table=True.

    Example:
        adapter = await DynamoDbPersistenceAdapter.create(
            table_name='skill_attributes',
            create_table=True,
        )
        attributes = await adapter.read(context)
        attributes['visits'] = attributes.get('visits', 0) + 1
        await adapter.write(context, attributes)
    """

    def __init__(
        self,
        table_name: Optional[str] = None,
        partition_key_name: Optional[str] = None,
        attributes_name: Optional[str] = None,
        create_table: bool = False,
        dynamodb_client: Optional[DynamoDBClient] = None,
        partition_key_generator: Union[PartitionKeyGenerators, PartitionKeyGenerator, str, None] = None,
        config: Optional[AdapterConfig] = None,
    ):
        """
        Initialize the adapter.

        Args:
            table_name: DynamoDB table name (required unless config is given).
            partition_key_name: Hash key attribute name (default 'id').
            attributes_name: Attribute holding the document (default 'attributes').
            create_table: Provision the table; only allowed through create().
            dynamodb_client: Client to use; a new DynamoDBClient if omitted.
            partition_key_generator: Key strategy (default user id).
            config: Full configuration, used instead of the individual fields.

        Raises:
            ValueError: If the configuration is invalid, or create_table is
                set outside create().
        """
        if config is None:
            config = AdapterConfig(
                table_name=table_name,
                partition_key_name=partition_key_name or DEFAULT_PARTITION_KEY_NAME,
                attributes_name=attributes_name or DEFAULT_ATTRIBUTES_NAME,
                create_table=create_table,
                partition_key_generator=partition_key_generator,
            )
        if config.create_table and not getattr(self, "_via_create", False):
            raise ValueError(
                "create_table requires provisioning; use "
                f"await {type(self).__name__}.create(...) instead of the constructor"
            )
        self._config = config
        self._client = dynamodb_client or DynamoDBClient()
        self._source = type(self).__name__

    @classmethod
    async def create(cls, *args, **kwargs) -> "DynamoDbPersistenceAdapter":
        """
        Build an adapter and provision its table if create_table is set.

        Takes the same arguments as the constructor.

        Raises:
            ProvisioningFailure: If the table could not be created for any
                reason other than already existing.
        """
        adapter = cls.__new__(cls)
        adapter._via_create = True
        adapter.__init__(*args, **kwargs)
        if adapter.config.create_table:
            await adapter.ensure_table()
        return adapter

    @property
    def config(self) -> AdapterConfig:
        return self._config

    @property
    def table_name(self) -> str:
        return self._config.table_name

    async def ensure_table(self) -> bool:
        """
        Create the table with the partition key as its only hash key.

        Returns:
            True if the table was created, False if it already existed.

        Raises:
            ProvisioningFailure: On any other failure.
        """
        try:
            async with self._client.resource() as dynamodb:
                table = await dynamodb.create_table(
                    TableName=self.table_name,
                    KeySchema=[
                        {'AttributeName': self._config.partition_key_name, 'KeyType': 'HASH'}
                    ],
                    AttributeDefinitions=[
                        {'AttributeName': self._config.partition_key_name, 'AttributeType': 'S'}
                    ],
                    ProvisionedThroughput={
                        'ReadCapacityUnits': self._config.read_capacity_units,
                        'WriteCapacityUnits': self._config.write_capacity_units,
                    },
                )
                await table.wait_until_exists()
        except Exception as e:
            if _error_code(e) == 'ResourceInUseException':
                logger.debug(f"Table {self.table_name} already exists")
                return False
            logger.error(f"Failed to create table {self.table_name}: {e}")
            raise ProvisioningFailure(self._source, self.table_name, error_message(e)) from e

        logger.info(f"Created table {self.table_name}")
        return True

    def _partition_key(self, context: RequestContext) -> str:
        return self._config.partition_key_generator(context)

    def _failure(self, operation: str, identifier: str, exc: Exception) -> StoreOperationFailure:
        failure = StoreOperationFailure(
            self._source,
            operation,
            identifier,
            self.table_name,
            error_message(exc),
        )
        logger.error(failure.message)
        return failure

    async def read(self, context: RequestContext) -> Dict[str, Any]:
        """
        Get the attributes document for the request.

        Returns:
            Stored document, or an empty dict if there is no item (or the
            item has no attributes field).

        Raises:
            IdentifierUnavailable: If no partition key can be derived.
            StoreOperationFailure: If the GetItem call fails.
        """
        attributes_id = self._partition_key(context)

        try:
            async with self._client.table(self.table_name) as table:
                response = await table.get_item(
                    Key={self._config.partition_key_name: attributes_id},
                    ConsistentRead=True,
                )
        except Exception as e:
            raise self._failure("read", attributes_id, e) from e

        item = response.get('Item') if response else None
        if not item:
            logger.debug(f"No attributes for {attributes_id} in {self.table_name}")
            return {}

        return from_dynamo(item.get(self._config.attributes_name) or {})

    async def write(self, context: RequestContext, attributes: Dict[str, Any]) -> None:
        """
        Replace the attributes document for the request.

        Raises:
            IdentifierUnavailable: If no partition key can be derived.
            StoreOperationFailure: If the PutItem call fails.
        """
        attributes_id = self._partition_key(context)

        item = {
            self._config.partition_key_name: attributes_id,
            self._config.attributes_name: to_dynamo(attributes),
        }

        try:
            async with self._client.table(self.table_name) as table:
                await table.put_item(Item=item)
        except Exception as e:
            raise self._failure("write", attributes_id, e) from e

        logger.debug(f"Saved attributes for {attributes_id} to {self.table_name}")

    async def delete(self, context: RequestContext) -> None:
        """
        Delete the attributes document for the request.

        Raises:
            IdentifierUnavailable: If no partition key can be derived.
            StoreOperationFailure: If the DeleteItem call fails.
        """
        attributes_id = self._partition_key(context)

        try:
            async with self._client.table(self.table_name) as table:
                await table.delete_item(Key={self._config.partition_key_name: attributes_id})
        except Exception as e:
            raise self._failure("delete", attributes_id, e) from e

        logger.debug(f"Deleted attributes for {attributes_id} from {self.table_name}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table={self.table_name}, client={self._client!r})"
