"""DynamoDB persistence adapter for voice skill request attributes."""
from .adapter import DynamoDbPersistenceAdapter
from .client import DynamoDBClient
from .config import AdapterConfig, DynamoDBSettings
from .context import Device, Person, Request, RequestContext, SystemState, User
from .exceptions import (
    ErrorKind,
    IdentifierUnavailable,
    PersistenceError,
    ProvisioningFailure,
    StoreOperationFailure,
)
from .interfaces import PersistenceAdapter
from .log_config import LogSettings, setup_logging
from .partition_keys import PartitionKeyGenerator, PartitionKeyGenerators, resolve_generator

__all__ = [
    "DynamoDbPersistenceAdapter",
    "DynamoDBClient",
    "AdapterConfig",
    "DynamoDBSettings",
    "RequestContext",
    "SystemState",
    "User",
    "Device",
    "Person",
    "Request",
    "ErrorKind",
    "PersistenceError",
    "IdentifierUnavailable",
    "ProvisioningFailure",
    "StoreOperationFailure",
    "PersistenceAdapter",
    "LogSettings",
    "setup_logging",
    "PartitionKeyGenerator",
    "PartitionKeyGenerators",
    "resolve_generator",
]
