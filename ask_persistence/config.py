"""Configuration for the DynamoDB persistence adapter."""
from dataclasses import dataclass, field
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .partition_keys import PartitionKeyGenerator, resolve_generator

DEFAULT_PARTITION_KEY_NAME = "id"
DEFAULT_ATTRIBUTES_NAME = "attributes"
DEFAULT_CAPACITY_UNITS = 5


class DynamoDBSettings(BaseSettings):
    """DynamoDB connection settings with environment variable support.

    Unset endpoint and credentials fall through to boto's defaults (the
    regional AWS endpoint and the standard credential chain).
    """

    DYNAMODB_ENDPOINT: Optional[str] = None
    DYNAMODB_REGION: str = "us-east-1"
    DYNAMODB_ACCESS_KEY: Optional[str] = None
    DYNAMODB_SECRET_KEY: Optional[str] = None

    # botocore timeouts (seconds)
    DYNAMODB_CONNECT_TIMEOUT: int = 5
    DYNAMODB_READ_TIMEOUT: int = 30

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@dataclass(frozen=True)
class AdapterConfig:
    """Adapter configuration. Fixed for the lifetime of the adapter."""
    table_name: str
    partition_key_name: str = DEFAULT_PARTITION_KEY_NAME
    attributes_name: str = DEFAULT_ATTRIBUTES_NAME
    create_table: bool = False
    partition_key_generator: PartitionKeyGenerator = field(default=None)

    # Provisioned throughput used when create_table is set
    read_capacity_units: int = DEFAULT_CAPACITY_UNITS
    write_capacity_units: int = DEFAULT_CAPACITY_UNITS

    def __post_init__(self):
        if not self.table_name:
            raise ValueError("table_name is required")
        if not self.partition_key_name:
            raise ValueError("partition_key_name must not be empty")
        if not self.attributes_name:
            raise ValueError("attributes_name must not be empty")
        if self.partition_key_name == self.attributes_name:
            raise ValueError("partition_key_name and attributes_name must differ")
        if self.read_capacity_units < 1 or self.write_capacity_units < 1:
            raise ValueError("capacity units must be positive")

        # Frozen: go through object.__setattr__ to normalize once
        object.__setattr__(self, "create_table", self.create_table is True)
        object.__setattr__(
            self,
            "partition_key_generator",
            resolve_generator(self.partition_key_generator),
        )
