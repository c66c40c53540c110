"""Shared test fixtures for the persistence adapter tests."""
from typing import Any, Dict, List, Optional

import pytest

# Add package root to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ask_persistence.client import DynamoDBClient
from ask_persistence.config import DynamoDBSettings
from ask_persistence.context import RequestContext


# =============================================================================
# Mock DynamoDB
# =============================================================================

class MockDynamoDBTable:
    """In-memory DynamoDB table keyed by a single hash key."""

    def __init__(self, key_name: str = "id"):
        self.key_name = key_name
        self.items: Dict[str, Dict[str, Any]] = {}
        self.calls: List[Dict[str, Any]] = []
        self.error: Optional[Exception] = None

    def _check(self, method: str, **kwargs):
        self.calls.append({"method": method, **kwargs})
        if self.error:
            raise self.error

    async def get_item(self, Key: Dict[str, str], ConsistentRead: bool = False):
        self._check("get_item", Key=Key, ConsistentRead=ConsistentRead)
        item = self.items.get(Key[self.key_name])
        return {'Item': item} if item else {}

    async def put_item(self, Item: Dict[str, Any]):
        self._check("put_item", Item=Item)
        self.items[Item[self.key_name]] = Item
        return {}

    async def delete_item(self, Key: Dict[str, str]):
        self._check("delete_item", Key=Key)
        self.items.pop(Key[self.key_name], None)
        return {}

    async def wait_until_exists(self):
        pass


class MockDynamoDBResource:
    """Mock DynamoDB service resource context manager."""

    def __init__(self, table: MockDynamoDBTable):
        self._table = table
        self.table_names: List[str] = []
        self.create_calls: List[Dict[str, Any]] = []
        self.create_error: Optional[Exception] = None

    async def Table(self, name: str):
        self.table_names.append(name)
        return self._table

    async def create_table(self, **kwargs):
        self.create_calls.append(kwargs)
        if self.create_error:
            raise self.create_error
        return self._table

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


class MockSession:
    """Stands in for aioboto3.Session."""

    def __init__(self, resource: MockDynamoDBResource):
        self._resource = resource
        self.resource_calls: List[Dict[str, Any]] = []

    def resource(self, service_name: str, **kwargs):
        self.resource_calls.append({"service_name": service_name, **kwargs})
        return self._resource


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    return DynamoDBSettings(
        DYNAMODB_ENDPOINT="http://localhost:8000",
        DYNAMODB_REGION="us-east-1",
        DYNAMODB_ACCESS_KEY="test",
        DYNAMODB_SECRET_KEY="test",
    )


@pytest.fixture
def mock_table():
    return MockDynamoDBTable()


@pytest.fixture
def mock_resource(mock_table):
    return MockDynamoDBResource(mock_table)


@pytest.fixture
def mock_session(mock_resource):
    return MockSession(mock_resource)


@pytest.fixture
def dynamodb_client(mock_session, settings):
    return DynamoDBClient(settings=settings, session=mock_session)


@pytest.fixture
def request_envelope() -> Dict[str, Any]:
    """Request envelope with every identifying section present but empty."""
    return {
        "version": "1.0",
        "context": {
            "System": {
                "application": {"applicationId": "amzn1.ask.skill.test"},
                "user": {},
                "device": {},
                "person": {},
            }
        },
        "request": {
            "type": "LaunchRequest",
            "requestId": "amzn1.echo-api.request.test",
        },
    }


@pytest.fixture
def request_context(request_envelope) -> RequestContext:
    """Context with userId 'userId' and deviceId 'deviceId'."""
    request_envelope["context"]["System"]["user"]["userId"] = "userId"
    request_envelope["context"]["System"]["device"]["deviceId"] = "deviceId"
    return RequestContext.from_envelope(request_envelope)
