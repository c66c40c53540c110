"""Custom exceptions for the persistence adapter."""
from enum import Enum


class ErrorKind(Enum):
    """Failure categories raised by this package."""
    IDENTIFIER_UNAVAILABLE = "identifier_unavailable"
    PROVISIONING_FAILURE = "provisioning_failure"
    STORE_OPERATION_FAILURE = "store_operation_failure"


class PersistenceError(Exception):
    """Base exception for the persistence adapter.

    Attributes:
        kind: Failure category.
        source: Name of the component that raised the error.
    """
    kind: ErrorKind

    def __init__(self, source: str, message: str):
        super().__init__(message)
        self.source = source
        self.message = message

    @property
    def name(self) -> str:
        """Identity tag in the ASK SDK form, e.g. 'AskSdk.PartitionKeyGenerators Error'."""
        return f"AskSdk.{self.source} Error"


class IdentifierUnavailable(PersistenceError):
    """Raised when a partition key cannot be derived from the request context."""
    kind = ErrorKind.IDENTIFIER_UNAVAILABLE


class ProvisioningFailure(PersistenceError):
    """Raised when the backing table cannot be created."""
    kind = ErrorKind.PROVISIONING_FAILURE

    def __init__(self, source: str, table_name: str, cause: str):
        super().__init__(source, f"Could not create table ({table_name}): {cause}")
        self.table_name = table_name
        self.cause = cause


class StoreOperationFailure(PersistenceError):
    """Raised when a get/put/delete call against the table fails."""
    kind = ErrorKind.STORE_OPERATION_FAILURE

    # operation -> (verb, preposition)
    _PHRASES = {
        "read": ("read", "from"),
        "write": ("save", "to"),
        "delete": ("delete", "from"),
    }

    def __init__(
        self,
        source: str,
        operation: str,
        identifier: str,
        table_name: str,
        cause: str,
    ):
        verb, preposition = self._PHRASES[operation]
        super().__init__(
            source,
            f"Could not {verb} item ({identifier}) {preposition} table ({table_name}): {cause}",
        )
        self.operation = operation
        self.identifier = identifier
        self.table_name = table_name
        self.cause = cause


def error_message(exc: BaseException) -> str:
    """Extract the store's own message from a botocore error, falling back to str()."""
    response = getattr(exc, "response", None)
    if isinstance(response, dict):
        message = response.get("Error", {}).get("Message")
        if message:
            return message
    return str(exc)
