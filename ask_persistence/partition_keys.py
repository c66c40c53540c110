"""Partition key generators.

Each generator maps a RequestContext to the string identifier used as the
record's hash key, raising IdentifierUnavailable when the field it needs is
missing.
"""
from enum import Enum
from typing import Callable, Union

from .context import RequestContext
from .exceptions import IdentifierUnavailable

SOURCE = "PartitionKeyGenerators"

PartitionKeyGenerator = Callable[[RequestContext], str]


def user_id(context: RequestContext) -> str:
    """Use the user id as the partition key."""
    if not context.user_id:
        raise IdentifierUnavailable(SOURCE, "Cannot retrieve user id from request envelope!")
    return context.user_id


def device_id(context: RequestContext) -> str:
    """Use the device id as the partition key."""
    if not context.device_id:
        raise IdentifierUnavailable(SOURCE, "Cannot retrieve device id from request envelope!")
    return context.device_id


def person_id(context: RequestContext) -> str:
    """Use the recognized person id, falling back to the user id."""
    if context.person_id:
        return context.person_id
    return user_id(context)


def user_locale(context: RequestContext) -> str:
    """Use the request locale, falling back to the user id."""
    if context.locale:
        return context.locale
    return user_id(context)


class PartitionKeyGenerators(Enum):
    """Built-in strategies. Members are callable like the functions they wrap."""
    USER_ID = "user_id"
    DEVICE_ID = "device_id"
    PERSON_ID = "person_id"
    USER_LOCALE = "user_locale"

    @property
    def generator(self) -> PartitionKeyGenerator:
        return _GENERATORS[self]

    def __call__(self, context: RequestContext) -> str:
        return self.generator(context)


_GENERATORS = {
    PartitionKeyGenerators.USER_ID: user_id,
    PartitionKeyGenerators.DEVICE_ID: device_id,
    PartitionKeyGenerators.PERSON_ID: person_id,
    PartitionKeyGenerators.USER_LOCALE: user_locale,
}


def resolve_generator(
    value: Union[PartitionKeyGenerators, PartitionKeyGenerator, str, None] = None,
) -> PartitionKeyGenerator:
    """
    Resolve a generator selection to a callable.

    Args:
        value: Enum member, its name or value ("DEVICE_ID" / "device_id"),
            any callable taking a RequestContext, or None for the user id
            strategy.

    Returns:
        Generator callable.

    Raises:
        ValueError: If a string does not name a known strategy.
    """
    if value is None:
        return PartitionKeyGenerators.USER_ID.generator
    if isinstance(value, PartitionKeyGenerators):
        return value.generator
    if isinstance(value, str):
        for strategy in PartitionKeyGenerators:
            if value in (strategy.value, strategy.name):
                return strategy.generator
        raise ValueError(f"Unknown partition key generator: {value}")
    if callable(value):
        return value
    raise ValueError(f"Partition key generator must be callable, got {type(value).__name__}")
