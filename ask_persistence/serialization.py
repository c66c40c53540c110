"""Number conversion between JSON-style documents and DynamoDB items.

boto3 rejects float values on write and returns every number as Decimal on
read. Documents handed to and returned from the adapter use plain int/float.
Integral numbers read back as int, so a stored 2.0 comes back as 2.
"""
from decimal import Decimal
from typing import Any


def to_dynamo(obj: Any) -> Any:
    """
    Recursively convert floats to Decimal for DynamoDB compatibility.

    Example:
        >>> to_dynamo({"score": 4.5, "tags": ["a", 1.25]})
        {'score': Decimal('4.5'), 'tags': ['a', Decimal('1.25')]}
    """
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, dict):
        return {key: to_dynamo(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_dynamo(value) for value in obj]
    return obj


def from_dynamo(obj: Any) -> Any:
    """Recursively convert Decimal back to int (integral values, including 2.0) or float."""
    if isinstance(obj, Decimal):
        if obj == obj.to_integral_value():
            return int(obj)
        return float(obj)
    if isinstance(obj, dict):
        return {key: from_dynamo(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [from_dynamo(value) for value in obj]
    if isinstance(obj, set):
        return {from_dynamo(value) for value in obj}
    return obj
