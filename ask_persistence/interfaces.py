"""Persistence adapter interface"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from .context import RequestContext


class PersistenceAdapter(ABC):
    """Interface for per-request attribute storage"""

    @abstractmethod
    async def read(self, context: RequestContext) -> Dict[str, Any]:
        """Get the attributes stored for the request's partition key"""
        pass

    @abstractmethod
    async def write(self, context: RequestContext, attributes: Dict[str, Any]) -> None:
        """Replace the attributes stored for the request's partition key"""
        pass

    @abstractmethod
    async def delete(self, context: RequestContext) -> None:
        """Delete the attributes stored for the request's partition key"""
        pass

    # ASK SDK naming

    async def get_attributes(self, context: RequestContext) -> Dict[str, Any]:
        return await self.read(context)

    async def save_attributes(self, context: RequestContext, attributes: Dict[str, Any]) -> None:
        await self.write(context, attributes)

    async def delete_attributes(self, context: RequestContext) -> None:
        await self.delete(context)
