"""Base classes for DocuSeal resource adapters.

All adapters must:
- Translate tool calls into exactly one DocuSeal API request
- Send it through the shared DocuSealClient
- Hold no state between calls
- Never call into another domain
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Iterable

from shared.logging import get_logger
from shared.models import ToolDefinition
from docuseal_mcp.client import DocuSealClient

logger = get_logger(__name__)

ToolHandler = Callable[[dict[str, Any]], Awaitable[Any]]


def resource_id(arguments: dict[str, Any], key: str) -> int:
    """
    Read a DocuSeal id from the arguments.
    
    Ids arrive as JSON numbers, so an integral float such as 3.0 is
    accepted. Anything that is not a positive whole number is rejected
    before a request is built.
    
    Raises:
        ValueError: If the id is missing or not a positive integer
    """
    value = arguments.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a positive integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{key} must be a positive integer, got {value!r}")
        value = int(value)
    if value < 1:
        raise ValueError(f"{key} must be a positive integer, got {value!r}")
    return value


def required(arguments: dict[str, Any], key: str) -> Any:
    """Read an argument the request cannot be built without."""
    value = arguments.get(key)
    if value is None:
        raise ValueError(f"{key} is required")
    return value


def query_value(value: Any) -> str:
    """Render a scalar the way DocuSeal expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(arguments: dict[str, Any], fields: Iterable[str]) -> dict[str, str]:
    """Query parameters for the fields present in the arguments."""
    return {
        field: query_value(arguments[field])
        for field in fields
        if arguments.get(field) is not None
    }


def pick(arguments: dict[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """Copy the fields present in the arguments, keeping explicit false values."""
    return {
        field: arguments[field]
        for field in fields
        if arguments.get(field) is not None
    }


class BaseAdapter(ABC):
    """
    Base class for domain adapters.
    
    Each adapter:
    - Handles one DocuSeal resource
    - Pairs every tool definition with a handler coroutine
    - Is stateless
    """
    
    domain: str = ""
    
    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        self._handlers: dict[str, ToolHandler] = {}
        self._define_tools()
    
    @abstractmethod
    def _define_tools(self) -> None:
        """Register every tool of this domain via ``_add_tool``."""
        pass
    
    @property
    def tools(self) -> list[ToolDefinition]:
        """Return all tool definitions for this domain."""
        return list(self._tools.values())
    
    def _add_tool(self, tool: ToolDefinition, handler: ToolHandler) -> None:
        if tool.domain != self.domain:
            raise ValueError(f"Tool '{tool.name}' does not belong to domain '{self.domain}'")
        self._tools[tool.name] = tool
        self._handlers[tool.name] = handler
    
    async def execute(self, action: str, arguments: dict[str, Any]) -> Any:
        """
        Execute a tool action.
        
        Args:
            action: Tool name
            arguments: Tool arguments
        
        Returns:
            Parsed DocuSeal response
        
        Raises:
            KeyError: If the action is not defined in this domain
        """
        handler = self._handlers.get(action)
        if handler is None:
            raise KeyError(f"Action '{action}' not found in domain '{self.domain}'")
        
        logger.debug("Executing action", domain=self.domain, action=action)
        return await handler(arguments)


class RESTAdapter(BaseAdapter):
    """
    Base adapter for DocuSeal REST resources.
    
    Provides the shared API client to subclasses.
    """
    
    def __init__(self, client: DocuSealClient) -> None:
        self.client = client
        super().__init__()
