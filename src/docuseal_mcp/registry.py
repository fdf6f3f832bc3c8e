"""Tool Registry for the DocuSeal MCP server.

Holds the static catalog of tool definitions advertised on discovery.
Tools are registered once at startup, in the order they are listed.
"""

from typing import Any, Optional

from shared.logging import get_logger
from shared.models import ToolDefinition
from shared.schema import validate_schema

logger = get_logger(__name__)


class ToolRegistry:
    """
    Central registry for all DocuSeal tools.
    
    Responsibilities:
    - Register tools from domains
    - List tools in registration order
    - Lookup tools by name
    - Validate arguments against a tool's input schema
    """
    
    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}
    
    def __contains__(self, tool_name: str) -> bool:
        return tool_name in self._tools
    
    def __len__(self) -> int:
        return len(self._tools)
    
    def register(self, tool: ToolDefinition) -> None:
        """
        Register a tool in the registry.
        
        Args:
            tool: Tool definition to register
        
        Raises:
            ValueError: If tool name is already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        
        self._tools[tool.name] = tool
        
        logger.debug(
            "Tool registered",
            tool=tool.name,
            domain=tool.domain,
            execution_type=tool.execution_type.value
        )
    
    def register_many(self, tools: list[ToolDefinition]) -> None:
        """Register multiple tools at once."""
        for tool in tools:
            self.register(tool)
    
    def get(self, tool_name: str) -> Optional[ToolDefinition]:
        """Get a tool by name, None if it is not registered."""
        return self._tools.get(tool_name)
    
    def list_tools(self, domain: Optional[str] = None) -> list[ToolDefinition]:
        """
        List registered tools, optionally filtered by domain.
        
        Args:
            domain: Filter by domain name
        
        Returns:
            Tool definitions in registration order
        """
        tools = list(self._tools.values())
        
        if domain:
            tools = [t for t in tools if t.domain == domain]
        
        return tools
    
    def list_domains(self) -> list[str]:
        """List registered domains in the order they were first seen."""
        return list(dict.fromkeys(t.domain for t in self._tools.values()))
    
    def validate_input(
        self,
        tool_name: str,
        arguments: dict[str, Any]
    ) -> tuple[bool, list[str]]:
        """
        Validate arguments against a tool's input schema.
        
        Args:
            tool_name: Tool name
            arguments: Arguments to validate
        
        Returns:
            Tuple of (is_valid, list of error messages)
        """
        tool = self.get(tool_name)
        if not tool:
            return False, [f"Tool '{tool_name}' not found"]
        
        return validate_schema(arguments, tool.input_schema)
    
    def get_tool_count(self) -> dict[str, int]:
        """Get count of tools per domain."""
        counts: dict[str, int] = {}
        for tool in self._tools.values():
            counts[tool.domain] = counts.get(tool.domain, 0) + 1
        return counts
