"""Tool Router for the DocuSeal MCP server.

Routes tool calls to domain adapters and normalizes every outcome into a
ToolResult. Nothing raised while looking up, validating or executing a tool
escapes ``execute``.
"""

import time
from typing import Any, Awaitable, Callable, Optional

from shared.logging import bind_context, clear_context, get_logger
from shared.models import ToolCall, ToolDefinition, ToolResult, ToolResultStatus
from docuseal_mcp.audit import AuditLogger
from docuseal_mcp.client import DocuSealAPIError, DocuSealError
from docuseal_mcp.registry import ToolRegistry

logger = get_logger(__name__)


# Adapters take (action, arguments) and return the parsed API response
AdapterExecutor = Callable[[str, dict[str, Any]], Awaitable[Any]]


class ToolRouter:
    """
    Routes tool calls to the adapter owning the tool's domain.
    
    Responsibilities:
    - Reject unknown tools
    - Validate arguments against the advertised schema
    - Route to the domain adapter
    - Convert any failure into an error result
    - Audit all executions
    """
    
    def __init__(
        self,
        registry: Optional[ToolRegistry] = None,
        audit_logger: Optional[AuditLogger] = None,
        validate_input: bool = True
    ) -> None:
        self.registry = registry or ToolRegistry()
        self.audit_logger = audit_logger or AuditLogger(enabled=False)
        self.validate_input = validate_input
        self._adapters: dict[str, AdapterExecutor] = {}
    
    def register_adapter(self, domain: str, executor: AdapterExecutor) -> None:
        """
        Register a domain adapter.
        
        Args:
            domain: Domain name
            executor: Coroutine function that executes tools for this domain
        """
        self._adapters[domain] = executor
        logger.debug("Adapter registered", domain=domain)
    
    async def execute(self, call: ToolCall) -> ToolResult:
        """
        Execute a tool call.
        
        This is the main entry point for tool execution. Always returns a
        result; failures are reported through its status and error fields.
        
        Args:
            call: Tool call request
        
        Returns:
            Tool execution result
        """
        start_time = time.perf_counter()
        tool_name = call.tool_name
        bind_context(request_id=call.request_id, tool=tool_name)
        
        try:
            tool = self.registry.get(tool_name)
            if not tool:
                logger.warning("Unknown tool requested")
                result = ToolResult(
                    tool_name=tool_name,
                    status=ToolResultStatus.NOT_FOUND,
                    error=f"Unknown tool: {tool_name}",
                    error_code="TOOL_NOT_FOUND"
                )
            else:
                result = await self._execute_tool(tool, call.arguments)
            
            result.execution_time_ms = (time.perf_counter() - start_time) * 1000
            await self.audit_logger.log(tool, call, result)
            return result
        finally:
            clear_context()
    
    async def _execute_tool(self, tool: ToolDefinition, arguments: dict[str, Any]) -> ToolResult:
        if self.validate_input:
            is_valid, errors = self.registry.validate_input(tool.name, arguments)
            if not is_valid:
                return ToolResult(
                    tool_name=tool.name,
                    status=ToolResultStatus.VALIDATION_ERROR,
                    error=f"Invalid arguments: {'; '.join(errors)}",
                    error_code="VALIDATION_ERROR"
                )
        
        adapter = self._adapters.get(tool.domain)
        if not adapter:
            return ToolResult(
                tool_name=tool.name,
                status=ToolResultStatus.ERROR,
                error=f"No adapter registered for domain '{tool.domain}'",
                error_code="NO_ADAPTER"
            )
        
        try:
            data = await adapter(tool.name, arguments)
        except DocuSealAPIError as e:
            logger.warning("DocuSeal rejected request", status_code=e.status_code)
            return self._error(tool, e, "API_ERROR")
        except DocuSealError as e:
            logger.warning("Tool execution failed", error=str(e))
            return self._error(tool, e, "CLIENT_ERROR")
        except ValueError as e:
            logger.warning("Invalid tool arguments", error=str(e))
            return self._error(tool, e, "INVALID_ARGUMENT")
        except Exception as e:
            logger.error("Tool execution failed", error=str(e), exc_info=True)
            return self._error(tool, e, "EXECUTION_ERROR")
        
        return ToolResult(
            tool_name=tool.name,
            status=ToolResultStatus.SUCCESS,
            data=data
        )
    
    @staticmethod
    def _error(tool: ToolDefinition, error: Exception, code: str) -> ToolResult:
        return ToolResult(
            tool_name=tool.name,
            status=ToolResultStatus.ERROR,
            error=str(error) or type(error).__name__,
            error_code=code
        )
