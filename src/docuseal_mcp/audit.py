"""Audit logging for the DocuSeal MCP server.

Emits one structured log event per tool execution. Entries are not written
to disk; ship stderr to a log collector if they must be retained.
"""

import uuid
from typing import Any, Optional

from shared.logging import get_logger
from shared.models import AuditEntry, ToolCall, ToolDefinition, ToolResult

logger = get_logger(__name__)


class AuditLogger:
    """
    Audit logger for tool executions.
    
    Each execution is logged with:
    - Tool name and domain
    - Arguments (with sensitive data redacted)
    - Result status and error
    - Execution time
    """
    
    # Arguments that should be redacted in audit logs
    SENSITIVE_PARAMS = {"password", "token", "secret", "api_key", "apikey", "credential"}
    
    # Base64 document payloads, logged by size only
    PAYLOAD_PARAMS = {"file"}
    
    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
    
    def _redact_sensitive(self, value: Any) -> Any:
        """Redact sensitive arguments, recursing into nested objects and lists."""
        if isinstance(value, list):
            return [self._redact_sensitive(item) for item in value]
        if not isinstance(value, dict):
            return value
        
        redacted = {}
        for key, item in value.items():
            if key.lower() in self.SENSITIVE_PARAMS:
                redacted[key] = "[REDACTED]"
            elif key.lower() in self.PAYLOAD_PARAMS and isinstance(item, str):
                redacted[key] = f"[{len(item)} chars]"
            else:
                redacted[key] = self._redact_sensitive(item)
        return redacted
    
    def create_entry(
        self,
        tool: Optional[ToolDefinition],
        call: ToolCall,
        result: ToolResult
    ) -> AuditEntry:
        """
        Create an audit entry from tool execution data.
        
        Args:
            tool: Tool definition, None when the tool is unknown
            call: Tool call request
            result: Tool execution result
        
        Returns:
            Audit entry
        """
        return AuditEntry(
            id=str(uuid.uuid4()),
            tool_name=call.tool_name,
            domain=tool.domain if tool else None,
            execution_type=tool.execution_type if tool else None,
            arguments=self._redact_sensitive(call.arguments),
            status=result.status,
            error=result.error,
            execution_time_ms=result.execution_time_ms,
            request_id=call.request_id,
        )
    
    async def log(
        self,
        tool: Optional[ToolDefinition],
        call: ToolCall,
        result: ToolResult
    ) -> None:
        """Log a tool execution."""
        if not self.enabled:
            return
        
        entry = self.create_entry(tool, call, result)
        
        logger.info(
            "Tool executed",
            audit_id=entry.id,
            tool=entry.tool_name,
            domain=entry.domain,
            execution_type=entry.execution_type.value if entry.execution_type else None,
            arguments=entry.arguments,
            status=entry.status.value,
            error=entry.error,
            execution_time_ms=round(entry.execution_time_ms, 2)
        )
