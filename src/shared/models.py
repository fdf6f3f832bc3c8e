"""Core data models for the DocuSeal MCP server.

Tool definitions are the advertised catalog; calls and results are the
transient request/response shapes of a single invocation.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExecutionType(str, Enum):
    """Type of tool execution - read operations vs write operations."""
    READ = "read"
    WRITE = "write"


class ToolDefinition(BaseModel):
    """
    Complete definition of an MCP tool.
    
    Tools are declarative and discoverable. The name is what the calling
    runtime invokes (e.g. docuseal_get_template); the domain groups tools
    by DocuSeal resource.
    """
    name: str = Field(..., description="Tool name as advertised to the client")
    domain: str = Field(..., description="Resource domain (templates, submissions, submitters)")
    description: str = Field(..., description="Clear description for LLM usage")
    
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}, "required": []},
        description="JSON Schema for input validation"
    )
    
    execution_type: ExecutionType = Field(default=ExecutionType.READ)
    
    model_config = {"frozen": True}


class ToolCall(BaseModel):
    """A request to execute a specific tool."""
    tool_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))


class ToolResultStatus(str, Enum):
    """Status of tool execution."""
    SUCCESS = "success"
    ERROR = "error"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"


class ToolResult(BaseModel):
    """
    Result of a tool execution.
    
    Every invocation yields one of these, successful or not. On success
    ``data`` holds the parsed DocuSeal response; otherwise ``error`` holds
    a human-readable message.
    """
    tool_name: str
    status: ToolResultStatus
    data: Optional[Any] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    execution_time_ms: float = 0
    
    @property
    def is_error(self) -> bool:
        return self.status != ToolResultStatus.SUCCESS


class AuditEntry(BaseModel):
    """Audit record for one tool execution. Logged, never stored."""
    id: str
    timestamp: datetime = Field(default_factory=_utcnow)
    
    tool_name: str
    domain: Optional[str] = None
    execution_type: Optional[ExecutionType] = None
    
    arguments: dict[str, Any] = Field(default_factory=dict)
    
    status: ToolResultStatus
    error: Optional[str] = None
    execution_time_ms: float = 0
    
    request_id: str
