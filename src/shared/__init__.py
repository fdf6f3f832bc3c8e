"""Shared utilities and base classes for the DocuSeal MCP server."""

from shared.models import (
    ToolDefinition,
    ToolCall,
    ToolResult,
    ToolResultStatus,
    ExecutionType,
    AuditEntry,
)
from shared.config import DocuSealSettings, Settings, get_settings
from shared.logging import get_logger, setup_logging

__all__ = [
    "ToolDefinition",
    "ToolCall",
    "ToolResult",
    "ToolResultStatus",
    "ExecutionType",
    "AuditEntry",
    "DocuSealSettings",
    "Settings",
    "get_settings",
    "get_logger",
    "setup_logging",
]
