"""DocuSeal MCP Server - tool registry, routing and the DocuSeal API client.

Exposes DocuSeal templates, submissions and submitters as MCP tools over
stdio. Each tool call becomes exactly one DocuSeal REST request.
"""

__version__ = "1.0.0"

from docuseal_mcp.audit import AuditLogger
from docuseal_mcp.client import (
    DocuSealAPIError,
    DocuSealClient,
    DocuSealConfigError,
    DocuSealConnectionError,
    DocuSealError,
)
from docuseal_mcp.registry import ToolRegistry
from docuseal_mcp.router import ToolRouter

__all__ = [
    "__version__",
    "AuditLogger",
    "DocuSealAPIError",
    "DocuSealClient",
    "DocuSealConfigError",
    "DocuSealConnectionError",
    "DocuSealError",
    "ToolRegistry",
    "ToolRouter",
]
