"""DocuSeal MCP Server - stdio transport.

Advertises the tool registry on ``tools/list`` and answers ``tools/call``
through the ToolRouter. Every call yields a CallToolResult; failures carry
``isError`` and the error text instead of becoming protocol errors.
"""

import asyncio
import json
import sys
from typing import Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from shared.config import Settings, get_settings
from shared.logging import get_logger, setup_logging
from shared.models import ToolCall, ToolResult
from docuseal_mcp import __version__
from docuseal_mcp.audit import AuditLogger
from docuseal_mcp.client import DocuSealClient
from docuseal_mcp.registry import ToolRegistry
from docuseal_mcp.router import ToolRouter
from domains import load_all_domains

logger = get_logger(__name__)


def build_router(
    settings: Settings,
    client: Optional[DocuSealClient] = None
) -> ToolRouter:
    """
    Create a router with every DocuSeal domain loaded.
    
    Args:
        settings: Server settings
        client: API client, defaults to one reading DOCUSEAL_* from the environment per call
    """
    router = ToolRouter(
        registry=ToolRegistry(),
        audit_logger=AuditLogger(enabled=settings.enable_audit),
        validate_input=settings.validate_input
    )
    load_all_domains(router, client or DocuSealClient())
    return router


def render_result(result: ToolResult) -> types.CallToolResult:
    """Convert a ToolResult into the MCP content envelope."""
    if result.is_error:
        text = f"Error: {result.error}"
    else:
        text = json.dumps(result.data, indent=2, ensure_ascii=False)
    
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=result.is_error
    )


def create_server(router: ToolRouter, name: str = "docuseal-mcp") -> Server:
    """Create the MCP server exposing the router's tools."""
    server = Server(name, version=__version__)
    
    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.input_schema
            )
            for tool in router.registry.list_tools()
        ]
    
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        call = ToolCall(
            tool_name=req.params.name,
            arguments=req.params.arguments or {}
        )
        result = await router.execute(call)
        return types.ServerResult(render_result(result))
    
    # Registered directly so the router's result is returned as-is
    server.request_handlers[types.CallToolRequest] = call_tool
    
    return server


async def serve(settings: Settings) -> None:
    """Run the server over stdio until the client closes the stream."""
    router = build_router(settings)
    server = create_server(router, name=settings.server_name)
    
    logger.info(
        "DocuSeal MCP server running on stdio",
        version=__version__,
        tool_count=len(router.registry)
    )
    
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main() -> None:
    """Console entry point."""
    settings = get_settings()
    setup_logging(settings.log_level, json_output=settings.json_logs)
    
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.error("DocuSeal MCP server failed", error=str(e), exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
