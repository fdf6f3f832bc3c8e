"""Submitters domain - the people who fill in and sign documents."""

from typing import Any

from shared.logging import get_logger
from shared.models import ExecutionType, ToolDefinition
from shared.schema import MESSAGE_SCHEMA, id_property, limit_property
from docuseal_mcp.client import DocuSealClient
from domains.base import RESTAdapter, build_query, pick, resource_id

logger = get_logger(__name__)

DOMAIN = "submitters"

LIST_FILTERS = ("submission_id", "application_key", "limit")
UPDATE_FIELDS = ("name", "email", "phone", "values", "send_email", "message")


class SubmittersAdapter(RESTAdapter):
    """
    Submitters Domain Adapter.
    
    Maps onto the DocuSeal /submitters endpoints.
    """
    
    domain = DOMAIN
    
    def _define_tools(self) -> None:
        """Define all submitter tools."""
        
        self._add_tool(ToolDefinition(
            name="docuseal_list_submitters",
            domain=DOMAIN,
            description="List all submitters with optional filtering",
            input_schema={
                "type": "object",
                "properties": {
                    "submission_id": id_property("Filter by submission ID"),
                    "application_key": {
                        "type": "string",
                        "description": "Filter by application key"
                    },
                    "limit": limit_property("submitters")
                },
                "required": []
            },
            execution_type=ExecutionType.READ
        ), self.list_submitters)
        
        self._add_tool(ToolDefinition(
            name="docuseal_get_submitter",
            domain=DOMAIN,
            description="Get detailed information about a specific submitter",
            input_schema={
                "type": "object",
                "properties": {
                    "submitter_id": id_property("The unique identifier of the submitter")
                },
                "required": ["submitter_id"]
            },
            execution_type=ExecutionType.READ
        ), self.get_submitter)
        
        self._add_tool(ToolDefinition(
            name="docuseal_update_submitter",
            domain=DOMAIN,
            description="Update submitter details, field values, and re-send emails",
            input_schema={
                "type": "object",
                "properties": {
                    "submitter_id": id_property("The unique identifier of the submitter"),
                    "name": {
                        "type": "string",
                        "description": "Submitter name"
                    },
                    "email": {
                        "type": "string",
                        "format": "email",
                        "description": "Submitter email"
                    },
                    "phone": {
                        "type": "string",
                        "description": "Submitter phone"
                    },
                    "values": {
                        "type": "object",
                        "description": "Field values to update"
                    },
                    "send_email": {
                        "type": "boolean",
                        "description": "Whether to re-send email notification"
                    },
                    "message": MESSAGE_SCHEMA
                },
                "required": ["submitter_id"]
            },
            execution_type=ExecutionType.WRITE
        ), self.update_submitter)
    
    async def list_submitters(self, args: dict[str, Any]) -> Any:
        return await self.client.get("/submitters", params=build_query(args, LIST_FILTERS))
    
    async def get_submitter(self, args: dict[str, Any]) -> Any:
        return await self.client.get(f"/submitters/{resource_id(args, 'submitter_id')}")
    
    async def update_submitter(self, args: dict[str, Any]) -> Any:
        # Presence decides inclusion so send_email=false is still sent
        return await self.client.put(
            f"/submitters/{resource_id(args, 'submitter_id')}",
            pick(args, UPDATE_FIELDS)
        )


def register_submitters_domain(router, client: DocuSealClient) -> None:
    """Register the submitters domain with the router."""
    adapter = SubmittersAdapter(client)
    
    router.registry.register_many(adapter.tools)
    router.register_adapter(DOMAIN, adapter.execute)
    
    logger.debug("Submitters domain registered", tool_count=len(adapter.tools))
