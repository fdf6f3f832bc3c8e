"""Submissions domain - templates sent out for signing.

A submission is one instance of a template with one or more submitters.
"""

from typing import Any

from shared.logging import get_logger
from shared.models import ExecutionType, ToolDefinition
from shared.schema import MESSAGE_SCHEMA, SUBMITTER_ORDERS, id_property, limit_property
from docuseal_mcp.client import DocuSealClient
from domains.base import RESTAdapter, build_query, required, resource_id

logger = get_logger(__name__)

DOMAIN = "submissions"

LIST_FILTERS = ("template_id", "application_key", "template_folder", "limit")

SUBMITTER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "email": {"type": "string", "format": "email"},
        "name": {"type": "string"},
        "role": {"type": "string"},
        "phone": {"type": "string"},
        "send_email": {"type": "boolean", "default": True},
        "send_sms": {"type": "boolean", "default": False},
        "values": {
            "type": "object",
            "description": "Pre-filled field values"
        }
    },
    "required": ["email", "role"]
}


def _default(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


def build_submission_payload(args: dict[str, Any]) -> dict[str, Any]:
    """
    Shape create-submission arguments into the DocuSeal request body.
    
    The flat submitter list is nested as ``submission[0].submitters``.
    ``send_email`` defaults to true and ``order`` to "preserved".
    """
    payload: dict[str, Any] = {
        "template_id": resource_id(args, "template_id"),
        "submission": [{"submitters": required(args, "submitters")}],
        "send_email": _default(args.get("send_email"), True),
        "order": _default(args.get("order"), "preserved"),
    }
    if args.get("message") is not None:
        payload["message"] = args["message"]
    return payload


class SubmissionsAdapter(RESTAdapter):
    """
    Submissions Domain Adapter.
    
    Maps onto the DocuSeal /submissions endpoints.
    """
    
    domain = DOMAIN
    
    def _define_tools(self) -> None:
        """Define all submission tools."""
        
        self._add_tool(ToolDefinition(
            name="docuseal_list_submissions",
            domain=DOMAIN,
            description="List all submissions with optional filtering",
            input_schema={
                "type": "object",
                "properties": {
                    "template_id": id_property("Filter by template ID"),
                    "application_key": {
                        "type": "string",
                        "description": "Filter by application key"
                    },
                    "template_folder": {
                        "type": "string",
                        "description": "Filter by template folder name"
                    },
                    "limit": limit_property("submissions")
                },
                "required": []
            },
            execution_type=ExecutionType.READ
        ), self.list_submissions)
        
        self._add_tool(ToolDefinition(
            name="docuseal_get_submission",
            domain=DOMAIN,
            description="Get detailed information about a specific submission",
            input_schema={
                "type": "object",
                "properties": {
                    "submission_id": id_property("The unique identifier of the submission")
                },
                "required": ["submission_id"]
            },
            execution_type=ExecutionType.READ
        ), self.get_submission)
        
        self._add_tool(ToolDefinition(
            name="docuseal_create_submission",
            domain=DOMAIN,
            description="Create a new submission for document signing",
            input_schema={
                "type": "object",
                "properties": {
                    "template_id": id_property("Template ID to create submission from"),
                    "submitters": {
                        "type": "array",
                        "description": "Array of submitters for the document",
                        "items": SUBMITTER_SCHEMA
                    },
                    "send_email": {
                        "type": "boolean",
                        "description": "Whether to send email notifications",
                        "default": True
                    },
                    "order": {
                        "type": "string",
                        "enum": SUBMITTER_ORDERS,
                        "description": "Order of submitters signing",
                        "default": "preserved"
                    },
                    "message": MESSAGE_SCHEMA
                },
                "required": ["template_id", "submitters"]
            },
            execution_type=ExecutionType.WRITE
        ), self.create_submission)
        
        self._add_tool(ToolDefinition(
            name="docuseal_archive_submission",
            domain=DOMAIN,
            description="Archive (soft delete) a submission",
            input_schema={
                "type": "object",
                "properties": {
                    "submission_id": id_property("The unique identifier of the submission to archive")
                },
                "required": ["submission_id"]
            },
            execution_type=ExecutionType.WRITE
        ), self.archive_submission)
    
    async def list_submissions(self, args: dict[str, Any]) -> Any:
        return await self.client.get("/submissions", params=build_query(args, LIST_FILTERS))
    
    async def get_submission(self, args: dict[str, Any]) -> Any:
        return await self.client.get(f"/submissions/{resource_id(args, 'submission_id')}")
    
    async def create_submission(self, args: dict[str, Any]) -> Any:
        return await self.client.post("/submissions", build_submission_payload(args))
    
    async def archive_submission(self, args: dict[str, Any]) -> Any:
        return await self.client.delete(f"/submissions/{resource_id(args, 'submission_id')}")


def register_submissions_domain(router, client: DocuSealClient) -> None:
    """Register the submissions domain with the router."""
    adapter = SubmissionsAdapter(client)
    
    router.registry.register_many(adapter.tools)
    router.register_adapter(DOMAIN, adapter.execute)
    
    logger.debug("Submissions domain registered", tool_count=len(adapter.tools))
