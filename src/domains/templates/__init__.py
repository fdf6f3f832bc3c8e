"""Templates domain - reusable document definitions.

Tools for listing, reading, cloning and archiving templates, and for
creating a template from a PDF with explicit field placements.
"""

from typing import Any

from shared.logging import get_logger
from shared.models import ExecutionType, ToolDefinition
from shared.schema import FIELD_TYPES, id_property, limit_property
from docuseal_mcp.client import DocuSealClient
from domains.base import RESTAdapter, build_query, pick, required, resource_id

logger = get_logger(__name__)

DOMAIN = "templates"

LIST_FILTERS = ("application_key", "folder", "archived", "limit")
CLONE_FIELDS = ("name", "folder_name", "application_key")

AREA_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "x": {"type": "number"},
        "y": {"type": "number"},
        "w": {"type": "number"},
        "h": {"type": "number"},
        "page": {"type": "number"}
    },
    "required": ["x", "y", "w", "h", "page"]
}

FIELD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "role": {"type": "string"},
        "type": {"type": "string", "enum": FIELD_TYPES},
        "areas": {"type": "array", "items": AREA_SCHEMA}
    },
    "required": ["name", "role", "type", "areas"]
}

DOCUMENT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "file": {"type": "string", "description": "Base64 encoded file content"},
        "fields": {"type": "array", "items": FIELD_SCHEMA}
    },
    "required": ["name", "file"]
}


class TemplatesAdapter(RESTAdapter):
    """
    Templates Domain Adapter.
    
    Maps onto the DocuSeal /templates endpoints.
    """
    
    domain = DOMAIN
    
    def _define_tools(self) -> None:
        """Define all template tools."""
        
        self._add_tool(ToolDefinition(
            name="docuseal_list_templates",
            domain=DOMAIN,
            description="List all document templates from DocuSeal",
            input_schema={
                "type": "object",
                "properties": {
                    "application_key": {
                        "type": "string",
                        "description": "Filter templates by application key"
                    },
                    "folder": {
                        "type": "string",
                        "description": "Filter templates by folder name"
                    },
                    "archived": {
                        "type": "boolean",
                        "description": "Get archived templates instead of active ones"
                    },
                    "limit": limit_property("templates")
                },
                "required": []
            },
            execution_type=ExecutionType.READ
        ), self.list_templates)
        
        self._add_tool(ToolDefinition(
            name="docuseal_get_template",
            domain=DOMAIN,
            description="Get detailed information about a specific template",
            input_schema={
                "type": "object",
                "properties": {
                    "template_id": id_property("The unique identifier of the template")
                },
                "required": ["template_id"]
            },
            execution_type=ExecutionType.READ
        ), self.get_template)
        
        self._add_tool(ToolDefinition(
            name="docuseal_clone_template",
            domain=DOMAIN,
            description="Clone an existing template into a new template",
            input_schema={
                "type": "object",
                "properties": {
                    "template_id": id_property("The unique identifier of the template to clone"),
                    "name": {
                        "type": "string",
                        "description": "Name for the new cloned template"
                    },
                    "folder_name": {
                        "type": "string",
                        "description": "Folder name for the cloned template"
                    },
                    "application_key": {
                        "type": "string",
                        "description": "Application key for the cloned template"
                    }
                },
                "required": ["template_id"]
            },
            execution_type=ExecutionType.WRITE
        ), self.clone_template)
        
        self._add_tool(ToolDefinition(
            name="docuseal_archive_template",
            domain=DOMAIN,
            description="Archive (soft delete) a template",
            input_schema={
                "type": "object",
                "properties": {
                    "template_id": id_property("The unique identifier of the template to archive")
                },
                "required": ["template_id"]
            },
            execution_type=ExecutionType.WRITE
        ), self.archive_template)
        
        self._add_tool(ToolDefinition(
            name="docuseal_create_template_from_pdf",
            domain=DOMAIN,
            description="Create a template from an existing PDF with form fields",
            input_schema={
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Name for the template"
                    },
                    "documents": {
                        "type": "array",
                        "description": "Array of documents with fields",
                        "items": DOCUMENT_SCHEMA
                    },
                    "folder_name": {
                        "type": "string",
                        "description": "Folder name for the template"
                    },
                    "application_key": {
                        "type": "string",
                        "description": "Application key for the template"
                    }
                },
                "required": ["name", "documents"]
            },
            execution_type=ExecutionType.WRITE
        ), self.create_template_from_pdf)
    
    async def list_templates(self, args: dict[str, Any]) -> Any:
        return await self.client.get("/templates", params=build_query(args, LIST_FILTERS))
    
    async def get_template(self, args: dict[str, Any]) -> Any:
        return await self.client.get(f"/templates/{resource_id(args, 'template_id')}")
    
    async def clone_template(self, args: dict[str, Any]) -> Any:
        template_id = resource_id(args, "template_id")
        return await self.client.post(
            f"/templates/{template_id}/clone",
            pick(args, CLONE_FIELDS)
        )
    
    async def archive_template(self, args: dict[str, Any]) -> Any:
        return await self.client.delete(f"/templates/{resource_id(args, 'template_id')}")
    
    async def create_template_from_pdf(self, args: dict[str, Any]) -> Any:
        """Upload base64 PDFs; field areas are passed through untouched."""
        payload = {
            "name": required(args, "name"),
            "documents": required(args, "documents"),
            **pick(args, ("folder_name", "application_key")),
        }
        return await self.client.post("/templates/pdf", payload)


def register_templates_domain(router, client: DocuSealClient) -> None:
    """Register the templates domain with the router."""
    adapter = TemplatesAdapter(client)
    
    router.registry.register_many(adapter.tools)
    router.register_adapter(DOMAIN, adapter.execute)
    
    logger.debug("Templates domain registered", tool_count=len(adapter.tools))
