"""Tests for the DocuSeal resource domains."""

import pytest

from shared.models import ToolCall, ToolResultStatus
from domains.base import build_query, pick, resource_id
from domains.submissions import build_submission_payload

SIGNER = {"email": "a@x.com", "role": "Signer"}

TOOL_REQUESTS = [
    ("docuseal_list_templates", {}, "GET", "/templates"),
    ("docuseal_get_template", {"template_id": 1}, "GET", "/templates/1"),
    ("docuseal_clone_template", {"template_id": 1, "name": "Copy"}, "POST", "/templates/1/clone"),
    ("docuseal_archive_template", {"template_id": 1}, "DELETE", "/templates/1"),
    (
        "docuseal_create_template_from_pdf",
        {"name": "NDA", "documents": [{"name": "nda.pdf", "file": "JVBERi0xLjQ="}]},
        "POST",
        "/templates/pdf",
    ),
    ("docuseal_list_submissions", {}, "GET", "/submissions"),
    ("docuseal_get_submission", {"submission_id": 7}, "GET", "/submissions/7"),
    ("docuseal_create_submission", {"template_id": 1, "submitters": [SIGNER]}, "POST", "/submissions"),
    ("docuseal_archive_submission", {"submission_id": 7}, "DELETE", "/submissions/7"),
    ("docuseal_list_submitters", {}, "GET", "/submitters"),
    ("docuseal_get_submitter", {"submitter_id": 3}, "GET", "/submitters/3"),
    ("docuseal_update_submitter", {"submitter_id": 3, "name": "Ann"}, "PUT", "/submitters/3"),
]


async def call(router, tool_name, **arguments):
    return await router.execute(ToolCall(tool_name=tool_name, arguments=arguments))


class TestToolRequests:
    """Every tool sends exactly one request and relays the response."""
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name,arguments,method,path", TOOL_REQUESTS)
    async def test_tool_request(self, api, router, tool_name, arguments, method, path):
        """Test each tool sends one request with the right method and path."""
        api.respond(200, {"id": 42, "tool": tool_name})
        
        result = await call(router, tool_name, **arguments)
        
        assert result.status == ToolResultStatus.SUCCESS
        assert result.data == {"id": 42, "tool": tool_name}
        assert len(api.requests) == 1
        assert api.last.method == method
        assert api.last.url.path == path
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name,arguments,method,path", TOOL_REQUESTS)
    async def test_remote_error_is_relayed(self, api, router, tool_name, arguments, method, path):
        """Test a 422 from DocuSeal is relayed with status and body."""
        api.respond(422, text='{"error":"invalid"}')
        
        result = await call(router, tool_name, **arguments)
        
        assert result.status == ToolResultStatus.ERROR
        assert "422" in result.error
        assert "invalid" in result.error
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name,arguments,method,path", TOOL_REQUESTS)
    async def test_missing_api_key(self, api, keyless_router, tool_name, arguments, method, path):
        """Test every tool fails without an API key and sends nothing."""
        result = await call(keyless_router, tool_name, **arguments)
        
        assert result.status == ToolResultStatus.ERROR
        assert "API key is required" in result.error
        assert api.requests == []


class TestListFilters:
    """Query string shaping for list tools."""
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name", [
        "docuseal_list_templates",
        "docuseal_list_submissions",
        "docuseal_list_submitters",
    ])
    async def test_no_filters_sends_empty_query(self, api, router, tool_name):
        """Test list tools send an empty query without filters."""
        await call(router, tool_name)
        
        assert api.last.url.query == b""
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name", [
        "docuseal_list_templates",
        "docuseal_list_submissions",
        "docuseal_list_submitters",
    ])
    async def test_limit_only(self, api, router, tool_name):
        """Test limit alone produces a single query parameter."""
        await call(router, tool_name, limit=5)
        
        assert dict(api.last.url.params) == {"limit": "5"}
    
    @pytest.mark.asyncio
    async def test_template_filters(self, api, router):
        """Test all template filters are rendered into the query."""
        await call(
            router,
            "docuseal_list_templates",
            application_key="crm",
            folder="Leases",
            archived=True,
            limit=20
        )
        
        assert dict(api.last.url.params) == {
            "application_key": "crm",
            "folder": "Leases",
            "archived": "true",
            "limit": "20",
        }
    
    @pytest.mark.asyncio
    async def test_archived_false_is_sent(self, api, router):
        """Test archived=false is sent rather than dropped."""
        await call(router, "docuseal_list_templates", archived=False)
        
        assert dict(api.last.url.params) == {"archived": "false"}
    
    @pytest.mark.asyncio
    async def test_submission_filters(self, api, router):
        """Test submission filters are rendered into the query."""
        await call(router, "docuseal_list_submissions", template_id=12, template_folder="HR")
        
        assert dict(api.last.url.params) == {"template_id": "12", "template_folder": "HR"}
    
    @pytest.mark.asyncio
    async def test_submitter_filters(self, api, router):
        """Test submitter filters are rendered into the query."""
        await call(router, "docuseal_list_submitters", submission_id=9, application_key="crm")
        
        assert dict(api.last.url.params) == {"submission_id": "9", "application_key": "crm"}


class TestTemplates:
    """Body shaping for template writes."""
    
    @pytest.mark.asyncio
    async def test_clone_sends_only_given_fields(self, api, router):
        """Test cloning sends only the fields that were given."""
        await call(router, "docuseal_clone_template", template_id=4, folder_name="Archive")
        
        assert api.last_json() == {"folder_name": "Archive"}
    
    @pytest.mark.asyncio
    async def test_create_from_pdf_passes_documents_through(self, api, router):
        """Test PDF documents and field areas are passed through."""
        documents = [{
            "name": "lease.pdf",
            "file": "JVBERi0xLjQ=",
            "fields": [{
                "name": "Tenant Signature",
                "role": "Tenant",
                "type": "signature",
                "areas": [{"x": 0.1, "y": 0.8, "w": 0.3, "h": 0.05, "page": 1}]
            }]
        }]
        
        await call(
            router,
            "docuseal_create_template_from_pdf",
            name="Lease",
            documents=documents,
            application_key="crm"
        )
        
        assert api.last_json() == {
            "name": "Lease",
            "documents": documents,
            "application_key": "crm",
        }
    
    @pytest.mark.asyncio
    async def test_unknown_field_type_is_rejected(self, api, router):
        """Test an unknown field type fails schema validation."""
        documents = [{
            "name": "lease.pdf",
            "file": "JVBERi0xLjQ=",
            "fields": [{"name": "X", "role": "Tenant", "type": "stamp", "areas": []}]
        }]
        
        result = await call(router, "docuseal_create_template_from_pdf", name="Lease", documents=documents)
        
        assert result.status == ToolResultStatus.VALIDATION_ERROR
        assert "stamp" in result.error
        assert api.requests == []


class TestSubmissions:
    """Body shaping for submission creation."""
    
    @pytest.mark.asyncio
    async def test_submitters_are_wrapped_with_defaults(self, api, router):
        """Test submitters are nested and defaults applied."""
        await call(router, "docuseal_create_submission", template_id=1, submitters=[SIGNER])
        
        body = api.last_json()
        assert body == {
            "template_id": 1,
            "submission": [{"submitters": [SIGNER]}],
            "send_email": True,
            "order": "preserved",
        }
    
    @pytest.mark.asyncio
    async def test_explicit_options_and_message(self, api, router):
        """Test explicit send_email, order and message are kept."""
        message = {"subject": "Please sign", "body": "Thanks"}
        
        await call(
            router,
            "docuseal_create_submission",
            template_id=1,
            submitters=[SIGNER],
            send_email=False,
            order="random",
            message=message
        )
        
        body = api.last_json()
        assert body["send_email"] is False
        assert body["order"] == "random"
        assert body["message"] == message
    
    def test_payload_omits_message_when_absent(self):
        """Test no message key is sent when none is given."""
        payload = build_submission_payload({"template_id": 2.0, "submitters": [SIGNER]})
        
        assert "message" not in payload
        assert payload["template_id"] == 2
    
    @pytest.mark.asyncio
    async def test_invalid_order_is_rejected(self, api, router):
        """Test an order outside the enum is rejected."""
        result = await call(
            router,
            "docuseal_create_submission",
            template_id=1,
            submitters=[SIGNER],
            order="parallel"
        )
        
        assert result.status == ToolResultStatus.VALIDATION_ERROR
        assert api.requests == []


class TestSubmitters:
    """Body shaping for submitter updates."""
    
    @pytest.mark.asyncio
    async def test_send_email_false_is_included(self, api, router):
        """Test send_email=false is included in the update body."""
        await call(router, "docuseal_update_submitter", submitter_id=3, send_email=False)
        
        assert api.last_json() == {"send_email": False}
    
    @pytest.mark.asyncio
    async def test_send_email_absent_is_excluded(self, api, router):
        """Test send_email is left out when not given."""
        await call(router, "docuseal_update_submitter", submitter_id=3, email="b@x.com")
        
        body = api.last_json()
        assert body == {"email": "b@x.com"}
        assert "send_email" not in body
    
    @pytest.mark.asyncio
    async def test_values_and_message(self, api, router):
        """Test field values and message are sent on update."""
        await call(
            router,
            "docuseal_update_submitter",
            submitter_id=3,
            values={"Full Name": "Ann Lee"},
            message={"subject": "Reminder"}
        )
        
        assert api.last_json() == {
            "values": {"Full Name": "Ann Lee"},
            "message": {"subject": "Reminder"},
        }


class TestResourceIds:
    """Eager validation of ids used in request paths."""
    
    @pytest.mark.parametrize("value", [0, -1, 1.5, True, "7", None])
    def test_rejects_non_positive_integers(self, value):
        """Test non-positive or non-integer ids are rejected."""
        with pytest.raises(ValueError, match="template_id must be a positive integer"):
            resource_id({"template_id": value}, "template_id")
    
    def test_integral_float_is_accepted(self):
        """Test an integral float id is accepted."""
        assert resource_id({"template_id": 3.0}, "template_id") == 3
    
    @pytest.mark.asyncio
    async def test_invalid_id_makes_no_request(self, api, router):
        """Test an invalid id sends no request."""
        result = await call(router, "docuseal_get_submission", submission_id=0)
        
        assert result.status == ToolResultStatus.ERROR
        assert "submission_id must be a positive integer" in result.error
        assert api.requests == []
    
    @pytest.mark.asyncio
    async def test_integral_float_id_in_path(self, api, router):
        """Test an integral float id is rendered as an integer in the path."""
        await call(router, "docuseal_get_template", template_id=3.0)
        
        assert api.last.url.path == "/templates/3"


class TestShapingHelpers:
    """Tests for the argument-shaping helpers."""
    
    def test_build_query_skips_absent_fields(self):
        """Test absent fields are left out of the query."""
        query = build_query({"folder": "HR", "limit": None}, ("folder", "limit", "archived"))
        
        assert query == {"folder": "HR"}
    
    def test_build_query_renders_numbers(self):
        """Test integral floats render without a decimal point."""
        assert build_query({"limit": 5.0}, ("limit",)) == {"limit": "5"}
    
    def test_pick_keeps_false(self):
        """Test pick keeps explicit false values."""
        assert pick({"send_email": False, "name": None}, ("send_email", "name")) == {"send_email": False}
