"""DocuSeal resource domains.

Each domain contains:
- Tool definitions
- Adapter implementation

Domains are isolated by design with no cross-domain calls or shared state.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docuseal_mcp.client import DocuSealClient
    from docuseal_mcp.router import ToolRouter


def load_all_domains(router: "ToolRouter", client: "DocuSealClient") -> None:
    """
    Load and register all DocuSeal domains.
    
    Registration order is the order tools are advertised in.
    """
    from domains.templates import register_templates_domain
    from domains.submissions import register_submissions_domain
    from domains.submitters import register_submitters_domain
    
    register_templates_domain(router, client)
    register_submissions_domain(router, client)
    register_submitters_domain(router, client)


__all__ = ["load_all_domains"]
