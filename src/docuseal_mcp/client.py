"""DocuSeal REST API client.

The single choke point for outbound calls: injects the auth header and base
URL, serializes request bodies and turns non-2xx responses into exceptions
that keep the remote status and body verbatim.
"""

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from shared.config import DocuSealSettings
from shared.logging import get_logger

logger = get_logger(__name__)

MISSING_API_KEY_MESSAGE = (
    "DocuSeal API key is required. Set the DOCUSEAL_API_KEY environment variable."
)


class DocuSealError(Exception):
    """Base exception for DocuSeal client errors."""
    pass


class DocuSealConfigError(DocuSealError):
    """Client is not configured well enough to make a request."""
    pass


class DocuSealConnectionError(DocuSealError):
    """Request never produced an HTTP response."""
    pass


class DocuSealAPIError(DocuSealError):
    """DocuSeal answered with a non-success status."""
    
    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class DocuSealClient:
    """
    Client for the DocuSeal REST API.
    
    The client holds no connection state between calls. Settings are either
    injected at construction or, when omitted, read from the environment on
    every request so a key exported after startup is picked up.
    """
    
    def __init__(
        self,
        settings: Optional[DocuSealSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        """
        Initialize the client.
        
        Args:
            settings: Fixed connection settings, None to read the environment per call
            transport: Optional httpx transport, used by tests to fake the API
        """
        self._settings = settings
        self._transport = transport
    
    def _get_settings(self) -> DocuSealSettings:
        if self._settings is not None:
            return self._settings
        try:
            return DocuSealSettings()
        except ValidationError as e:
            raise DocuSealConfigError(f"Invalid DocuSeal configuration: {e}") from e
    
    @staticmethod
    def _get_headers(api_key: str, overrides: Optional[dict[str, str]] = None) -> dict[str, str]:
        """Default headers with auth, caller overrides applied last."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-Auth-Token": api_key,
        }
        if overrides:
            headers.update(overrides)
        return headers
    
    async def request(
        self,
        path: str,
        method: str = "GET",
        headers: Optional[dict[str, str]] = None,
        body: Any = None,
        params: Optional[dict[str, str]] = None
    ) -> Any:
        """
        Send one request to the DocuSeal API and return the parsed JSON.
        
        Args:
            path: Path below the base URL, e.g. /templates/1
            method: HTTP method
            headers: Extra headers overriding the defaults
            body: JSON-serializable payload, ignored for GET
            params: Query string parameters
        
        Raises:
            DocuSealConfigError: If no API key is configured or settings are invalid
            DocuSealConnectionError: If the request could not be completed
            DocuSealAPIError: If DocuSeal returns a non-success status
            DocuSealError: If a success response is not JSON
        """
        settings = self._get_settings()
        if not settings.api_key:
            raise DocuSealConfigError(MISSING_API_KEY_MESSAGE)
        
        method = method.upper()
        url = f"{settings.base_url}{path}"
        
        kwargs: dict[str, Any] = {
            "headers": self._get_headers(settings.api_key, headers),
        }
        if params:
            kwargs["params"] = params
        if body is not None and method != "GET":
            kwargs["json"] = body
        
        logger.debug("DocuSeal request", method=method, url=url, params=params)
        
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=settings.timeout_seconds,
                follow_redirects=True
            ) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.warning("DocuSeal request failed", method=method, url=url, error=str(e))
            raise DocuSealConnectionError(f"Request to {url} failed: {e}") from e
        
        if not response.is_success:
            logger.warning(
                "DocuSeal returned an error",
                method=method,
                url=url,
                status_code=response.status_code
            )
            raise DocuSealAPIError(response.status_code, response.text)
        
        try:
            return response.json()
        except ValueError as e:
            raise DocuSealError(
                f"DocuSeal returned HTTP {response.status_code} from {method} {url} "
                f"without a JSON body"
            ) from e
    
    async def get(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        return await self.request(path, params=params)
    
    async def post(self, path: str, body: Any) -> Any:
        return await self.request(path, method="POST", body=body)
    
    async def put(self, path: str, body: Any) -> Any:
        return await self.request(path, method="PUT", body=body)
    
    async def delete(self, path: str) -> Any:
        return await self.request(path, method="DELETE")
