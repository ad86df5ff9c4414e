"""
GitLaunch API client for reporting builds and deployment status.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from .inputs import DEFAULT_API_URL
from .responses import ServiceResponse

logger = logging.getLogger(__name__)


class GitLaunchClient:
    """Client for the GitLaunch services API."""

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize GitLaunch client.

        Args:
            api_key: GitLaunch API key, sent as a bearer token.
            api_url: Base URL of the GitLaunch deployment.
            transport: Optional httpx transport (tests pass a MockTransport).
        """
        if not api_key:
            raise ValueError("GitLaunch API key is required")

        self.base_url = f"{api_url.rstrip('/')}/api/v1/services"
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "User-Agent": "gitlaunch-action"
        }
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            transport=transport,
            follow_redirects=True
        )

    async def __aenter__(self) -> "GitLaunchClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self):
        """Close the underlying httpx client."""
        await self.client.aclose()

    async def send(
        self,
        method: str,
        path: str,
        body: Dict[str, Any]
    ) -> ServiceResponse:
        """
        Send one JSON request to the services API.

        Args:
            method: HTTP method ("POST" or "PATCH")
            path: Path below /api/v1/services (e.g. "/svc/builds")
            body: JSON-serializable request body

        Returns:
            Status code and parsed JSON body (None if the body is not JSON)
        """
        logger.debug(f"{method} {self.base_url}{path}")
        response = await self.client.request(method, path, json=body)

        try:
            parsed = response.json()
        except ValueError:
            logger.debug(f"Response with status {response.status_code} is not JSON")
            parsed = None

        return ServiceResponse(status_code=response.status_code, body=parsed)

    async def perform(self, action, service_id: str) -> ServiceResponse:
        """Send the request for a ReportBuild or UpdateStatus action."""
        return await self.send(action.method, action.path(service_id), action.body())
