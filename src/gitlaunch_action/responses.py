"""
Decoding of GitLaunch API responses.

Success and error bodies share no type tag, so the status code alone decides
which shape a body is read as.
"""
from dataclasses import dataclass, field
from typing import Any, Collection, Dict, Optional

from .exceptions import RemoteRejection


@dataclass(frozen=True)
class ServiceResponse:
    """Status code and best-effort parsed JSON body of one API call."""

    status_code: int
    body: Any = None

    def error_message(self) -> str:
        """Remote `error` text, or a generic message naming the status code."""
        error = self.body.get("error") if isinstance(self.body, dict) else None
        if isinstance(error, str) and error:
            return error
        return f"Failed with status {self.status_code}"


@dataclass(frozen=True)
class BuildResult:
    """A build record as returned by GitLaunch."""

    build_id: str
    deployments: Dict[str, str] = field(default_factory=dict)


def decode_response(
    response: ServiceResponse,
    success_codes: Collection[int],
    fallback_build_id: Optional[str] = None
) -> BuildResult:
    """
    Turn a response into a BuildResult or raise RemoteRejection.

    Args:
        response: The response to decode
        success_codes: Status codes that count as success for the call made
        fallback_build_id: Build id to use when a success body omits buildId

    Returns:
        The decoded build record
    """
    if response.status_code not in success_codes:
        raise RemoteRejection(response.error_message(), response.status_code)

    body = response.body
    if not isinstance(body, dict):
        raise RemoteRejection(
            f"Unexpected response from GitLaunch (status {response.status_code})",
            response.status_code,
        )

    deployments = body.get("deployments")
    return BuildResult(
        build_id=str(body.get("buildId") or fallback_build_id or ""),
        deployments=dict(deployments) if isinstance(deployments, dict) else {},
    )
