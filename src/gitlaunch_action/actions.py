"""
The two GitLaunch operations and the factory that validates inputs into one.
"""
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Union

from .exceptions import ConfigurationError
from .inputs import InvocationConfig
from .responses import ServiceResponse, decode_response

REPORT_BUILD = "report-build"
UPDATE_STATUS = "update-status"


class DeploymentStatus(str, Enum):
    DEPLOYING = "deploying"
    DEPLOYED = "deployed"
    ERROR = "error"
    CANCELLED = "cancelled"


VALID_STATUSES = [status.value for status in DeploymentStatus]


@dataclass(frozen=True)
class ReportBuild:
    """Create a build record for the service."""

    build_id: str

    name = REPORT_BUILD
    method = "POST"
    success_codes: ClassVar[FrozenSet[int]] = frozenset({200, 201})

    def path(self, service_id: str) -> str:
        return f"/{service_id}/builds"

    def body(self) -> Dict[str, Any]:
        return {"buildId": self.build_id}

    def describe(self) -> str:
        return f"Reporting build {self.build_id} to GitLaunch..."

    def outputs(self, response: ServiceResponse) -> Dict[str, str]:
        """Map a response to step outputs, raising RemoteRejection on failure."""
        result = decode_response(response, self.success_codes, self.build_id)
        return {
            "build-id": result.build_id,
            "deployment-status": json.dumps(result.deployments, separators=(",", ":"), ensure_ascii=False),
        }

    def completed(self) -> str:
        return f"Build {self.build_id} reported successfully"


@dataclass(frozen=True)
class UpdateStatus:
    """Move one environment of a build to a new deployment status."""

    build_id: str
    environment: str
    status: DeploymentStatus

    name = UPDATE_STATUS
    method = "PATCH"
    success_codes: ClassVar[FrozenSet[int]] = frozenset({200})

    def path(self, service_id: str) -> str:
        return f"/{service_id}/builds/{self.build_id}/deploy/{self.environment}"

    def body(self) -> Dict[str, Any]:
        return {"status": self.status.value}

    def describe(self) -> str:
        return (
            f"Updating deployment status for build {self.build_id} "
            f"in {self.environment} to {self.status.value}..."
        )

    def outputs(self, response: ServiceResponse) -> Dict[str, str]:
        """Map a response to step outputs, raising RemoteRejection on failure."""
        result = decode_response(response, self.success_codes, self.build_id)
        return {
            "build-id": result.build_id,
            "deployment-status": result.deployments.get(self.environment) or self.status.value,
        }

    def completed(self) -> str:
        return "Deployment status updated successfully"


Action = Union[ReportBuild, UpdateStatus]


def build_action(config: InvocationConfig) -> Action:
    """
    Validate the inputs for the selected action and build its request.

    Args:
        config: Resolved action inputs

    Returns:
        ReportBuild or UpdateStatus

    Raises:
        ConfigurationError: the action is unknown or its fields are invalid
    """
    if config.action == REPORT_BUILD:
        return ReportBuild(build_id=config.build_id)

    if config.action == UPDATE_STATUS:
        if not config.environment:
            raise ConfigurationError("environment is required for update-status action")
        if not config.status:
            raise ConfigurationError("status is required for update-status action")
        if config.status not in VALID_STATUSES:
            raise ConfigurationError(
                f"Invalid status: {config.status}. Must be one of: {', '.join(VALID_STATUSES)}"
            )
        return UpdateStatus(
            build_id=config.build_id,
            environment=config.environment,
            status=DeploymentStatus(config.status),
        )

    raise ConfigurationError(
        f"Invalid action: {config.action}. Must be '{REPORT_BUILD}' or '{UPDATE_STATUS}'"
    )
