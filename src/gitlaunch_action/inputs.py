"""
Action input resolution.

GitHub Actions passes each `with:` input to the step as an environment
variable named INPUT_<NAME>, where NAME is the input name upper-cased with
spaces replaced by underscores (hyphens are kept, e.g. INPUT_API-KEY).
"""
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .exceptions import InputError

DEFAULT_API_URL = "https://gitlaunch.dev"


def input_env_name(name: str) -> str:
    """Environment variable the runner uses for the input `name`."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def _input_env_names(name: str) -> tuple:
    primary = input_env_name(name)
    # Composite actions and most shells cannot export names containing "-".
    fallback = primary.replace("-", "_")
    if fallback == primary:
        return (primary,)
    return (primary, fallback)


def get_input(
    name: str,
    required: bool = False,
    environ: Optional[Mapping[str, str]] = None
) -> str:
    """
    Read a single action input.

    Args:
        name: Input name as declared in action.yml (e.g. "api-key")
        required: Raise if the input is absent or empty
        environ: Environment to read from (defaults to os.environ)

    Returns:
        The whitespace-trimmed value, or "" when not supplied
    """
    env = os.environ if environ is None else environ
    value = ""
    for env_name in _input_env_names(name):
        value = (env.get(env_name) or "").strip()
        if value:
            break

    if required and not value:
        raise InputError(f"Input required and not supplied: {name}")
    return value


@dataclass(frozen=True)
class InvocationConfig:
    """Inputs for a single run of the action."""

    api_key: str = field(repr=False)
    service_id: str
    action: str
    build_id: str
    api_url: str = DEFAULT_API_URL
    environment: str = ""
    status: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "InvocationConfig":
        """Resolve every input, failing fast on the ones marked required."""
        return cls(
            api_key=get_input("api-key", required=True, environ=environ),
            api_url=get_input("api-url", environ=environ) or DEFAULT_API_URL,
            service_id=get_input("service-id", required=True, environ=environ),
            action=get_input("action", required=True, environ=environ),
            build_id=get_input("build-id", required=True, environ=environ),
            environment=get_input("environment", environ=environ),
            status=get_input("status", environ=environ),
        )
