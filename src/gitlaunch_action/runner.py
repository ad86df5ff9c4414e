"""
One run of the action: resolve inputs, call GitLaunch, publish outputs.
"""
import logging
from typing import Mapping, Optional

import httpx

from .actions import build_action
from .exceptions import GitLaunchError
from .gitlaunch import GitLaunchClient
from .inputs import InvocationConfig
from .workflow import append_step_summary, set_failed, set_output

logger = logging.getLogger(__name__)


def _summary(service_id: str, outputs: Mapping[str, str]) -> str:
    return (
        f"### GitLaunch: {service_id}\n\n"
        f"| build-id | deployment-status |\n"
        f"| --- | --- |\n"
        f"| `{outputs['build-id']}` | `{outputs['deployment-status']}` |"
    )


async def run(
    environ: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> int:
    """
    Execute the configured action and report the outcome to the runner.

    Args:
        environ: Environment holding the INPUT_* values (defaults to os.environ)
        transport: Optional httpx transport for the GitLaunch client

    Returns:
        Process exit code: 0 on success, 1 after a failure was reported
    """
    try:
        config = InvocationConfig.from_env(environ)
        action = build_action(config)

        logger.info(action.describe())
        async with GitLaunchClient(config.api_key, config.api_url, transport=transport) as client:
            response = await client.perform(action, config.service_id)

        outputs = action.outputs(response)
        logger.info(action.completed())

        set_output(outputs)
        append_step_summary(_summary(config.service_id, outputs))
    except (GitLaunchError, httpx.HTTPError) as e:
        logger.debug("GitLaunch action failed", exc_info=True)
        return set_failed(str(e) or type(e).__name__)
    except Exception:
        logger.exception("Unexpected error while running the GitLaunch action")
        return set_failed("An unexpected error occurred")

    return 0
