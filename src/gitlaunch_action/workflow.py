"""Helpers for talking back to the GitHub Actions runner.

See also https://docs.github.com/en/actions/reference/workflow-commands-for-github-actions
"""

import logging
import os
import sys
import uuid
from typing import Mapping

logger = logging.getLogger(__name__)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _issue_command(command: str, message: str):
    print(f"::{command}::{_escape_data(message)}")
    sys.stdout.flush()


def is_debug() -> bool:
    """True when the workflow was re-run with debug logging enabled."""
    return os.getenv("RUNNER_DEBUG") == "1"


def warn_if_not_running_on_ci():
    # https://docs.github.com/en/actions/reference/variables-reference
    if not os.getenv("CI"):
        logger.warning("'CI' env var not set, not running under GitHub Actions?")


def _format_output(name: str, value: str) -> str:
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def set_output(vars: Mapping[str, str]):
    """Sets values in a step's output parameters.

    This appends to the file located at the $GITHUB_OUTPUT environment variable.
    Multi-line values are written with a random heredoc delimiter.

    See
      * https://docs.github.com/en/actions/reference/workflow-commands-for-github-actions#setting-an-output-parameter
    """
    logger.info(f"Setting step outputs: {dict(vars)}")

    step_output_file = os.getenv("GITHUB_OUTPUT")
    if not step_output_file:
        logger.warning("GITHUB_OUTPUT env var not set, can't set step outputs")
        return

    with open(step_output_file, "a", encoding="utf-8") as f:
        f.writelines(_format_output(k, str(v)) for k, v in vars.items())


def append_step_summary(summary: str):
    """Appends markdown to the job summary at $GITHUB_STEP_SUMMARY.

    The summary is informational only: a failed write is logged, not raised.
    """
    step_summary_file = os.getenv("GITHUB_STEP_SUMMARY")
    if not step_summary_file:
        logger.debug("GITHUB_STEP_SUMMARY env var not set, skipping job summary")
        return

    try:
        with open(step_summary_file, "a", encoding="utf-8") as f:
            # Use double newlines to split sections in markdown.
            f.write(summary + "\n\n")
    except OSError as e:
        logger.warning(f"Could not write job summary to {step_summary_file}: {e}")


def set_failed(message: str) -> int:
    """Reports `message` as an error annotation and returns the failing exit code."""
    _issue_command("error", message)
    return 1
