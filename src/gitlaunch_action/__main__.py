import argparse
import asyncio
import logging
import os
import sys
from typing import Dict, List, Optional

from .inputs import input_env_name
from .runner import run
from .workflow import is_debug, warn_if_not_running_on_ci

# Configure logging
logging.basicConfig(level=logging.DEBUG if is_debug() else logging.INFO)
logger = logging.getLogger(__name__)

# Inputs that may be given on the command line. api-key is environment only.
CLI_INPUTS = ["api-url", "service-id", "action", "build-id", "environment", "status"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gitlaunch-action",
        description="Report a build or a deployment status change to GitLaunch. "
        "Inputs default to the INPUT_* environment variables set by GitHub Actions; "
        "the API key is read from INPUT_API-KEY or INPUT_API_KEY only.",
    )
    for name in CLI_INPUTS:
        parser.add_argument(f"--{name}", dest=name.replace("-", "_"), default=None)
    return parser.parse_args(argv)


def build_environ(args: argparse.Namespace) -> Dict[str, str]:
    """Layer command line inputs over the process environment."""
    environ = dict(os.environ)
    for name in CLI_INPUTS:
        value = getattr(args, name.replace("-", "_"))
        if value:
            environ[input_env_name(name)] = value
    return environ


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    warn_if_not_running_on_ci()
    return asyncio.run(run(build_environ(args)))


if __name__ == "__main__":
    sys.exit(main())
