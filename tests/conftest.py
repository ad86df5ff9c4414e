import json
from typing import Dict, List

import httpx
import pytest

API_KEY = "pk_test_key"


def make_inputs(**overrides: str) -> Dict[str, str]:
    """INPUT_* environment for a report-build run, with overrides by input name."""
    values = {
        "api-key": API_KEY,
        "api-url": "https://gitlaunch.io",
        "service-id": "service123",
        "action": "report-build",
        "build-id": "abc123",
    }
    values.update({name.replace("_", "-"): value for name, value in overrides.items()})
    return {f"INPUT_{name.upper()}": value for name, value in values.items()}


def read_outputs(path) -> Dict[str, str]:
    outputs = {}
    if not path.exists():
        return outputs
    for line in path.read_text(encoding="utf-8").splitlines():
        name, _, value = line.partition("=")
        outputs[name] = value
    return outputs


class FakeGitLaunch:
    """Records requests and answers each with a canned response."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body = None
        self.content = None
        self.error = None

    def respond(self, status_code: int, body=None, content: bytes = None):
        self.status_code = status_code
        self.body = body
        self.content = content

    def fail_with(self, error: Exception):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_api():
    return FakeGitLaunch()


@pytest.fixture
def outputs_file(tmp_path, monkeypatch):
    path = tmp_path / "github_output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(path))
    monkeypatch.delenv("GITHUB_STEP_SUMMARY", raising=False)
    return path
