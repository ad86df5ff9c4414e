import pytest

from gitlaunch_action.exceptions import RemoteRejection
from gitlaunch_action.responses import BuildResult, ServiceResponse, decode_response


class TestErrorMessage:
    def test_remote_error(self):
        assert ServiceResponse(401, {"error": "Invalid API key"}).error_message() == "Invalid API key"

    @pytest.mark.parametrize("body", [None, {}, {"error": ""}, {"error": None}, "text", [1, 2]])
    def test_generic(self, body):
        assert ServiceResponse(503, body).error_message() == "Failed with status 503"


class TestDecodeResponse:
    def test_success(self):
        response = ServiceResponse(200, {"buildId": "b1", "deployments": {"prod": "deployed"}, "_id": "x"})

        assert decode_response(response, {200}) == BuildResult("b1", {"prod": "deployed"})

    def test_status_code_decides(self):
        # A success-shaped body is still a failure under an unexpected code.
        response = ServiceResponse(204, {"buildId": "b1", "deployments": {}})

        with pytest.raises(RemoteRejection, match="^Failed with status 204$"):
            decode_response(response, {200, 201})

    def test_missing_fields(self):
        result = decode_response(ServiceResponse(201, {}), {201}, fallback_build_id="sent")

        assert result == BuildResult("sent", {})

    def test_success_without_json_body(self):
        with pytest.raises(RemoteRejection) as exc_info:
            decode_response(ServiceResponse(200, None), {200})

        assert str(exc_info.value) == "Unexpected response from GitLaunch (status 200)"
        assert exc_info.value.status_code == 200
