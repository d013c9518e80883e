"""Contract tests for the frontend HTTP client (requests mocked)."""

import pytest
import requests

from frontend.client import BridgeClient, QueryResult


def _response(mocker, status_code, body=None):
    resp = mocker.Mock(status_code=status_code)
    if body is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def client():
    return BridgeClient(base_url="http://api.test/", timeout=5)


class TestQuery:

    def test_success(self, client, mocker, sample_messages):
        mock_post = mocker.patch("requests.post", return_value=_response(mocker, 200, {"response": "Short summary."}))

        result = client.query(sample_messages)

        assert result == QueryResult(response="Short summary.")
        assert result.ok
        mock_post.assert_called_once_with(
            "http://api.test/api/huggingface",
            json={"messages": sample_messages},
            headers={"Content-Type": "application/json"},
            timeout=5,
        )

    def test_empty_response_is_ok(self, client, mocker, sample_messages):
        mocker.patch("requests.post", return_value=_response(mocker, 200, {"response": ""}))
        assert client.query(sample_messages).ok

    def test_server_error_body(self, client, mocker, sample_messages):
        mocker.patch("requests.post", return_value=_response(mocker, 500, {"error": "Model is overloaded"}))

        result = client.query(sample_messages)

        assert not result.ok
        assert result.error == "Model is overloaded"

    def test_non_json_error(self, client, mocker, sample_messages):
        mocker.patch("requests.post", return_value=_response(mocker, 502))
        assert client.query(sample_messages).error == "Server error (502)"

    def test_missing_response_field(self, client, mocker, sample_messages):
        mocker.patch("requests.post", return_value=_response(mocker, 200, {"unexpected": 1}))
        assert not client.query(sample_messages).ok

    def test_transport_error_propagates(self, client, mocker, sample_messages):
        mocker.patch("requests.post", side_effect=requests.ConnectionError("refused"))
        with pytest.raises(requests.ConnectionError):
            client.query(sample_messages)


class TestHealth:

    def test_reports_status(self, client, mocker):
        mocker.patch("requests.get", return_value=_response(mocker, 200, {"status": "healthy"}))
        assert client.health() == "healthy"

    def test_offline(self, client, mocker):
        mocker.patch("requests.get", side_effect=requests.ConnectionError("refused"))
        assert client.health() == "offline"
