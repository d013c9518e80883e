"""HTTP client for the TextMaster API."""

import os
from dataclasses import dataclass
from typing import Optional

import requests
import structlog

logger = structlog.get_logger(__name__)

API_URL = os.environ.get("API_URL", "http://localhost:8000")
QUERY_PATH = "/api/huggingface"
HEALTH_PATH = "/health"
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "60"))


@dataclass
class QueryResult:
    """Outcome of one bridge call: either response or error is set."""
    response: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.response is not None


class BridgeClient:
    """Sends prompts to the bridge endpoint and parses its JSON reply."""

    def __init__(self, base_url: str = API_URL, timeout: float = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def query(self, messages: list[dict]) -> QueryResult:
        """POST messages and return the parsed result.

        Raises:
            requests.RequestException: On transport failures (connection,
                timeout). HTTP error statuses are returned as QueryResult.error.
        """
        resp = requests.post(
            f"{self.base_url}{QUERY_PATH}",
            json={"messages": messages},
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if resp.status_code != 200:
            error = data.get("error") or f"Server error ({resp.status_code})"
            logger.warning("client.http_error", status=resp.status_code, error=error)
            return QueryResult(error=str(error))

        response = data.get("response")
        if not isinstance(response, str):
            return QueryResult(error="Malformed response body")
        return QueryResult(response=response)

    def health(self) -> str:
        """Return the API's reported status, or "offline" if unreachable."""
        try:
            resp = requests.get(f"{self.base_url}{HEALTH_PATH}", timeout=3)
            return resp.json().get("status", "unknown")
        except (requests.RequestException, ValueError, AttributeError):
            return "offline"
