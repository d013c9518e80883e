"""Shared fixtures for all tests."""

from types import SimpleNamespace

import pytest


def make_chunk(content=None, *, delta=True, choices=True):
    """Build an object shaped like a streamed chat-completion chunk."""
    if not choices:
        return SimpleNamespace(choices=[])
    if not delta:
        return SimpleNamespace(choices=[SimpleNamespace(delta=None)])
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=content))])


@pytest.fixture
def chunk():
    return make_chunk


@pytest.fixture
def sample_messages() -> list[dict]:
    return [
        {"role": "system", "content": "You are a text summarizer."},
        {"role": "user", "content": "Hello world, this is a long passage..."},
    ]


class FakeBridge:
    """Stand-in for InferenceBridge on app.state."""

    def __init__(self, response="", error=None, healthy=True):
        self.response = response
        self.error = error
        self.healthy = healthy
        self.calls = []

    def is_healthy(self):
        return self.healthy

    def query(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_bridge():
    return FakeBridge
