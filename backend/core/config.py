"""Inference configuration loaded from the environment."""

import os
from dataclasses import dataclass

DEFAULT_MODEL = "meta-llama/Llama-3.2-3B-Instruct"
MAX_TOKENS = 500


@dataclass(frozen=True)
class InferenceConfig:
    """Settings for the hosted inference client.

    Built once at startup and handed to the bridge, so nothing reads
    the API key from module scope.
    """
    api_key: str
    model: str = DEFAULT_MODEL
    max_tokens: int = MAX_TOKENS

    @classmethod
    def from_env(cls) -> "InferenceConfig":
        """Read HF_API_KEY and HF_MODEL from the process environment."""
        return cls(
            api_key=os.environ.get("HF_API_KEY", ""),
            model=os.environ.get("HF_MODEL") or DEFAULT_MODEL,
        )
