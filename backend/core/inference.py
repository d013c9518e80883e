"""Bridge to the hosted Hugging Face inference API.

Opens one streaming chat completion per query and folds the streamed
deltas into a single string. The caller only ever sees the full text or
an InferenceError, never a partial result.
"""

import structlog
from huggingface_hub import InferenceClient

from backend.core.config import InferenceConfig

logger = structlog.get_logger(__name__)


class InferenceError(Exception):
    """Upstream call failed while opening or reading the stream."""
    pass


def delta_text(chunk) -> str:
    """Return the incremental text carried by a stream chunk.

    Chunks without choices, delta or content contribute an empty string.
    """
    choices = getattr(chunk, "choices", None)
    if not choices:
        return ""
    delta = getattr(choices[0], "delta", None)
    if delta is None:
        return ""
    return getattr(delta, "content", None) or ""


class InferenceBridge:
    """Streams a chat completion and returns the concatenated text."""

    def __init__(self, config: InferenceConfig):
        self.config = config
        self.client = InferenceClient(token=config.api_key or None)

    def is_healthy(self) -> bool:
        """Check that an API key is configured.

        Returns:
            True if HF_API_KEY was provided.
        """
        return bool(self.config.api_key)

    def query(self, messages: list[dict]) -> str:
        """Send messages to the model and buffer the whole stream.

        Args:
            messages: Chat messages as {"role", "content"} dicts, in order.

        Returns:
            Ordered concatenation of every chunk's delta.

        Raises:
            InferenceError: If the stream cannot be opened or breaks mid-way.
                The message is the upstream error's message, unchanged.
        """
        logger.debug("inference.stream_open", model=self.config.model, messages=len(messages))

        fragments = []
        chunks = 0
        try:
            stream = self.client.chat_completion(
                messages,
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                stream=True,
            )
            for chunk in stream:
                chunks += 1
                fragments.append(delta_text(chunk))
        except Exception as e:
            logger.error("inference.stream_failed", model=self.config.model,
                         chunks=chunks, error=str(e))
            raise InferenceError(str(e)) from e

        text = "".join(fragments)
        logger.info("inference.stream_done", model=self.config.model,
                    chunks=chunks, chars=len(text))
        return text
