"""Timer-driven character reveal for the latest response.

The server returns the whole text at once; this replays it one
character per tick so the page looks like it is being typed.
"""

import threading
from typing import Callable, Iterator, Optional

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_INTERVAL_MS = 10


def frames(text: str) -> Iterator[str]:
    """Yield the prefixes of text of length 0, 1, ..., len(text)."""
    for i in range(len(text) + 1):
        yield text[:i]


class TypingReveal:
    """Cancellable background reveal. Only one runs at a time.

    Starting a new reveal cancels and joins the previous one before the
    first frame of the new text is written.
    """

    def __init__(self, interval_ms: int = DEFAULT_INTERVAL_MS):
        self.interval = interval_ms / 1000
        self._thread: Optional[threading.Thread] = None
        self._cancel = threading.Event()

    @property
    def active(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, text: str, on_frame: Callable[[str], None]) -> None:
        """Reveal text in the background, calling on_frame with each prefix."""
        self.cancel()
        cancel = threading.Event()
        self._cancel = cancel
        self._thread = threading.Thread(
            target=self._run, args=(text, on_frame, cancel, self.interval),
            name="typing-reveal", daemon=True,
        )
        self._thread.start()

    def cancel(self) -> None:
        """Stop the running reveal, if any, and wait for it to exit."""
        self._cancel.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the current reveal finishes.

        Returns:
            True if no reveal is running anymore.
        """
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
        return not self.active

    @staticmethod
    def _run(text: str, on_frame: Callable[[str], None],
             cancel: threading.Event, interval: float) -> None:
        for prefix in frames(text):
            if cancel.is_set():
                logger.debug("typing.cancelled", revealed=len(prefix), total=len(text))
                return
            on_frame(prefix)
            # wait() returns early, and True, once cancelled
            if len(prefix) < len(text) and cancel.wait(interval):
                logger.debug("typing.cancelled", revealed=len(prefix), total=len(text))
                return
        logger.debug("typing.done", total=len(text))
