"""Client-side submission lifecycle.

Owns the history list, the current input, the action mode, the last
error and the typing buffer. The Streamlit page only renders this state
and forwards user actions to it.

Lifecycle per submission:
    Idle -> Submitting -> AwaitingResult -> Success | Failure -> Idle
"""

import threading
from dataclasses import dataclass
from typing import Optional, Union

import structlog

from frontend.client import BridgeClient, QueryResult
from frontend.prompts import ActionMode, build_messages
from frontend.typewriter import TypingReveal

logger = structlog.get_logger(__name__)

USER_ERROR_MESSAGE = "We are facing some issues, please try again later"


@dataclass
class HistoryEntry:
    """One submitted input and its response ("" until it arrives)."""
    input: str
    response: str = ""


class InteractionController:
    """State machine behind the query form."""

    def __init__(self, client: Optional[BridgeClient] = None,
                 typing: Optional[TypingReveal] = None):
        self.client = client or BridgeClient()
        self.typing = typing or TypingReveal()

        self.history: list[HistoryEntry] = []
        self.current_input = ""
        self.action_mode = ActionMode.SUMMARIZE
        self.last_error = ""
        self.typing_buffer = ""
        self.has_searched = False
        self.scroll_pending = False

        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def set_input(self, text: str) -> None:
        self.current_input = text

    def set_mode(self, mode: Union[ActionMode, str]) -> None:
        """Select summarize or translate.

        Raises:
            ValueError: If mode is not a known action.
        """
        self.action_mode = ActionMode(mode)

    def submit(self, text: Optional[str] = None) -> Optional[HistoryEntry]:
        """Run one submission to completion.

        Args:
            text: Input to send. Defaults to current_input.

        Returns:
            The new history entry, or None when the submission was ignored
            (empty input, or another submission still in flight).
        """
        user_input = self.current_input if text is None else text
        if not user_input:
            return None

        if not self._in_flight.acquire(blocking=False):
            logger.warning("submit.rejected_in_flight", history=len(self.history))
            return None

        try:
            return self._submit(user_input)
        finally:
            self._in_flight.release()

    def _submit(self, user_input: str) -> HistoryEntry:
        entry = HistoryEntry(input=user_input)
        self.history.append(entry)
        self.typing.cancel()
        self.typing_buffer = ""
        self.last_error = ""
        self.has_searched = True

        messages = build_messages(self.action_mode, user_input)
        logger.info("submit.start", mode=self.action_mode.value, input_len=len(user_input))

        try:
            result = self.client.query(messages)
        except Exception as e:
            result = QueryResult(error=str(e))

        if result.ok:
            entry.response = result.response
            self.typing.start(result.response, self._on_frame)
            self.last_error = ""
            self.scroll_pending = True
            logger.info("submit.success", chars=len(result.response))
        else:
            # Detail stays in the log, the user only sees the fixed message
            logger.error("submit.failed", error=result.error)
            self.last_error = USER_ERROR_MESSAGE

        self.current_input = ""
        return entry

    def _on_frame(self, prefix: str) -> None:
        self.typing_buffer = prefix

    def clear_all(self) -> None:
        """Drop the history and reset the display state."""
        self.typing.cancel()
        self.history = []
        self.typing_buffer = ""
        self.last_error = ""
        self.has_searched = False
        self.scroll_pending = False
        logger.info("history.cleared")

    def display_response(self, index: int) -> str:
        """Text shown for history[index]: the typing buffer for the last entry."""
        if index == len(self.history) - 1:
            return self.typing_buffer
        return self.history[index].response

    def consume_scroll(self) -> bool:
        """Return and reset the pending scroll-to-latest request."""
        pending = self.scroll_pending
        self.scroll_pending = False
        return pending
