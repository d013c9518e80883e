"""System instructions for the two actions and the prompt builder."""

from enum import Enum

from langchain_core.messages import HumanMessage, SystemMessage, convert_to_openai_messages


class ActionMode(str, Enum):
    SUMMARIZE = "summarize"
    TRANSLATE = "translate"


SYSTEM_PROMPTS = {
    ActionMode.SUMMARIZE: (
        "You are a text summarizer. Please summarize the following text "
        "without generating any extra content."
    ),
    ActionMode.TRANSLATE: (
        "You are a translator. Please translate the following text "
        "without generating any extra content."
    ),
}


def build_messages(mode: ActionMode, text: str) -> list[dict]:
    """Build the two-message prompt for a submission.

    Args:
        mode: Selected action, picks the system instruction.
        text: User input, forwarded unchanged.

    Returns:
        [system, user] as {"role", "content"} dicts ready for the wire.
    """
    mode = ActionMode(mode)
    messages = [
        SystemMessage(content=SYSTEM_PROMPTS[mode]),
        HumanMessage(content=text),
    ]
    return convert_to_openai_messages(messages)
