"""Conversion between a delimited document and a list of chat messages.

A document is a sequence of turns separated by a horizontal rule (three or
more dashes). Turns written by the assistant start with a bold marker such as
``**Assistant:**``; every other turn belongs to the user.
"""

from __future__ import annotations

import re

from prompt_assistant.constants import CHAT_DELIMITER, DEFAULT_ASSISTANT_NAME
from prompt_assistant.models import Message

_DELIMITER_PATTERN = re.compile(r"-{3,}")


def assistant_marker(assistant_name: str) -> str:
    return f"**{assistant_name}:**"


def _marker_pattern(assistant_name: str) -> re.Pattern[str]:
    return re.compile("^" + re.escape(assistant_marker(assistant_name)))


def message_from_segment(
    segment: str, assistant_name: str = DEFAULT_ASSISTANT_NAME
) -> Message:
    """Classify one trimmed turn as an assistant or user message."""

    text = segment.strip()
    pattern = _marker_pattern(assistant_name)
    if pattern.match(text):
        return Message(role="assistant", content=pattern.sub("", text, count=1).strip())
    return Message(role="user", content=text)


def decode_transcript(
    document: str, assistant_name: str = DEFAULT_ASSISTANT_NAME
) -> list[Message]:
    """Split a document into one message per turn, in document order.

    Empty turns (for example before a leading delimiter) are kept as empty
    user messages so the number of turns survives a round trip.
    """

    return [
        message_from_segment(segment, assistant_name)
        for segment in _DELIMITER_PATTERN.split(document)
    ]


def encode_reply(reply: str, assistant_name: str = DEFAULT_ASSISTANT_NAME) -> str:
    """Render a reply as a delimited assistant turn ready to be appended."""

    return f"{CHAT_DELIMITER}{assistant_marker(assistant_name)} {reply}{CHAT_DELIMITER}"
