"""Fixed values shared by the chat core."""

from enum import Enum


class AIProvider(str, Enum):
    """Remote chat providers the core knows how to talk to."""

    OPENROUTER = "openrouter"


CHAT_DELIMITER = "\n\n---\n\n"
MSG_PADDING = "\n\n"

OPENROUTER_CHAT_URL = "https://openrouter.ai/api/v1/chat/completions"
OPENROUTER_HOST = "openrouter.ai"
OPENROUTER_DEFAULT_MODEL = "openai/gpt-4o-mini"

APP_REFERER = "https://github.com/shmlkv/obsidian-prompt-assistant"
APP_TITLE = "AI Chat Assistant Obsidian Plugin"

DEFAULT_ASSISTANT_NAME = "Assistant"
DEFAULT_LANGUAGE = "English"
TEMPERATURE = 0.7
