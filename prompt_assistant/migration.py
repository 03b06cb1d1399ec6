"""Upgrade of stored settings written by earlier, multi-provider releases."""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple

from prompt_assistant.constants import AIProvider, DEFAULT_ASSISTANT_NAME, DEFAULT_LANGUAGE
from prompt_assistant.prompts import DEFAULT_CUSTOM_PROMPTS

LEGACY_KEYS = ("openAiApiKey", "deepseekApiKey", "openaiModel", "deepseekModel", "ollamaModel")

# Current keys the migration can fill from legacy keys.
_DERIVED_KEYS = ("openRouterApiKey", "openRouterModel")

# Stored key -> Settings field name.
STORED_FIELDS = {
    "mode": "provider",
    "openRouterApiKey": "openrouter_api_key",
    "openRouterModel": "openrouter_model",
    "assistantName": "assistant_name",
    "language": "language",
    "customPrompts": "custom_prompts",
}


class MigrationResult(NamedTuple):
    state: dict[str, Any]
    changed: bool


def default_state() -> dict[str, Any]:
    return {
        "openRouterApiKey": "",
        "mode": AIProvider.OPENROUTER.value,
        "language": DEFAULT_LANGUAGE,
        "openRouterModel": "",
        "assistantName": DEFAULT_ASSISTANT_NAME,
        "customPrompts": [],
    }


def migrate_legacy_settings(stored: Mapping[str, Any] | None) -> MigrationResult:
    """Map a stored settings blob onto the current single-provider shape.

    The input is not modified. ``changed`` tells the caller whether the
    result needs to be written back.
    """

    loaded = dict(stored or {})
    state = {**default_state(), **loaded}

    if state["mode"] != AIProvider.OPENROUTER.value:
        state["mode"] = AIProvider.OPENROUTER.value

    if not state["customPrompts"]:
        state["customPrompts"] = [prompt.model_dump() for prompt in DEFAULT_CUSTOM_PROMPTS]

    if not state["openRouterApiKey"]:
        legacy_key = loaded.get("openAiApiKey") or loaded.get("deepseekApiKey")
        if legacy_key:
            state["openRouterApiKey"] = legacy_key

    if not state["openRouterModel"] and loaded.get("openaiModel"):
        model = loaded["openaiModel"]
        state["openRouterModel"] = model if "/" in model else f"openai/{model}"

    for key in LEGACY_KEYS:
        state.pop(key, None)

    return MigrationResult(state=state, changed=state != loaded)


def settings_from_state(
    state: Mapping[str, Any], stored: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Translate stored keys into ``Settings`` field names.

    With ``stored`` given, only values the stored blob actually set, directly
    or through a legacy key, are returned; defaults filled in by the migration
    are left out so they do not mask values configured elsewhere.
    """

    if stored is None:
        return {field: state[key] for key, field in STORED_FIELDS.items() if key in state}

    defaults = default_state()
    seeded_prompts = [prompt.model_dump() for prompt in DEFAULT_CUSTOM_PROMPTS]
    fields = {}
    for key, field in STORED_FIELDS.items():
        value = state.get(key)
        if key not in stored and key not in _DERIVED_KEYS:
            continue
        if not value or value == defaults[key] or value == seeded_prompts:
            continue
        fields[field] = value
    return fields
