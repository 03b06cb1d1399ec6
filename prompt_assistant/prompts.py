"""Prompt templates sent alongside the document transcript."""

from prompt_assistant.models import CustomPrompt

SYSTEM_PROMPT = """\
You are a supportive assistant trained in cognitive behavioral therapy (CBT) \
techniques. The user writes in a personal journal and you reply inside it.

Help the user notice automatic thoughts, name the cognitive distortions behind \
them and reframe them into balanced alternatives. Ask one clarifying question \
at a time, keep replies short and concrete, and prefer practical next steps \
over general advice.

You are not a replacement for a licensed professional. If the user mentions \
self-harm or a crisis, encourage them to contact local emergency services or \
a crisis line."""


def summary_prompt(language: str) -> str:
    """Directive asking for a condensed restatement instead of a reply."""

    return (
        f"Summarize the conversation above in {language} as a markdown table "
        "with the columns: Automatic thought, Cognitive distortion, "
        "Reframed thought. Add one row per distinct thought and do not add "
        "any text before or after the table."
    )


DEFAULT_CUSTOM_PROMPTS: tuple[CustomPrompt, ...] = (
    CustomPrompt(
        id="exposure-ladder",
        name="Exposure Ladder",
        prompt=(
            "Help me create an exposure hierarchy for this fear/anxiety. List "
            "situations from least to most anxiety-provoking (0-10 scale), "
            "with specific, actionable steps I can practice."
        ),
    ),
    CustomPrompt(
        id="behavioral-activation",
        name="Activity Plan",
        prompt=(
            "Help me create a behavioral activation plan. Suggest specific "
            "activities that align with my values and could improve my mood. "
            "Include small, achievable steps I can take today."
        ),
    ),
    CustomPrompt(
        id="habit-building",
        name="Habit Builder",
        prompt=(
            "Help me build this new habit using behavioral principles. "
            "Suggest: 1) A clear trigger/cue, 2) The specific behavior, "
            "3) An immediate reward, 4) How to track progress."
        ),
    ),
    CustomPrompt(
        id="avoidance-check",
        name="Avoidance Check",
        prompt=(
            "Help me identify what I might be avoiding in this situation. "
            "What behaviors am I using to escape discomfort? What would facing "
            "this look like in small, manageable steps?"
        ),
    ),
)
