"""Rendering of the dialogue history into a single completion prompt.

Entries alternate by position: even indexes are the user, odd indexes are
Sky. The whole history is rendered on every turn, so the prompt grows without
bound as the conversation goes on.
"""

from typing import Sequence

PRELUDE = (
    "The following is a conversation between you and an AI assistant named Sky. "
    "Sky is helpful, creative, clever, and very friendly."
)


def render_dialogue(history: Sequence[str]) -> str:
    parts = []
    for i in range(0, len(history), 2):
        user = history[i]
        if i + 1 < len(history):
            parts.append(f"You: {user}\nSky: {history[i + 1]}\n")
        else:
            # Open cue so the completion continues as Sky.
            parts.append(f"You: {user}\nSky:")
    return "".join(parts)


def build_prompt(history: Sequence[str]) -> str:
    return f"{PRELUDE}\n{render_dialogue(history)}"
