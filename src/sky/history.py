from typing import Iterator

from sky.prompt import render_dialogue


class History:
    """Append-only user/assistant utterances, committed one exchange at a time."""

    def __init__(self):
        self._utterances: list[str] = []

    @property
    def utterances(self) -> tuple[str, ...]:
        return tuple(self._utterances)

    def with_pending(self, utterance: str) -> tuple[str, ...]:
        return (*self._utterances, utterance)

    def add_exchange(self, utterance: str, reply: str):
        self._utterances.extend((utterance, reply))

    def __len__(self) -> int:
        return len(self._utterances)

    def __iter__(self) -> Iterator[str]:
        return iter(self.utterances)

    def __str__(self) -> str:
        return render_dialogue(self._utterances)
