from sky.history import History
from sky.prompt import PRELUDE, build_prompt, render_dialogue


class TestPromptAssembly:
    """Rendering history into the completion prompt"""

    def test_open_cue_for_unpaired_user_line(self):
        assert build_prompt(["hi"]) == f"{PRELUDE}\nYou: hi\nSky:"

    def test_complete_pair_ends_with_newline(self):
        assert build_prompt(["hi", "hello there"]) == (
            f"{PRELUDE}\nYou: hi\nSky: hello there\n"
        )

    def test_empty_history_is_just_the_prelude(self):
        assert build_prompt([]) == f"{PRELUDE}\n"

    def test_pairs_rendered_in_order(self):
        history = ["a", "b", "c", "d", "e"]
        assert render_dialogue(history) == (
            "You: a\nSky: b\nYou: c\nSky: d\nYou: e\nSky:"
        )

    def test_even_history_ends_with_last_reply(self):
        prompt = build_prompt(["one", "two", "three", "four"])
        assert prompt.endswith("Sky: four\n")
        assert not prompt.endswith("Sky:")

    def test_odd_history_ends_with_cue(self):
        prompt = build_prompt(["one", "two", "three"])
        assert prompt.endswith("You: three\nSky:")

    def test_deterministic(self):
        history = ["hi", "hello", "how are you?"]
        assert build_prompt(history) == build_prompt(history)
        assert history == ["hi", "hello", "how are you?"]


class TestHistory:
    """Append-only utterance history"""

    def test_add_exchange_appends_both_speakers(self):
        history = History()
        history.add_exchange("hi", "hello")
        assert history.utterances == ("hi", "hello")
        assert len(history) == 2

    def test_with_pending_does_not_commit(self):
        history = History()
        history.add_exchange("hi", "hello")
        assert history.with_pending("again") == ("hi", "hello", "again")
        assert len(history) == 2

    def test_str_renders_dialogue_without_prelude(self):
        history = History()
        history.add_exchange("hi", "hello")
        assert str(history) == "You: hi\nSky: hello\n"
        assert list(history) == ["hi", "hello"]
