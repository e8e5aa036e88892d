"""Tests for the prompt_toolkit completer."""

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from termspec.completion import SpecCompleter, create_completer


def complete(completer, text):
    return list(completer.get_completions(Document(text), CompleteEvent()))


class TestSpecCompleter:
    def test_replaces_partial_token(self, engine):
        completions = complete(SpecCompleter(engine), "git comm")

        assert [c.text for c in completions] == ["commit"]
        assert completions[0].start_position == -4
        assert completions[0].display_meta_text == "Record changes"
        assert completions[0].display_text.endswith(" commit")

    def test_fresh_token_inserts_at_cursor(self, engine):
        completions = complete(SpecCompleter(engine), "git commit ")
        assert completions
        assert all(c.start_position == 0 for c in completions)

    def test_argument_hint(self, engine):
        completer = create_completer(engine)
        assert complete(completer, "git commit -m ") == []
        assert completer.argument_hint() == "msg"

        complete(completer, "git comm")
        assert completer.argument_hint() == ""

    def test_only_text_before_cursor(self, engine):
        document = Document("git comm --all", cursor_position=len("git comm"))
        completions = list(SpecCompleter(engine).get_completions(document, CompleteEvent()))
        assert [c.text for c in completions] == ["commit"]
