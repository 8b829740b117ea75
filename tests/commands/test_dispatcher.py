"""Tests for CommandDispatcher."""

import pytest

from src.core.commands.dispatcher import CommandDispatcher
from src.core.commands.registry import CommandSpec
from src.core.errors import CommandNotFound, InvalidPattern, PatternMismatch


class TestCommandDispatcher:
    """Tests for CommandDispatcher."""

    def test_find_match_with_optional_arguments(self, dispatcher):
        print("\n INPUT: find_match('create stream events ttl 60')")
        match = dispatcher.find_match("create stream events ttl 60")
        print(f" OUTPUT: {match} -> {match.arguments}")
        assert match.command.description == "Create a stream."
        assert match.arguments == {"stream-id": "events", "ttl-in-seconds": "60"}

    def test_find_match_optional_in_any_order(self, dispatcher):
        match = dispatcher.find_match("create stream events desc click events ttl 60")
        assert match.arguments == {
            "stream-id": "events",
            "description": "click events",
            "ttl-in-seconds": "60",
        }

    def test_find_match_literal_command(self, dispatcher):
        match = dispatcher.find_match("list streams")
        assert match.command.pattern == "list streams"
        assert match.arguments == {}

    def test_find_match_by_alias(self, dispatcher):
        """Aliases are alternative patterns for the same command."""
        print("\n INPUT: find_match('show streams')")
        match = dispatcher.find_match("show streams")
        print(f" OUTPUT: {match}")
        assert match.command.pattern == "list streams"
        assert match.pattern == "show streams"

    def test_longest_prefix_wins(self, dispatcher):
        match = dispatcher.find_match("describe stream events")
        assert match.command.pattern == "describe stream <stream-id>"
        assert match.arguments == {"stream-id": "events"}

    def test_shorter_prefix_used_as_fallback(self, dispatcher):
        match = dispatcher.find_match("describe dataset people")
        assert match.command.pattern == "describe <entity>"
        assert match.arguments == {"entity": "dataset people"}

    def test_prefix_must_end_on_word_boundary(self, dispatcher):
        with pytest.raises(CommandNotFound):
            dispatcher.find_match("list streamsfoo")

    def test_unknown_command(self, dispatcher):
        print("\n INPUT: find_match('hello world')")
        with pytest.raises(CommandNotFound):
            dispatcher.find_match("hello world")

    def test_recognised_command_with_bad_arguments(self, dispatcher):
        """Mismatch carries the pattern of the closest command."""
        with pytest.raises(PatternMismatch) as exc_info:
            dispatcher.find_match("delete stream")
        print(f"\n OUTPUT: {exc_info.value}")
        assert exc_info.value.pattern == "delete stream <stream-id>"

    def test_match_keeps_raw_input(self, dispatcher):
        match = dispatcher.find_match("  delete stream events ")
        assert match.input == "  delete stream events "
        assert match.arguments["stream-id"] == "events"

    def test_invalid_pattern_rejected_on_construction(self):
        with pytest.raises(InvalidPattern):
            CommandDispatcher([CommandSpec(pattern="create <a><b>")])

    def test_build_help_lines(self, dispatcher):
        """Build help text for all commands."""
        print("\n INPUT: build_help_lines()")
        lines = dispatcher.build_help_lines()
        print(" OUTPUT:\n" + "\n".join(lines))
        assert lines[0] == "Available commands:"
        assert "- `delete stream <stream-id>` – Delete a stream." in lines
        assert any("(aliases: `show streams`)" in line for line in lines)

    def test_completer_offers_literal_prefixes(self, dispatcher):
        completer = dispatcher.completer()
        assert completer.candidates("create") == ["create stream", "create dataset"]
        assert "show streams" in completer.all_candidates()

    def test_specs_property(self, dispatcher, stream_specs):
        assert list(dispatcher.specs) == stream_specs
