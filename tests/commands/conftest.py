"""Shared fixtures for command lookup tests."""

from __future__ import annotations

import pytest

from src.core.commands.dispatcher import CommandDispatcher
from src.core.commands.registry import CommandSpec


@pytest.fixture
def stream_specs():
    """A small command set resembling a stream-management client."""
    return [
        CommandSpec(
            pattern="create stream <stream-id> [ttl <ttl-in-seconds>] [desc <description>]",
            description="Create a stream.",
        ),
        CommandSpec(
            pattern="delete stream <stream-id>",
            description="Delete a stream.",
        ),
        CommandSpec(
            pattern="list streams",
            description="List all streams.",
            aliases=("show streams",),
        ),
        CommandSpec(
            pattern="describe <entity>",
            description="Describe any entity.",
        ),
        CommandSpec(
            pattern="describe stream <stream-id>",
            description="Describe a stream.",
        ),
        CommandSpec(
            pattern="create dataset <name>",
            description="Create a dataset.",
        ),
    ]


@pytest.fixture
def dispatcher(stream_specs):
    return CommandDispatcher(stream_specs)
