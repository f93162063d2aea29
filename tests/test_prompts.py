"""Tests for the minds system prompt."""

import pytest

from conftest import MockProvider, mind_md
from minds_mcp.minds import MindInitializationError, init_mind_registry
from minds_mcp.prompts import build_minds_system_message, with_minds


class TestBuildMindsSystemMessage:
    """Test build_minds_system_message."""

    def test_embeds_available_minds(self):
        message = build_minds_system_message("Available minds:\n- `a`: b")

        assert message.startswith("## Minds System")
        assert "Available minds:\n- `a`: b" in message
        assert "load-mind" in message
        assert "read-mind-resource" in message
        assert "execute-mind-script" in message


@pytest.mark.asyncio
class TestWithMinds:
    """Test with_minds."""

    async def test_after_by_default(self):
        await init_mind_registry([MockProvider("p", {"a": mind_md("a", "Does a")})])

        messages = with_minds("You are helpful.")

        assert len(messages) == 2
        assert messages[0] == "You are helpful."
        assert "- `a`: Does a" in messages[1]

    async def test_before(self):
        await init_mind_registry([MockProvider("p", {"a": mind_md("a")})])

        messages = with_minds(["One.", "Two."], position="before")

        assert messages[0].startswith("## Minds System")
        assert messages[1:] == ["One.", "Two."]

    async def test_no_instructions(self):
        await init_mind_registry([])

        messages = with_minds()

        assert len(messages) == 1
        assert "No minds installed." in messages[0]

    async def test_invalid_position(self):
        await init_mind_registry([])
        with pytest.raises(ValueError):
            with_minds("x", position="middle")

    async def test_requires_registry(self):
        with pytest.raises(MindInitializationError):
            with_minds("x")
