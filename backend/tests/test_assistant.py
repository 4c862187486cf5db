"""Tests for the end-to-end assistant pipeline with a mocked provider."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from chef.assistant import process_message
from chef.llm import RateLimitError
from chef.prompts import get_system_prompt
from chef.intent import Action
from tests.conftest import make_recipe


@pytest.mark.asyncio
async def test_suggest_from_ingredients_scenario(three_recipe_reply):
    with patch("chef.assistant.send_message", new_callable=AsyncMock) as mock_send:
        mock_send.return_value = three_recipe_reply

        envelope = await process_message("I have chicken and rice")

    assert envelope["action"] == "suggest_from_ingredients"
    assert len(envelope["recipes"]) == 3
    assert envelope["recipe"] is None
    assert envelope["text"].startswith("I found **3 recipes**")


@pytest.mark.asyncio
async def test_prompt_and_history_forwarded():
    history = [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}]
    with patch("chef.assistant.send_message", new_callable=AsyncMock) as mock_send:
        mock_send.return_value = "Sure."

        await process_message("How many calories in this?", history)

    mock_send.assert_awaited_once_with(
        get_system_prompt(Action.NUTRITIONAL_INFO), history, "How many calories in this?"
    )


@pytest.mark.asyncio
async def test_history_defaults_to_empty():
    with patch("chef.assistant.send_message", new_callable=AsyncMock) as mock_send:
        mock_send.return_value = "Sure."
        await process_message("hello")
    assert mock_send.call_args.args[1] == []


@pytest.mark.asyncio
async def test_general_chat_embedded_recipe():
    reply = "Try this!\n```json\n" + json.dumps(make_recipe("Omelette")) + "\n```"
    with patch("chef.assistant.send_message", new_callable=AsyncMock) as mock_send:
        mock_send.return_value = reply
        envelope = await process_message("Tell me about omelettes")

    assert envelope["action"] == "general_chat"
    assert envelope["text"] == reply
    assert envelope["recipe"]["title"] == "Omelette"
    assert envelope["recipes"] is None


@pytest.mark.asyncio
async def test_unparseable_reply_is_shown_raw():
    with patch("chef.assistant.send_message", new_callable=AsyncMock) as mock_send:
        mock_send.return_value = "I'd suggest roasting it {slowly}."
        envelope = await process_message("Generate a roast")

    assert envelope == {
        "text": "I'd suggest roasting it {slowly}.",
        "recipe": None,
        "recipes": None,
        "action": "generate_recipe",
    }


@pytest.mark.asyncio
async def test_provider_errors_propagate():
    with patch("chef.assistant.send_message", new_callable=AsyncMock) as mock_send:
        mock_send.side_effect = RateLimitError("API error (429): slow down")
        with pytest.raises(RateLimitError):
            await process_message("hello")
