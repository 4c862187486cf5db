"""Tests for the system prompt table."""

from chef.intent import Action
from chef.prompts import get_system_prompt


def test_every_action_has_a_prompt():
    for action in Action:
        assert get_system_prompt(action).strip()


def test_recipe_prompts_name_wire_keys():
    for action in (Action.GENERATE_RECIPE, Action.SUGGEST_FROM_INGREDIENTS, Action.GENERAL_CHAT):
        prompt = get_system_prompt(action)
        for key in ('"title"', '"prep_time"', '"cook_time"', '"ingredients"', '"instructions"', '"nutritional_info"'):
            assert key in prompt


def test_action_specific_keys():
    assert '"substitutes"' in get_system_prompt(Action.SUBSTITUTE_INGREDIENT)
    assert '"per_serving"' in get_system_prompt(Action.NUTRITIONAL_INFO)
    assert '"plan"' in get_system_prompt(Action.MEAL_PLAN)
    assert '"shopping_list"' in get_system_prompt(Action.MEAL_PLAN)
    enhance = get_system_prompt(Action.ENHANCE_RECIPE)
    assert '"suggestions"' in enhance and '"variations"' in enhance and '"tips"' in enhance


def test_suggest_prompt_asks_for_array():
    prompt = get_system_prompt(Action.SUGGEST_FROM_INGREDIENTS)
    assert "Return ONLY valid JSON as an array" in prompt
    assert '"missing_ingredients"' in prompt


def test_general_chat_asks_for_fenced_recipe_block():
    prompt = get_system_prompt(Action.GENERAL_CHAT)
    assert 'called "AI Chef"' in prompt
    assert "```json" in prompt
