"""
Intent Detection
Maps a chat message to the action that selects the prompt and extractor
"""

from enum import Enum


class Action(str, Enum):
    """What the user is asking the assistant to do"""
    GENERATE_RECIPE = "generate_recipe"
    SUGGEST_FROM_INGREDIENTS = "suggest_from_ingredients"
    SUBSTITUTE_INGREDIENT = "substitute_ingredient"
    NUTRITIONAL_INFO = "nutritional_info"
    MEAL_PLAN = "meal_plan"
    ENHANCE_RECIPE = "enhance_recipe"
    GENERAL_CHAT = "general_chat"


# Checked in order, first match wins
ACTION_PATTERNS: list[tuple[Action, tuple[str, ...]]] = [
    (Action.GENERATE_RECIPE, ("generate", "create a recipe", "recipe for")),
    (Action.SUGGEST_FROM_INGREDIENTS, ("i have", "what can i cook", "ingredients:", "what can i make")),
    (Action.SUBSTITUTE_INGREDIENT, ("substitute", "replacement", "instead of", "don't have")),
    (Action.NUTRITIONAL_INFO, ("nutrition", "calories", "nutritional")),
    (Action.MEAL_PLAN, ("meal plan", "weekly plan", "plan my meals")),
    (Action.ENHANCE_RECIPE, ("improve", "enhance", "better", "variation")),
]


def detect_action(message: str) -> Action:
    """Classify a user message by keyword"""
    text_lower = message.lower()

    for action, patterns in ACTION_PATTERNS:
        for pattern in patterns:
            if pattern in text_lower:
                return action

    return Action.GENERAL_CHAT
