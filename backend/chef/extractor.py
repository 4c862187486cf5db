"""
Response Extraction
Pulls structured recipe / nutrition / meal-plan data out of a model reply.

The model is asked for JSON but often wraps it in prose or code fences, or
ignores the instruction entirely. Nothing here raises on bad output: a reply
that cannot be decoded is shown to the user as-is.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

from chef.intent import Action
from chef.logger import get_logger
from chef.models import (
    ExtractedRecipe,
    SubstitutionPayload,
    NutritionPayload,
    MealPlanPayload,
    EnhancementPayload,
)
from chef.formatter import (
    format_recipe,
    format_recipe_list,
    format_substitutions,
    format_nutrition,
    format_meal_plan,
    format_enhancements,
)

logger = get_logger(__name__)

# Greedy: first opening bracket to the last closing one
OBJECT_SPAN = re.compile(r"\{.*\}", re.DOTALL)
ARRAY_SPAN = re.compile(r"\[.*\]", re.DOTALL)


@dataclass
class Extraction:
    """Result of parsing one completion"""
    display_text: str
    recipe: Optional[ExtractedRecipe] = None
    recipes: Optional[list[ExtractedRecipe]] = None

    def to_envelope(self, action: Action) -> dict:
        return {
            "text": self.display_text,
            "recipe": self.recipe.to_dict() if self.recipe else None,
            "recipes": [r.to_dict() for r in self.recipes] if self.recipes else None,
            "action": action.value,
        }


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"Non-standard JSON constant: {name}")


def _load_span(pattern: re.Pattern, text: str) -> Any:
    match = pattern.search(text)
    if not match:
        return None
    try:
        return json.loads(match.group(0), parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Could not decode JSON span: {e}")
        return None


def find_json_object(text: str) -> Optional[dict]:
    """Decode the first greedy {...} span, or None"""
    data = _load_span(OBJECT_SPAN, text)
    return data if isinstance(data, dict) else None


def find_json_array(text: str) -> Optional[list]:
    """Decode the first greedy [...] span, or None"""
    data = _load_span(ARRAY_SPAN, text)
    return data if isinstance(data, list) else None


def extract_recipe(text: str) -> Optional[ExtractedRecipe]:
    return ExtractedRecipe.from_dict(find_json_object(text))


def extract_recipe_list(text: str) -> Optional[list[ExtractedRecipe]]:
    """Recipes from a JSON array whose first element is recipe-shaped"""
    items = find_json_array(text)
    if not items or not ExtractedRecipe.is_recipe_like(items[0]):
        return None
    recipes = [ExtractedRecipe.from_dict(item) for item in items]
    return [r for r in recipes if r is not None]


# Actions whose reply is a single JSON object with an action-specific key
PAYLOAD_HANDLERS = {
    Action.SUBSTITUTE_INGREDIENT: (SubstitutionPayload, format_substitutions),
    Action.NUTRITIONAL_INFO: (NutritionPayload, format_nutrition),
    Action.MEAL_PLAN: (MealPlanPayload, format_meal_plan),
    Action.ENHANCE_RECIPE: (EnhancementPayload, format_enhancements),
}


def extract_response(action: Action, raw_text: str) -> Extraction:
    """Parse a completion according to the action it was requested for.

    Only the extractor designated for the action runs first. When that yields
    no recipe data, one more generic recipe-object pass is made so a recipe
    embedded in any reply can still be saved; that pass never fills `recipes`
    and never changes the display text.
    """
    result = Extraction(display_text=raw_text)

    if action == Action.GENERATE_RECIPE:
        recipe = extract_recipe(raw_text)
        if recipe:
            result.recipe = recipe
            result.display_text = format_recipe(recipe)

    elif action == Action.SUGGEST_FROM_INGREDIENTS:
        recipes = extract_recipe_list(raw_text)
        if recipes:
            result.recipes = recipes
            result.display_text = format_recipe_list(recipes)

    elif action in PAYLOAD_HANDLERS:
        payload_type, render = PAYLOAD_HANDLERS[action]
        payload = payload_type.from_dict(find_json_object(raw_text))
        if payload is not None:
            result.display_text = render(payload)
        else:
            logger.debug(f"No {payload_type.__name__} in reply for {action.value}")

    if result.recipe is None and result.recipes is None:
        result.recipe = extract_recipe(raw_text)
        if result.recipe:
            logger.debug(f"Found embedded recipe '{result.recipe.title}' in {action.value} reply")

    return result
