"""
Display Formatting
Markdown renderers for the structured payloads pulled out of model replies.
All functions are pure and skip any section whose source data is missing.
"""

from chef.models import (
    ExtractedRecipe,
    SubstitutionPayload,
    NutritionPayload,
    MealPlanPayload,
    EnhancementPayload,
    as_text,
    is_present,
)


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _time_summary(recipe: ExtractedRecipe) -> str:
    """Condensed prep+cook time, e.g. 15+30min"""
    prep = as_text(recipe.prep_time)
    cook = as_text(recipe.cook_time)
    if prep and cook:
        return f"{prep}+{cook}min"
    if prep or cook:
        return f"{prep or cook}min"
    return ""


def format_recipe(recipe: ExtractedRecipe) -> str:
    """Full recipe card"""
    blocks = [f"Here's your recipe for **{recipe.title}**!"]

    if recipe.description:
        blocks.append(as_text(recipe.description))

    meta_lines = []
    style = []
    if recipe.cuisine:
        style.append(f"**Cuisine:** {as_text(recipe.cuisine)}")
    if recipe.difficulty:
        style.append(f"**Difficulty:** {as_text(recipe.difficulty)}")
    if style:
        meta_lines.append(" | ".join(style))

    timing = []
    if is_present(recipe.prep_time):
        timing.append(f"**Prep:** {as_text(recipe.prep_time)}min")
    if is_present(recipe.cook_time):
        timing.append(f"**Cook:** {as_text(recipe.cook_time)}min")
    if is_present(recipe.servings):
        timing.append(f"**Servings:** {as_text(recipe.servings)}")
    if timing:
        meta_lines.append(" | ".join(timing))

    if meta_lines:
        blocks.append("\n".join(meta_lines))

    if recipe.ingredients:
        blocks.append(
            "**Ingredients:**\n" + _bullets([ing.display() for ing in recipe.ingredients])
        )

    if recipe.instructions:
        steps = "\n".join(f"{i + 1}. {step}" for i, step in enumerate(recipe.instructions))
        blocks.append("**Instructions:**\n" + steps)

    return "\n\n".join(blocks)


def format_recipe_list(recipes: list[ExtractedRecipe]) -> str:
    """Short cards for several suggested recipes"""
    text = f"I found **{len(recipes)} recipes** you can make!\n\n"

    for idx, recipe in enumerate(recipes):
        text += f"### {idx + 1}. {recipe.title}\n"
        if recipe.description:
            text += f"{as_text(recipe.description)}\n"

        meta = []
        if recipe.cuisine:
            meta.append(f"**{as_text(recipe.cuisine)}**")
        if recipe.difficulty:
            meta.append(f"**{as_text(recipe.difficulty)}**")
        timing = _time_summary(recipe)
        if timing:
            meta.append(timing)
        if meta:
            text += " | ".join(meta) + "\n"
        text += "\n"

    text += "Click **Save** on any recipe to add it to your collection."
    return text


def format_substitutions(payload: SubstitutionPayload) -> str:
    if payload.original:
        text = f"**Substitutes for {payload.original}:**\n\n"
    else:
        text = "**Substitutes:**\n\n"

    for sub in payload.substitutes:
        line = f"- **{sub.ingredient}**"
        if sub.amount:
            line += f" ({sub.amount})"
        text += line + "\n"
        if sub.notes:
            text += f"  {sub.notes}\n"
        text += "\n"

    return text


def format_nutrition(payload: NutritionPayload) -> str:
    text = "**Nutritional Info (per serving):**\n\n"
    text += "| Nutrient | Amount |\n|----------|--------|\n"
    for key, value in payload.per_serving.items():
        name = str(key)
        text += f"| {name[:1].upper() + name[1:]} | {as_text(value)} |\n"
    if payload.notes:
        text += f"\n{payload.notes}"
    return text


def format_meal_plan(payload: MealPlanPayload) -> str:
    text = "**Your Weekly Meal Plan:**\n\n"

    for day, meals in payload.plan.items():
        text += f"**{day}:**\n"
        for meal in ("breakfast", "lunch", "dinner"):
            if meal in meals:
                text += f"- {meal.capitalize()}: {meals[meal]}\n"
        text += "\n"

    if payload.shopping_list:
        text += f"**Shopping List:**\n{_bullets(payload.shopping_list)}\n\n"

    if payload.notes:
        text += f"**Tips:** {payload.notes}"

    return text


def format_enhancements(payload: EnhancementPayload) -> str:
    text = "**Recipe Enhancement Suggestions:**\n\n"

    if payload.suggestions is not None:
        text += f"**Suggestions:**\n{_bullets(payload.suggestions)}\n\n"

    if payload.variations is not None:
        text += "**Variations:**\n"
        for variation in payload.variations:
            if variation.changes:
                text += f"- **{variation.name}:** {variation.changes}\n"
            else:
                text += f"- **{variation.name}**\n"
        text += "\n"

    if payload.tips is not None:
        text += f"**Pro Tips:**\n{_bullets(payload.tips)}"

    return text
