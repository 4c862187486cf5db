"""
Extracted Data Models
Typed views of the JSON payloads the model is asked to return.

Every decoder is fallible: from_dict() returns None when the payload does not
have the expected shape instead of raising, so callers can fall back to the
raw completion text.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


def is_present(value: Any) -> bool:
    """Loose presence test used for model output.

    Empty lists and dicts count as present, empty strings, zero and null do not.
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def as_text(value: Any) -> str:
    """Render a scalar from model JSON the way it reads in chat"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class Ingredient:
    """One ingredient line, e.g. {"amount": "1 cup", "item": "flour"}"""
    item: str
    amount: str = ""

    def to_dict(self) -> dict:
        return {"amount": self.amount, "item": self.item}

    def display(self) -> str:
        return " ".join(part for part in (self.amount, self.item) if part)

    @classmethod
    def from_value(cls, value: Any) -> "Ingredient":
        if isinstance(value, dict):
            return cls(
                item=as_text(value.get("item", value.get("name", ""))),
                amount=as_text(value.get("amount", "")),
            )
        return cls(item=as_text(value))


RECIPE_FIELDS = (
    "title", "description", "cuisine", "prep_time", "cook_time", "servings",
    "difficulty", "ingredients", "instructions", "tags", "nutritional_info",
)


@dataclass
class ExtractedRecipe:
    """A recipe parsed out of a model reply"""
    title: str
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    description: Optional[str] = None
    cuisine: Optional[str] = None
    prep_time: Any = None
    cook_time: Any = None
    servings: Any = None
    difficulty: Optional[str] = None
    tags: Optional[list[str]] = None
    nutritional_info: Optional[dict[str, Any]] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def is_recipe_like(data: Any) -> bool:
        """A title plus at least one of ingredients / instructions"""
        if not isinstance(data, dict):
            return False
        return is_present(data.get("title")) and (
            is_present(data.get("ingredients")) or is_present(data.get("instructions"))
        )

    @classmethod
    def from_dict(cls, data: Any) -> Optional["ExtractedRecipe"]:
        if not cls.is_recipe_like(data):
            return None

        raw_ingredients = data.get("ingredients")
        if isinstance(raw_ingredients, list):
            ingredients = [Ingredient.from_value(ing) for ing in raw_ingredients]
        elif is_present(raw_ingredients):
            ingredients = [Ingredient.from_value(raw_ingredients)]
        else:
            ingredients = []

        raw_instructions = data.get("instructions")
        if isinstance(raw_instructions, list):
            instructions = [as_text(step) for step in raw_instructions]
        elif is_present(raw_instructions):
            instructions = [as_text(raw_instructions)]
        else:
            instructions = []

        tags = data.get("tags")
        nutritional_info = data.get("nutritional_info")

        return cls(
            title=as_text(data["title"]),
            ingredients=ingredients,
            instructions=instructions,
            description=data.get("description"),
            cuisine=data.get("cuisine"),
            prep_time=data.get("prep_time"),
            cook_time=data.get("cook_time"),
            servings=data.get("servings"),
            difficulty=data.get("difficulty"),
            tags=[as_text(t) for t in tags] if isinstance(tags, list) else None,
            nutritional_info=nutritional_info if isinstance(nutritional_info, dict) else None,
            extra={k: v for k, v in data.items() if k not in RECIPE_FIELDS},
        )

    def to_dict(self) -> dict:
        data = {
            "title": self.title,
            "description": self.description,
            "cuisine": self.cuisine,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "servings": self.servings,
            "difficulty": self.difficulty,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "tags": self.tags,
            "nutritional_info": self.nutritional_info,
        }
        data.update(self.extra)
        return data

    def to_record(self) -> dict:
        """Row inserted into the recipes table when a user saves an AI recipe"""
        return {
            "title": self.title,
            "description": self.description,
            "cuisine": self.cuisine,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "servings": self.servings,
            "difficulty": self.difficulty,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "tags": self.tags or [],
            "ai_generated": True,
            "nutritional_info": self.nutritional_info or None,
            "status": "to_try",
        }


@dataclass
class Substitute:
    ingredient: str = ""
    amount: str = ""
    notes: str = ""


@dataclass
class SubstitutionPayload:
    """Reply shape for substitute_ingredient"""
    substitutes: list[Substitute]
    original: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Optional["SubstitutionPayload"]:
        if not isinstance(data, dict) or not is_present(data.get("substitutes")):
            return None
        raw = data["substitutes"]
        if not isinstance(raw, list):
            return None

        substitutes = []
        for entry in raw:
            if isinstance(entry, dict):
                substitutes.append(Substitute(
                    ingredient=as_text(entry.get("ingredient")),
                    amount=as_text(entry.get("amount")),
                    notes=as_text(entry.get("notes")),
                ))
            else:
                substitutes.append(Substitute(ingredient=as_text(entry)))

        return cls(substitutes=substitutes, original=as_text(data.get("original")))


@dataclass
class NutritionPayload:
    """Reply shape for nutritional_info"""
    per_serving: dict[str, Any]
    notes: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Optional["NutritionPayload"]:
        if not isinstance(data, dict):
            return None
        per_serving = data.get("per_serving")
        if not isinstance(per_serving, dict):
            return None
        return cls(per_serving=per_serving, notes=as_text(data.get("notes")))


MEALS = ("breakfast", "lunch", "dinner")


@dataclass
class MealPlanPayload:
    """Reply shape for meal_plan"""
    plan: dict[str, dict[str, str]]
    shopping_list: Optional[list[str]] = None
    notes: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Optional["MealPlanPayload"]:
        if not isinstance(data, dict):
            return None
        raw_plan = data.get("plan")
        if not isinstance(raw_plan, dict):
            return None

        plan = {}
        for day, meals in raw_plan.items():
            if not isinstance(meals, dict):
                continue
            plan[str(day)] = {
                meal: as_text(meals[meal]) for meal in MEALS if is_present(meals.get(meal))
            }

        shopping_list = data.get("shopping_list")
        if is_present(shopping_list) and not isinstance(shopping_list, list):
            return None

        return cls(
            plan=plan,
            shopping_list=[as_text(i) for i in shopping_list] if isinstance(shopping_list, list) else None,
            notes=as_text(data.get("notes")),
        )


@dataclass
class Variation:
    name: str = ""
    changes: str = ""


@dataclass
class EnhancementPayload:
    """Reply shape for enhance_recipe; each section is optional"""
    suggestions: Optional[list[str]] = None
    variations: Optional[list[Variation]] = None
    tips: Optional[list[str]] = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional["EnhancementPayload"]:
        if not isinstance(data, dict):
            return None
        keys = ("suggestions", "variations", "tips")
        if not any(is_present(data.get(k)) for k in keys):
            return None
        # A present section that is not a list means the shape is wrong
        for k in keys:
            if is_present(data.get(k)) and not isinstance(data[k], list):
                return None

        suggestions = data.get("suggestions")
        tips = data.get("tips")
        variations = data.get("variations")

        return cls(
            suggestions=[as_text(s) for s in suggestions] if isinstance(suggestions, list) else None,
            variations=[
                Variation(name=as_text(v.get("name")), changes=as_text(v.get("changes")))
                if isinstance(v, dict) else Variation(name=as_text(v))
                for v in variations
            ] if isinstance(variations, list) else None,
            tips=[as_text(t) for t in tips] if isinstance(tips, list) else None,
        )
