"""Shared fixtures for the AI Chef test suite."""

import json

import pytest

import config
from chef import llm


@pytest.fixture(autouse=True)
def provider_config(monkeypatch):
    """Give every test a configured groq provider and fresh client cache."""
    monkeypatch.setattr(config, "AI_PROVIDER", "groq")
    monkeypatch.setattr(config, "GROQ_API_KEY", "test-groq-key")
    monkeypatch.setattr(config, "GEMINI_API_KEY", "test-gemini-key")
    llm.reset_clients()
    yield
    llm.reset_clients()


def make_recipe(title: str, **overrides) -> dict:
    recipe = {
        "title": title,
        "description": f"A simple {title.lower()}",
        "cuisine": "Asian",
        "prep_time": 10,
        "cook_time": 20,
        "servings": 2,
        "difficulty": "easy",
        "ingredients": [{"amount": "1 cup", "item": "rice"}, {"amount": "200g", "item": "chicken"}],
        "instructions": ["Cook the rice", "Fry the chicken", "Combine"],
        "tags": ["quick"],
        "nutritional_info": {"calories": 450, "protein": "30g"},
    }
    recipe.update(overrides)
    return recipe


@pytest.fixture
def three_recipe_reply() -> str:
    recipes = [make_recipe("Chicken Fried Rice"), make_recipe("Chicken Congee"), make_recipe("Rice Bowl")]
    return "Here are some ideas:\n```json\n" + json.dumps(recipes) + "\n```"
