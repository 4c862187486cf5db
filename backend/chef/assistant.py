"""
Assistant Pipeline
classify -> system prompt -> one provider call -> extract -> format
"""

from typing import Optional

from chef.intent import detect_action
from chef.prompts import get_system_prompt
from chef.extractor import extract_response
from chef.llm import send_message
from chef.logger import get_logger

logger = get_logger(__name__)


async def process_message(message: str, history: Optional[list[dict]] = None) -> dict:
    """Run one chat message through the assistant.

    Returns the response envelope: {text, recipe, recipes, action}.
    Provider and configuration errors propagate to the caller; extraction
    problems never do.
    """
    action = detect_action(message)
    logger.info(f"Detected action: {action.value}", extra={"action": action.value})

    raw_text = await send_message(get_system_prompt(action), history or [], message)

    extraction = extract_response(action, raw_text)
    if extraction.recipes:
        logger.info(f"Extracted {len(extraction.recipes)} recipes")
    elif extraction.recipe:
        logger.info(f"Extracted recipe: {extraction.recipe.title}")

    return extraction.to_envelope(action)
