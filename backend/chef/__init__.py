"""
AI Chef Core Module
Intent routing, prompting and reply extraction for the recipe chat assistant
"""

from chef.intent import Action, detect_action
from chef.prompts import get_system_prompt
from chef.extractor import Extraction, extract_response
from chef.llm import send_message, LLMError, ConfigurationError, APIError, RateLimitError
from chef.assistant import process_message

__all__ = [
    "Action",
    "detect_action",
    "get_system_prompt",
    "Extraction",
    "extract_response",
    "send_message",
    "LLMError",
    "ConfigurationError",
    "APIError",
    "RateLimitError",
    "process_message",
]
