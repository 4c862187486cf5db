"""
LLM Integration
Sends one chat turn to the configured completion backend:
- gemini: google-genai chat session (no system role, so the prompt is shimmed
  into the history as a user/model exchange)
- groq: OpenAI-compatible chat/completions endpoint over httpx
"""

import threading
from typing import Callable

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

import config
from chef.logger import get_logger

logger = get_logger(__name__)


class LLMError(Exception):
    """Base exception for LLM-related errors"""
    pass


class ConfigurationError(LLMError):
    """Raised when the selected provider has no credential"""
    pass


class APIError(LLMError):
    """Raised for transport, auth and other provider failures"""
    pass


class RateLimitError(APIError):
    """Raised when the provider reports a rate limit or exhausted quota"""
    pass


# Neither backend gives us a structured rate-limit signal we rely on,
# so failures are classified by their message text.
RATE_LIMIT_SIGNATURES = ("429", "quota", "Too Many Requests")


def is_rate_limited(error_text: str) -> bool:
    return any(signature in error_text for signature in RATE_LIMIT_SIGNATURES)


def provider_error(message: str) -> APIError:
    """Build the right APIError subclass for a provider failure message"""
    if is_rate_limited(message):
        return RateLimitError(message)
    return APIError(message)


PROVIDERS = ("gemini", "groq")

GEMINI_ACKNOWLEDGEMENT = "Understood. I'll follow these instructions."


def get_provider() -> str:
    """Selected backend name, falling back to the default for unknown values"""
    provider = (config.AI_PROVIDER or config.DEFAULT_PROVIDER).strip().lower()
    if provider in PROVIDERS:
        return provider
    return config.DEFAULT_PROVIDER


def get_api_key(provider: str) -> str:
    if provider == "gemini":
        return config.GEMINI_API_KEY
    return config.GROQ_API_KEY


def is_configured() -> bool:
    """Whether the selected provider has a credential"""
    return bool(get_api_key(get_provider()))


# One client per backend for the life of the process
_clients: dict[str, object] = {}
_clients_lock = threading.Lock()


def _get_client(provider: str, factory: Callable[[], object]):
    client = _clients.get(provider)
    if client is None:
        with _clients_lock:
            client = _clients.get(provider)
            if client is None:
                client = factory()
                _clients[provider] = client
                logger.info(f"Created {provider} client")
    return client


def reset_clients() -> None:
    """Forget cached clients so the next call rebuilds them"""
    with _clients_lock:
        _clients.clear()


def _build_gemini_client() -> genai.Client:
    if not config.GEMINI_API_KEY:
        raise ConfigurationError("GEMINI_API_KEY is not set")
    return genai.Client(api_key=config.GEMINI_API_KEY)


def _build_groq_client() -> httpx.AsyncClient:
    if not config.GROQ_API_KEY:
        raise ConfigurationError("GROQ_API_KEY is not set")
    # No client-side timeout: the request lifecycle bounds the call
    return httpx.AsyncClient(
        headers={
            "Authorization": f"Bearer {config.GROQ_API_KEY}",
            "Content-Type": "application/json",
        },
        timeout=None,
    )


def build_gemini_history(system_prompt: str, history: list[dict]) -> list[types.Content]:
    """Chat history with the system prompt shimmed in as the first exchange"""
    contents = [
        types.Content(role="user", parts=[types.Part(text=f"System instructions: {system_prompt}")]),
        types.Content(role="model", parts=[types.Part(text=GEMINI_ACKNOWLEDGEMENT)]),
    ]
    for turn in history:
        role = "user" if turn.get("role") == "user" else "model"
        contents.append(types.Content(role=role, parts=[types.Part(text=turn.get("content", ""))]))
    return contents


def build_groq_messages(system_prompt: str, history: list[dict], message: str) -> list[dict]:
    """System prompt, then history role-for-role, then the new user message"""
    messages = [{"role": "system", "content": system_prompt}]
    for turn in history:
        role = "user" if turn.get("role") == "user" else "assistant"
        messages.append({"role": role, "content": turn.get("content", "")})
    messages.append({"role": "user", "content": message})
    return messages


async def send_via_gemini(system_prompt: str, history: list[dict], message: str) -> str:
    client = _get_client("gemini", _build_gemini_client)

    chat = client.aio.chats.create(
        model=config.GEMINI_MODEL,
        history=build_gemini_history(system_prompt, history),
    )

    try:
        response = await chat.send_message(message)
    except genai_errors.APIError as e:
        raise provider_error(f"Gemini API error: {e}") from e

    return response.text or ""


async def send_via_groq(system_prompt: str, history: list[dict], message: str) -> str:
    client = _get_client("groq", _build_groq_client)

    payload = {
        "model": config.GROQ_MODEL,
        "messages": build_groq_messages(system_prompt, history, message),
        "temperature": config.LLM_TEMPERATURE,
        "max_tokens": config.LLM_MAX_TOKENS,
    }

    try:
        response = await client.post(config.GROQ_BASE_URL, json=payload)
    except httpx.RequestError as e:
        raise APIError(f"Network error: {e}") from e

    if response.status_code != 200:
        error_detail = response.text
        try:
            error = response.json().get("error")
            if isinstance(error, dict):
                error_detail = error.get("message", error_detail)
        except (ValueError, AttributeError):
            pass
        raise provider_error(f"API error ({response.status_code}): {error_detail}")

    try:
        data = response.json()
    except ValueError as e:
        raise APIError(f"Invalid API response: {e}") from e

    choices = data.get("choices") if isinstance(data, dict) else None
    if not choices:
        return ""
    return (choices[0].get("message") or {}).get("content") or ""


async def send_message(system_prompt: str, history: list[dict], message: str) -> str:
    """Send a message with history to the configured backend and return its reply text.

    Raises:
        ConfigurationError: the selected backend has no credential.
        RateLimitError: the backend reported a rate limit or quota error.
        APIError: any other backend failure.
    """
    provider = get_provider()
    logger.info(f"Calling {provider} with {len(history)} history turns")

    if provider == "gemini":
        return await send_via_gemini(system_prompt, history, message)
    return await send_via_groq(system_prompt, history, message)
