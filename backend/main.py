"""
AI Chef Backend - FastAPI Application
Main entry point for the recipe chat assistant API
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Optional

from config import CORS_ORIGINS, QUICK_ACTIONS
from chef import llm
from chef.assistant import process_message
from chef.intent import detect_action
from chef.llm import LLMError, ConfigurationError, RateLimitError, is_rate_limited
from chef.logger import get_logger
from chef.models import ExtractedRecipe

logger = get_logger("ai_chef")


# Initialize FastAPI app
app = FastAPI(
    title="AI Chef API",
    description="Recipe chat assistant backend",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response Models
class ConversationTurn(BaseModel):
    role: str
    content: str


class ChatRequest(BaseModel):
    message: Optional[str] = None
    history: list[ConversationTurn] = []


class ChatResponse(BaseModel):
    text: str
    recipe: Optional[dict] = None
    recipes: Optional[list[dict]] = None
    action: str


class HealthResponse(BaseModel):
    status: str
    provider: str
    configured: bool


def error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    content = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


NOT_CONFIGURED = "AI service not configured"
RATE_LIMITED = "AI rate limit reached. Please wait a moment and try again."
FAILED = "Failed to process AI request"


# API Endpoints
@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": "AI Chef API is running", "version": "1.0.0"}


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    configured = llm.is_configured()
    return HealthResponse(
        status="healthy" if configured else "not_configured",
        provider=llm.get_provider(),
        configured=configured,
    )


@app.get("/quick-actions")
async def quick_actions():
    """Chat shortcuts and the action each one routes to"""
    return [
        {**shortcut, "action": detect_action(shortcut["prompt"]).value}
        for shortcut in QUICK_ACTIONS
    ]


@app.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest):
    """
    Main chat endpoint.
    Classifies the message, asks the model with the matching prompt and
    returns the reply with any recipe data found in it.
    """
    if not request.message:
        return error_response(400, "Message is required")

    if not llm.is_configured():
        return error_response(500, NOT_CONFIGURED)

    history = [turn.model_dump() for turn in request.history]

    try:
        return await process_message(request.message, history)

    except ConfigurationError as e:
        logger.error(f"AI configuration error: {e}")
        return error_response(500, NOT_CONFIGURED)

    except RateLimitError as e:
        logger.warning(f"AI rate limited: {e}")
        return error_response(429, RATE_LIMITED, str(e))

    except LLMError as e:
        logger.error(f"AI API error: {e}")
        return error_response(500, FAILED, str(e))

    except Exception as e:
        logger.exception(f"Chat error: {e}")
        if is_rate_limited(str(e)):
            return error_response(429, RATE_LIMITED, str(e))
        return error_response(500, FAILED, str(e))


@app.post("/recipes/record")
async def recipe_record(recipe: dict):
    """Turn a recipe from a chat reply into the row the client saves"""
    extracted = ExtractedRecipe.from_dict(recipe)
    if extracted is None:
        return error_response(422, "Recipe needs a title and ingredients or instructions")
    return extracted.to_record()


# Startup event
@app.on_event("startup")
async def startup_event():
    """Log the configured provider on startup"""
    logger.info(f"AI Chef backend started - provider: {llm.get_provider()}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
