"""
AI Chef Backend Configuration
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Provider selection: "gemini" or "groq" (anything else falls back to groq)
AI_PROVIDER = os.getenv("AI_PROVIDER", "groq")
DEFAULT_PROVIDER = "groq"

# Gemini Configuration (chat-style backend)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite")

# Groq Configuration (OpenAI-compatible completion backend)
GROQ_API_KEY = os.getenv("GROQ_API_KEY", "")
GROQ_BASE_URL = os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1/chat/completions")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")

# LLM Settings
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.7"))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "4096"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TYPE = os.getenv("LOG_TYPE", "text")

# CORS - Frontend URLs
CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    os.getenv("FRONTEND_URL", ""),  # Production frontend URL
]
# Filter empty strings
CORS_ORIGINS = [origin for origin in CORS_ORIGINS if origin]

# Chat shortcuts offered by the frontend
QUICK_ACTIONS = [
    {"label": "Generate Recipe", "prompt": "Generate a recipe for "},
    {"label": "What Can I Cook?", "prompt": "I have these ingredients: "},
    {"label": "Substitute Ingredient", "prompt": "What can I substitute for "},
    {"label": "Nutritional Info", "prompt": "Estimate the nutrition for a recipe with: "},
    {"label": "Meal Plan", "prompt": "Create a weekly meal plan for someone who "},
    {"label": "Enhance Recipe", "prompt": "How can I improve this recipe: "},
]
