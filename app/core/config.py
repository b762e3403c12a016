# /app/core/config.py

import os
from dotenv import load_dotenv

# --- CONFIGURATION ---
# Every setting is read once from the environment (or a local .env file).
load_dotenv()

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./bios.db")

# --- LLM Provider Selection ---
# "gemini" or "openai"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "gemini").lower()

GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
GEMINI_STANDARD_MODEL = os.getenv("GEMINI_STANDARD_MODEL", "gemini-2.5-flash")
GEMINI_PREMIUM_MODEL = os.getenv("GEMINI_PREMIUM_MODEL", "gemini-2.5-pro")

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_STANDARD_MODEL = os.getenv("OPENAI_STANDARD_MODEL", "gpt-4o-mini")
OPENAI_PREMIUM_MODEL = os.getenv("OPENAI_PREMIUM_MODEL", "gpt-4o")

LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.8"))

# --- LLM Call Policy ---
# One attempt plus LLM_MAX_RETRIES retries, each bounded by LLM_TIMEOUT_SECONDS.
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))
LLM_MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "1"))
LLM_RETRY_BACKOFF_SECONDS = float(os.getenv("LLM_RETRY_BACKOFF_SECONDS", "1.0"))

# --- Authentication ---
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# --- HTTP ---
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
