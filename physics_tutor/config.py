"""
AP Physics C Study Backend: Configuration
All environment variables and constants. Single source of truth.
No other file reads os.environ directly.
"""

import os
from pathlib import Path

# Load .env file if present
_env_path = Path(__file__).resolve().parent.parent / ".env"
if _env_path.exists():
    with open(_env_path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, _, value = line.partition("=")
                os.environ.setdefault(key.strip(), value.strip())

# ─── Paths ───────────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ─── API Keys ────────────────────────────────────────────────────────────────
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")

# ─── Database ────────────────────────────────────────────────────────────────
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite:///{BASE_DIR / 'physics_tutor.db'}"
)
# Hosted Postgres often hands out "postgres://", which SQLAlchemy rejects
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# Set RESET_DATABASE=true to drop all tables and recreate
RESET_DATABASE = os.getenv("RESET_DATABASE", "false").lower() == "true"

# Run pending catalog seeds when the app starts
SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").lower() == "true"

# ─── JWT / Auth ──────────────────────────────────────────────────────────────
JWT_SECRET = os.getenv("JWT_SECRET", "physics-tutor-dev-secret-change-in-production")
JWT_ALGORITHM = "HS256"
JWT_EXPIRY_HOURS = int(os.getenv("JWT_EXPIRY_HOURS", "24"))
MAX_LOGIN_ATTEMPTS = 5
LOGIN_LOCKOUT_MINUTES = 15
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# Accounts registered with these emails get the admin role
ADMIN_EMAILS = {
    e.strip().lower() for e in os.getenv("ADMIN_EMAILS", "").split(",") if e.strip()
}

# ─── LLM Settings ────────────────────────────────────────────────────────────
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai")
# Options: openai
LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4.1-mini")
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "2000"))
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.4"))

# Short structured calls (search-query extraction, hints)
LLM_SHORT_MAX_TOKENS = int(os.getenv("LLM_SHORT_MAX_TOKENS", "300"))

# ─── Resource Catalog ────────────────────────────────────────────────────────
CATALOG_MAX_DEPTH = int(os.getenv("CATALOG_MAX_DEPTH", "12"))
CATALOG_SEARCH_LIMIT = int(os.getenv("CATALOG_SEARCH_LIMIT", "50"))

# A category renders as a grid when more than this share of its children are simulations
SIMULATION_GRID_THRESHOLD = 0.5

# ─── Tutor ───────────────────────────────────────────────────────────────────
TUTOR_HISTORY_LIMIT = int(os.getenv("TUTOR_HISTORY_LIMIT", "20"))
TUTOR_MAX_SUGGESTIONS = int(os.getenv("TUTOR_MAX_SUGGESTIONS", "3"))

# ─── Analytics ───────────────────────────────────────────────────────────────
MASTERY_DECAY = 0.7  # new = old * decay + result * (1 - decay)
DIFFICULTIES = ("easy", "medium", "hard")

# ─── CORS ────────────────────────────────────────────────────────────────────
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

# ─── Logging ─────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

APP_VERSION = "1.0.0"
PORT = int(os.getenv("PORT", "8000"))
