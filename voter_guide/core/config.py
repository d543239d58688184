import os
import secrets
import logging
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

# Web Configuration
ORIGIN = os.getenv("ORIGIN", "http://localhost:8000")

# Security Configuration
SESSION_SECRET = os.getenv("SESSION_SECRET", secrets.token_hex(32))

# Decision Tree Source
# A URL wins over a file; with neither set the built-in questionnaire is used.
DECISION_TREE_URL = os.getenv("DECISION_TREE_URL") or None
DECISION_TREE_FILE = os.getenv("DECISION_TREE_FILE") or None
TREE_FETCH_TIMEOUT = float(os.getenv("TREE_FETCH_TIMEOUT", "10"))

# Questionnaire Configuration
INTRO_PROMPT = os.getenv("INTRO_PROMPT", "Begin by choosing one of the options below")
# Navigators kept in memory; the least recently used one is dropped past this
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "1000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "NONE").upper()

def configure_logging():
    if LOG_LEVEL == "NONE":
        return
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
    )
