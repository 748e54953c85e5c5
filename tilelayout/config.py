"""Server settings via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
RELOAD = os.getenv("RELOAD", "false").lower() in ("1", "true", "yes")

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
