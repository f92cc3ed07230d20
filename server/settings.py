"""Server settings read from the environment (and a .env file if present)."""

import os

from dotenv import load_dotenv

load_dotenv()  # load environment variables from .env file

VERSION = "0.1.0"

# comma-separated values for multiple origins, or "*" for all (development only)
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

LOG_LEVEL = os.getenv("AGENTPLAN_LOG_LEVEL", "INFO").upper()

HOST = os.getenv("AGENTPLAN_HOST", "0.0.0.0")
PORT = int(os.getenv("AGENTPLAN_PORT", "8000"))

MIN_DESCRIPTION_LENGTH = int(os.getenv("MIN_DESCRIPTION_LENGTH", "10"))
