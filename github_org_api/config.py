"""
Central configuration. Values come from the environment, optionally
loaded from a .env file in the working directory.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# GitHub
GITHUB_API_URL: str = os.getenv("GITHUB_API_URL", "https://api.github.com")
GITHUB_USER_AGENT: str = os.getenv("GITHUB_USER_AGENT", "github-org-repos-api")
REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "30"))

# HTTP server
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "3000"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
