"""
Configuration constants for the meme tool server.

This module centralizes all configuration values read from the environment
(and an optional ``.env`` file): transport, memegen endpoint, HTTP timeouts,
and the NLP model.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Transport
MCP_TRANSPORT = os.getenv("MCP_TRANSPORT", "stdio")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()
]

# Memegen
DEFAULT_MEMEGEN_URL = "https://api.memegen.link/images"
IMAGE_TIMEOUT = float(os.getenv("IMAGE_TIMEOUT", "8"))
BATCH_MAX_WORKERS = int(os.getenv("BATCH_MAX_WORKERS", "4"))

# URL content fetching
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "8"))
MAX_CONTENT_CHARS = int(os.getenv("MAX_CONTENT_CHARS", "5000"))
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (compatible; MemegenMCP/0.1; +https://memegen.link)",
)

# NLP
SPACY_MODEL = os.getenv("SPACY_MODEL", "en_core_web_sm")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_memegen_base_url() -> str:
    """Memegen image endpoint, read at call time so it can be overridden."""
    custom_url = os.getenv("MEMEGEN_URL")
    if custom_url:
        return custom_url.rstrip("/")
    return DEFAULT_MEMEGEN_URL
