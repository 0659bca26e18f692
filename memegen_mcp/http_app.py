"""
FastAPI app for serving the MCP tools over HTTP.

Exposes a health check and mounts the MCP SSE transport (``/sse`` for the event
stream, ``/messages/`` for client posts). CORS is limited to ``ALLOWED_ORIGINS``.

Run with:
    MCP_TRANSPORT=http python -m memegen_mcp
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import ALLOWED_ORIGINS
from .server import mcp

SERVICE_NAME = "memegen-mcp"

app = FastAPI(title="Meme Generator MCP", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "service": SERVICE_NAME}


# Mounted last so /health is matched before the SSE routes
app.mount("/", mcp.sse_app())
