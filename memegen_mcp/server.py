"""
Meme Generator MCP Server - turns text into memes using memegen.link templates.

This MCP server exposes tools for discovering templates, suggesting templates
for a piece of content, extracting quotable lines, fetching article text, and
rendering memes through the memegen.link API.

Usage:
    python -m memegen_mcp                      # stdio transport
    MCP_TRANSPORT=http python -m memegen_mcp   # HTTP/SSE on HOST:PORT
"""

import json
import logging
import sys
from collections.abc import Callable
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP, Image
from mcp.types import ImageContent, TextContent
from pydantic import Field

from . import discovery, fetch_content, memegen
from .analysis import extract_key_quotes, suggest_templates, suggest_templates_batch
from .config import HOST, MCP_TRANSPORT, PORT
from .errors import MemeToolError, error_payload
from .logging_utils import print_error, setup_logging
from .templates import get_keyword_index

logger = logging.getLogger(__name__)

mcp = FastMCP("MemeGenerator")


def _call(tool_name: str, handler: Callable[..., Any], *args: Any) -> dict[str, Any]:
    """Run a tool handler, reporting our errors as a failure payload."""
    try:
        result = handler(*args)
    except MemeToolError as e:
        logger.error(f"{tool_name} failed ({e.kind}): {e}")
        return error_payload(e)

    data = result.to_dict() if hasattr(result, "to_dict") else result
    return {"success": True, **data}


@mcp.tool()
def generate_meme(
    template: Annotated[str, Field(description="Template id, e.g. 'drake' or 'db'. Use the discovery tools to find one.")],
    text_lines: Annotated[list[str], Field(description="One text line per template slot, in slot order.")],
) -> list[TextContent | ImageContent]:
    """
    Generate a meme image from a memegen.link template.

    The number of text lines must match the template's slot count exactly
    (drake takes 2, db takes 3, gru takes 4). Returns the meme URL and the
    rendered PNG.
    """
    try:
        meme = memegen.generate_meme(template, text_lines)
    except MemeToolError as e:
        logger.error(f"generate_meme failed ({e.kind}): {e}")
        return [TextContent(type="text", text=json.dumps(error_payload(e)))]

    return [
        TextContent(type="text", text=json.dumps(meme.to_dict())),
        Image(data=meme.image, format="png").to_image_content(),
    ]


@mcp.tool()
def generate_memes(
    requests: Annotated[
        list[dict[str, Any]],
        Field(description="Meme requests, each an object with 'template' and 'text_lines'."),
    ],
) -> dict[str, Any]:
    """
    Generate several memes at once.

    Each request succeeds or fails on its own; the response lists a result per
    request (in order) with the meme URL or the error, plus success/failure counts.
    """
    return _call("generate_memes", memegen.generate_memes, requests)


@mcp.tool(name="suggest_templates")
def suggest_templates_tool(
    content: Annotated[str, Field(description="The text to make a meme about.")],
    limit: Annotated[int, Field(description="Number of suggestions to return (1-10).")] = 5,
) -> dict[str, Any]:
    """
    Suggest the best meme templates for a piece of content.

    Templates are ranked by keyword overlap, detected tone (surprise, confusion,
    preference, success, failure...) and grammatical patterns such as
    before/after tense contrast or questions. Each suggestion explains its reason.
    """
    return _call("suggest_templates", suggest_templates, content, limit)


@mcp.tool(name="suggest_templates_batch")
def suggest_templates_batch_tool(
    contents: Annotated[list[str], Field(description="Several texts to suggest templates for.")],
    limit: Annotated[int, Field(description="Number of suggestions per text (1-10).")] = 5,
) -> dict[str, Any]:
    """Suggest templates for several texts at once; one bad text never fails the others."""
    return _call("suggest_templates_batch", suggest_templates_batch, contents, limit)


@mcp.tool(name="extract_key_quotes")
def extract_key_quotes_tool(
    content: Annotated[str, Field(description="Longer text (article, post, transcript) to mine for quotes.")],
    max_length: Annotated[int, Field(description="Maximum quote length in characters (10-200).")] = 100,
    limit: Annotated[int, Field(description="Number of quotes to return (1-20).")] = 10,
) -> dict[str, Any]:
    """
    Extract short, punchy, meme-worthy quotes from longer text.

    Sentences are scored for brevity, emotion, questions, exclamations,
    contrast and position; short phrases are added as fallback candidates.
    """
    return _call("extract_key_quotes", extract_key_quotes, content, max_length, limit)


@mcp.tool()
def search_templates_by_keyword(
    query: Annotated[str, Field(description="Keywords describing the meme, e.g. 'surprised' or 'choice'.")],
    limit: Annotated[int, Field(description="Maximum number of results.")] = 10,
) -> dict[str, Any]:
    """Search templates by keyword; results are ordered by relevance."""
    return _call("search_templates_by_keyword", discovery.search_by_keyword, query, limit)


@mcp.tool()
def search_templates_by_category(
    category: Annotated[
        str,
        Field(description=(
            "One of: reactions, comparisons, social, questioning, success-fail, "
            "statements, narrative, meta, characters."
        )),
    ],
) -> dict[str, Any]:
    """List every template in a category, most popular first."""
    return _call("search_templates_by_category", discovery.search_by_category, category)


@mcp.tool()
def browse_meme_categories() -> dict[str, Any]:
    """List the meme categories with a description and template count for each."""
    return _call("browse_meme_categories", discovery.browse_categories)


@mcp.tool()
def get_template_details(
    template_ids: Annotated[list[str], Field(description="One or more template ids.")],
) -> dict[str, Any]:
    """Full details (slots, example, keywords, similar templates) for one or more templates."""
    return _call("get_template_details", discovery.get_template_details, template_ids)


@mcp.tool()
def fetch_url_content(
    url: Annotated[str, Field(description="HTTP or HTTPS URL of an article or page.")],
) -> dict[str, Any]:
    """
    Fetch a web page and extract its readable text (first 5000 characters).

    Use this when the user gives an article or post URL to make a meme from.
    """
    return _call("fetch_url_content", fetch_content.fetch_url_content, url)


def main() -> None:
    setup_logging()

    try:
        index = get_keyword_index()
    except MemeToolError as e:
        print_error("Template catalog is inconsistent", str(e))
        sys.exit(1)
    logger.info(f"Template catalog ready ({len(index)} keywords)")

    if MCP_TRANSPORT == "stdio":
        logger.info("Launching Meme Generator MCP server on stdio...")
        mcp.run()
    elif MCP_TRANSPORT == "http":
        import uvicorn

        from .http_app import app

        logger.info(f"Launching Meme Generator MCP server on http://{HOST}:{PORT} (SSE at /sse)")
        uvicorn.run(app, host=HOST, port=PORT)
    else:
        print_error("Unknown transport", f"MCP_TRANSPORT must be 'stdio' or 'http', got '{MCP_TRANSPORT}'")
        sys.exit(1)


if __name__ == "__main__":
    main()
