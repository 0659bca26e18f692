"""
Fetch a web page and extract its readable text, to make memes from articles.
"""

import logging
import re
from typing import Any

import requests
from bs4 import BeautifulSoup

from .config import MAX_CONTENT_CHARS, REQUEST_TIMEOUT, USER_AGENT
from .errors import UpstreamError, ValidationError
from .schemas import FetchContentInput, validate_input

logger = logging.getLogger(__name__)

_BOILERPLATE_TAGS = ["script", "style", "noscript", "iframe", "nav", "header", "footer", "aside"]
_BOILERPLATE_SELECTORS = (".ad", ".advertisement", ".social-share", ".comments")
_SUPPORTED_CONTENT_TYPES = ("text/html", "text/plain")

_WHITESPACE_RE = re.compile(r"\s+")


def _normalize(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_text_from_html(html: str) -> tuple[str, str | None]:
    """Return ``(text, title)`` for an HTML document with boilerplate removed."""
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup.find_all(_BOILERPLATE_TAGS):
        tag.decompose()
    for selector in _BOILERPLATE_SELECTORS:
        for element in soup.select(selector):
            element.decompose()

    # Main content: article, then main, then the whole body
    content = soup.find("article") or soup.find("main") or soup.body or soup
    text = _normalize(content.get_text(" "))

    title = None
    if soup.title and soup.title.get_text(strip=True):
        title = _normalize(soup.title.get_text())
    else:
        heading = soup.find("h1")
        if heading and heading.get_text(strip=True):
            title = _normalize(heading.get_text())

    return text, title


def fetch_url_content(url: str) -> dict[str, Any]:
    """
    Download a page and return its text, truncated to ``MAX_CONTENT_CHARS``.

    Raises:
        ValidationError: if ``url`` is not an http(s) URL.
        UpstreamError: on network failure, a non-2xx status, or a content type
            other than HTML or plain text.
    """
    args = validate_input(FetchContentInput, url=url)
    if args.url.scheme not in ("http", "https"):
        raise ValidationError(f"Only http and https URLs are supported: {url}", field="url")

    logger.info(f"Fetching content from {url}")
    try:
        response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=REQUEST_TIMEOUT)
    except requests.Timeout as e:
        raise UpstreamError(f"Failed to fetch URL: timed out after {REQUEST_TIMEOUT:g}s") from e
    except requests.RequestException as e:
        raise UpstreamError(f"Failed to fetch URL: {e}") from e

    if not response.ok:
        raise UpstreamError(
            f"Failed to fetch URL: HTTP {response.status_code}: {response.reason}",
            status_code=response.status_code,
        )

    content_type = response.headers.get("content-type", "")
    if not any(supported in content_type for supported in _SUPPORTED_CONTENT_TYPES):
        raise UpstreamError(
            f"Failed to fetch URL: Unsupported content type: {content_type}. "
            "Only HTML and plain text are supported."
        )

    if "text/html" in content_type:
        text, title = extract_text_from_html(response.text)
    else:
        text, title = _normalize(response.text), None

    truncated = len(text) > MAX_CONTENT_CHARS
    content = text[:MAX_CONTENT_CHARS] if truncated else text
    logger.info(f"Fetched {len(content)} characters from {url} (truncated: {truncated})")

    return {
        "success": True,
        "url": url,
        "title": title,
        "content": content,
        "word_count": len(content.split()),
        "char_count": len(content),
        "truncated": truncated,
    }
