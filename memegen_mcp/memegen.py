"""
Meme generation through the memegen.link image API.

memegen.link takes the template id and every text line as URL path segments,
with its own escaping scheme for characters that are special in a path:

    space -> _      ? -> ~q     % -> ~p     # -> ~h
    / -> ~s         \\ -> ~b    _ -> __     - -> --
    blank line -> _

Literal underscores and dashes are doubled before anything else is replaced, so
the underscores produced for spaces are never escaped twice.
"""

import logging
from dataclasses import dataclass
from typing import Any

import requests

from .batch import BatchResult, run_batch
from .config import IMAGE_TIMEOUT, get_memegen_base_url
from .errors import NotFoundError, UpstreamError, ValidationError
from .schemas import GenerateMemeInput, GenerateMemesInput, validate_input
from .templates import get_template

logger = logging.getLogger(__name__)

_SPECIAL_CHARACTERS = (
    ("?", "~q"),
    ("%", "~p"),
    ("#", "~h"),
    ("/", "~s"),
    ("\\", "~b"),
)


@dataclass(frozen=True)
class GeneratedMeme:
    template: str
    text_lines: list[str]
    url: str
    image: bytes

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "template": self.template,
            "text_lines": self.text_lines,
            "url": self.url,
            "size_bytes": len(self.image),
        }


def encode_meme_text(text: str) -> str:
    """Encode one text line for a memegen.link URL."""
    if not text or not text.strip():
        return "_"

    encoded = text.replace("_", "__").replace("-", "--")
    for character, replacement in _SPECIAL_CHARACTERS:
        encoded = encoded.replace(character, replacement)
    return encoded.replace(" ", "_")


def build_meme_url(template: str, text_lines: list[str]) -> str:
    encoded = "/".join(encode_meme_text(line) for line in text_lines)
    return f"{get_memegen_base_url()}/{template}/{encoded}.png"


def fetch_image(url: str, timeout: float = IMAGE_TIMEOUT) -> bytes:
    """
    Download a rendered meme.

    Raises:
        UpstreamError: on network failure, timeout, or a non-2xx response.
    """
    try:
        response = requests.get(url, timeout=timeout)
    except requests.Timeout as e:
        raise UpstreamError(f"Timed out after {timeout:g}s fetching image: {url}") from e
    except requests.RequestException as e:
        raise UpstreamError(f"Failed to fetch image: {e}") from e

    if not response.ok:
        raise UpstreamError(
            f"Failed to fetch image: HTTP {response.status_code} {response.reason}",
            status_code=response.status_code,
        )
    return response.content


def generate_meme(template: str, text_lines: list[str]) -> GeneratedMeme:
    """
    Build the memegen URL for a template and fetch the rendered PNG.

    Raises:
        ValidationError: on malformed input or a slot-count mismatch.
        NotFoundError: if the template is not in the catalog.
        UpstreamError: if memegen.link cannot deliver the image.
    """
    args = validate_input(GenerateMemeInput, template=template, text_lines=text_lines)

    template_info = get_template(args.template)
    if template_info is None:
        raise NotFoundError(f"Invalid template: {args.template}")

    if len(args.text_lines) != template_info.slots:
        raise ValidationError(
            f"Template '{args.template}' requires exactly {template_info.slots} text lines, "
            f"got {len(args.text_lines)}. Example: {list(template_info.example)}",
            field="text_lines",
        )

    url = build_meme_url(args.template, args.text_lines)
    logger.info(f"Generating meme with template {args.template}: {url}")
    image = fetch_image(url)
    logger.info(f"SUCCESS! Fetched {len(image)} bytes")
    return GeneratedMeme(template=args.template, text_lines=list(args.text_lines), url=url, image=image)


def generate_memes(items: list[dict[str, Any]]) -> BatchResult[GeneratedMeme]:
    """
    Generate several memes concurrently; each succeeds or fails on its own.

    Items are validated one by one, so a malformed item fails alone.

    Raises:
        ValidationError: if the batch itself is empty or not a list of objects.
    """
    args = validate_input(GenerateMemesInput, requests=items)
    return run_batch(
        args.requests,
        lambda item: generate_meme(item.get("template"), item.get("text_lines")),
    )
