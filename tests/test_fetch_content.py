"""Unit tests for URL content fetching with the HTTP layer mocked."""

from unittest.mock import patch

import pytest
import requests

from memegen_mcp.config import REQUEST_TIMEOUT
from memegen_mcp.errors import UpstreamError, ValidationError
from memegen_mcp.fetch_content import extract_text_from_html, fetch_url_content

from .conftest import make_response

HTML = """
<html>
  <head><title>  Big News  </title><script>var x = 1;</script></head>
  <body>
    <nav>Home | About</nav>
    <header>Site header</header>
    <article>
      <h1>Headline</h1>
      <p>The   server fell over.</p>
      <div class="ad">Buy stuff</div>
      <p>Nobody was surprised.</p>
    </article>
    <aside>Related links</aside>
    <footer>Copyright</footer>
  </body>
</html>
"""


class TestExtractTextFromHtml:

    def test_article_text_without_boilerplate(self):
        text, title = extract_text_from_html(HTML)

        assert title == "Big News"
        assert text == "Headline The server fell over. Nobody was surprised."

    def test_falls_back_to_main_then_body(self):
        assert extract_text_from_html("<body><main>Main part</main><p>Other</p></body>")[0] == "Main part"
        assert extract_text_from_html("<body><p>Just the body</p></body>")[0] == "Just the body"

    def test_title_falls_back_to_first_heading(self):
        _, title = extract_text_from_html("<body><h1>First</h1><h1>Second</h1></body>")
        assert title == "First"

    def test_no_title(self):
        assert extract_text_from_html("<body><p>x</p></body>")[1] is None


class TestFetchUrlContent:

    @patch("memegen_mcp.fetch_content.requests.get")
    def test_html_page(self, mock_get):
        mock_get.return_value = make_response(text=HTML, headers={"content-type": "text/html; charset=utf-8"})

        result = fetch_url_content("https://example.com/news")

        assert result["success"] is True
        assert result["title"] == "Big News"
        assert result["word_count"] == 8
        assert result["char_count"] == len(result["content"])
        assert result["truncated"] is False
        assert "User-Agent" in mock_get.call_args.kwargs["headers"]

    @patch("memegen_mcp.fetch_content.requests.get")
    def test_fails_fast(self, mock_get):
        mock_get.return_value = make_response(text="ok", headers={"content-type": "text/plain"})

        fetch_url_content("https://example.com")

        assert mock_get.call_args.kwargs["timeout"] == REQUEST_TIMEOUT
        assert REQUEST_TIMEOUT < 10

    @patch("memegen_mcp.fetch_content.requests.get")
    def test_long_content_is_truncated(self, mock_get):
        mock_get.return_value = make_response(text="word " * 3000, headers={"content-type": "text/plain"})

        result = fetch_url_content("https://example.com/long.txt")

        assert result["truncated"] is True
        assert result["char_count"] == 5000

    @patch("memegen_mcp.fetch_content.requests.get")
    def test_http_error(self, mock_get):
        mock_get.return_value = make_response(status_code=404, reason="Not Found")

        with pytest.raises(UpstreamError, match="HTTP 404") as exc_info:
            fetch_url_content("https://example.com/missing")
        assert exc_info.value.status_code == 404

    @patch("memegen_mcp.fetch_content.requests.get")
    def test_unsupported_content_type(self, mock_get):
        mock_get.return_value = make_response(content=b"%PDF", headers={"content-type": "application/pdf"})

        with pytest.raises(UpstreamError, match="Unsupported content type"):
            fetch_url_content("https://example.com/file.pdf")

    @patch("memegen_mcp.fetch_content.requests.get")
    def test_network_failure(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(UpstreamError, match="Failed to fetch URL"):
            fetch_url_content("https://example.com")

    @pytest.mark.parametrize("url", ["not a url", "ftp://example.com/file"])
    def test_invalid_url(self, url):
        with pytest.raises(ValidationError):
            fetch_url_content(url)
