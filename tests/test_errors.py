"""Unit tests for error payloads and input validation."""

import pytest

from memegen_mcp.errors import NotFoundError, UpstreamError, ValidationError, error_payload
from memegen_mcp.schemas import ExtractQuotesInput, SearchByKeywordInput, SuggestTemplatesInput, validate_input


class TestErrors:

    def test_payload_shape(self):
        assert error_payload(NotFoundError("gone")) == {
            "success": False,
            "error": {"kind": "not_found", "message": "gone"},
        }

    def test_optional_details(self):
        assert ValidationError("bad", field="limit").to_dict()["field"] == "limit"
        assert "field" not in ValidationError("bad").to_dict()
        assert UpstreamError("down", status_code=502).to_dict()["status_code"] == 502


class TestValidateInput:

    def test_defaults_apply_for_none(self):
        args = validate_input(ExtractQuotesInput, content="text", max_length=None, limit=None)

        assert args.max_length == 100
        assert args.limit == 10

    def test_names_offending_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_input(SuggestTemplatesInput, content="text", limit=50)

        assert exc_info.value.field == "limit"
        assert "SuggestTemplatesInput" in str(exc_info.value)

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            validate_input(SuggestTemplatesInput, content="text", colour="red")

    def test_blank_query(self):
        with pytest.raises(ValidationError, match="Query must not be empty"):
            validate_input(SearchByKeywordInput, query="  ")
