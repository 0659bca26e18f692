"""
Error types for the meme tool server.

Every error carries a machine-checkable ``kind`` and a human-readable message
so tool responses can report failures without raising through the transport.
"""

from typing import Any


class MemeToolError(Exception):
    """Base class for errors surfaced to tool callers."""

    kind = "error"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": str(self)}


class ValidationError(MemeToolError):
    """Malformed or out-of-range caller input, rejected before any scoring."""

    kind = "validation_error"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.field:
            data["field"] = self.field
        return data


class NotFoundError(MemeToolError):
    """A referenced template or category does not exist in the catalog."""

    kind = "not_found"


class UpstreamError(MemeToolError):
    """Failure from memegen.link or a fetched web page."""

    kind = "upstream_error"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.status_code is not None:
            data["status_code"] = self.status_code
        return data


class ConsistencyError(MemeToolError):
    """The static template tables contradict each other."""

    kind = "consistency_error"


def error_payload(error: MemeToolError) -> dict[str, Any]:
    """Tool response body for a failed call."""
    return {"success": False, "error": error.to_dict()}
