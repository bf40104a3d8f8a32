"""Exceptions raised by the Confluence adapter."""

from enum import Enum


class ConfluenceErrorCode(str, Enum):
    """Kinds of per-call failure a tool handler can branch on."""

    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"
    SPACE_NOT_FOUND = "SPACE_NOT_FOUND"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"
    EMPTY_CONTENT = "EMPTY_CONTENT"
    LABEL_EXISTS = "LABEL_EXISTS"
    LABEL_NOT_FOUND = "LABEL_NOT_FOUND"
    VERSION_CONFLICT = "VERSION_CONFLICT"
    SEARCH_FAILED = "SEARCH_FAILED"
    UNKNOWN = "UNKNOWN"


class MCPConfluenceError(Exception):
    """Base exception for all mcp-confluence errors."""


class ConfluenceError(MCPConfluenceError):
    """A classified, recoverable failure of a single adapter call.

    Attributes:
        message: Human-readable description of the failure
        code: The classified error kind
        status_code: HTTP status of the upstream response, if there was one
    """

    def __init__(
        self,
        message: str,
        code: ConfluenceErrorCode = ConfluenceErrorCode.UNKNOWN,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        """Whether re-fetching and repeating the call can succeed."""
        return self.code is ConfluenceErrorCode.VERSION_CONFLICT

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


class ConfluenceConnectionError(MCPConfluenceError):
    """Fatal failure of the startup connection check."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
