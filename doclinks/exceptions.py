"""Custom exceptions for link checking operations."""


class LinkCheckError(Exception):
    """Base exception for link checker errors."""

    pass


class ValidationError(LinkCheckError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(LinkCheckError):
    """Raised when a content root or document is not found."""

    def __init__(self, resource_type: str, resource_id: str):
        message = f"{resource_type} '{resource_id}' not found"
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id
