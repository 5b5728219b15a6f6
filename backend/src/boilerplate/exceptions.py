"""Boilerplate exception hierarchy.

All exceptions inherit from BoilerplateError and carry a three-part structure:
message (what happened), detail (technical context), suggestion (what to do next).

Validation failures share ValidationError; missing rows share
ResourceMissingError. The HTTP layer maps the two groups to 400 and 404.
"""


class BoilerplateError(Exception):
    """Base exception for all Boilerplate errors."""

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.detail:
            parts.append(f"Detail: {self.detail}")
        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")
        return " | ".join(parts)


class ValidationError(BoilerplateError):
    """Raised when input validation fails. No store access has happened."""

    def __init__(
        self,
        message: str = "Validation error",
        detail: str | None = None,
        suggestion: str | None = "Check input format and required fields",
    ) -> None:
        super().__init__(message, detail, suggestion)


class InvalidOptionsError(ValidationError):
    """Raised when an operation receives no options at all."""

    def __init__(
        self,
        message: str = "invalid options",
        detail: str | None = None,
        suggestion: str | None = "Provide a request body with the required fields",
    ) -> None:
        super().__init__(message, detail, suggestion)


class InvalidIDError(ValidationError):
    """Raised when an identifier is missing, malformed, or the zero UUID."""

    def __init__(
        self,
        message: str = "invalid id",
        detail: str | None = None,
        suggestion: str | None = "Pass a valid, non-zero UUID",
    ) -> None:
        super().__init__(message, detail, suggestion)


class InvalidTitleError(ValidationError):
    """Raised when a title is empty on create or update."""

    def __init__(
        self,
        message: str = "invalid title",
        detail: str | None = None,
        suggestion: str | None = "Title must be a non-empty string",
    ) -> None:
        super().__init__(message, detail, suggestion)


class InvalidOwnerError(ValidationError):
    """Raised when an ownership-bearing resource is created without an owner."""

    def __init__(
        self,
        message: str = "invalid owner",
        detail: str | None = None,
        suggestion: str | None = "Authenticate the request so the owner can be set",
    ) -> None:
        super().__init__(message, detail, suggestion)


class InvalidFiltersError(ValidationError):
    """Raised when pagination or ordering options are out of range."""

    def __init__(
        self,
        message: str = "invalid filters",
        detail: str | None = None,
        suggestion: str | None = "skip must be >= 0 and limit between 0 and 100",
    ) -> None:
        super().__init__(message, detail, suggestion)


class ResourceMissingError(BoilerplateError):
    """Base for errors where the targeted row does not exist for the caller."""


class NotFoundError(ResourceMissingError):
    """Raised when no row matches the id for the caller.

    Rows owned by someone else are reported the same way, so existence
    never leaks across owners.
    """

    def __init__(
        self,
        message: str = "not found",
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message, detail, suggestion)


class NoRowsAffectedError(ResourceMissingError):
    """Raised when a mutating statement matched zero rows."""

    def __init__(
        self,
        message: str = "no rows affected",
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message, detail, suggestion)


class AuthenticationError(BoilerplateError):
    """Raised when a bearer token is missing, malformed, or fails verification."""

    def __init__(
        self,
        message: str = "invalid jwt claims",
        detail: str | None = None,
        suggestion: str | None = "Send a valid 'Authorization: Bearer <token>' header",
    ) -> None:
        super().__init__(message, detail, suggestion)
