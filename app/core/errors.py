"""Domain errors. Mapped to JSON responses by the handlers in app.main."""


class AppError(Exception):
    """Base error with the HTTP status it is reported with."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Caller input is missing or empty."""

    status_code = 400


class NotFoundError(AppError):
    """Referenced scenario or step does not exist."""

    status_code = 404


class ProviderError(AppError):
    """Completion provider failed. Converted to a fallback, never returned to the client."""

    status_code = 502
