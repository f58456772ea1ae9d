"""Exceptions raised by the pageviews client."""


class PageviewsError(Exception):
    """Base class for errors raised by this package."""


class InvalidParameterError(PageviewsError):
    """A required parameter is missing or malformed, or an optional one is not allowed."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class ApiError(PageviewsError):
    """The API answered with a status other than 200."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ResponseParseError(PageviewsError):
    """The API answered 200 but the body is not valid JSON."""
