"""
Domain Errors

Raised by the repository and resolvers. Strawberry reports the message of
any exception raised in a resolver in the response's "errors" array, so
these carry plain descriptive messages and no error codes.
"""


class BlogAPIError(Exception):
    """Base class for errors raised by the blog API."""

    pass


class NotFoundError(BlogAPIError):
    """Raised when a resource required by a write does not exist."""

    pass


class UserNotFoundError(NotFoundError):
    """Raised when no user has the given email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User with email '{email}' not found")


class ValidationError(BlogAPIError):
    """Raised when mutation input is rejected before anything is written."""

    pass
