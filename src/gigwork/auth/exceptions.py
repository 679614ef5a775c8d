"""Custom exceptions for authorization."""


class AuthorizationError(Exception):
    """Raised when an authenticated user lacks permission to access a resource."""

    pass
