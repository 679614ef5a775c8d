"""Custom exceptions for profile operations."""


class ProfileError(Exception):
    """Base exception for all profile-related errors."""

    pass


class ProfileNotFoundError(ProfileError):
    """Raised when no single profile row exists for a user."""

    pass


class ProfileSetupError(ProfileError):
    """Raised when setup details do not match the profile's role."""

    pass


class ProfileAlreadyCompleteError(ProfileError):
    """Raised when setup is submitted for a profile that already has role details."""

    pass
