"""
Exception classes for the blog API.

Components raise these; the routers translate them into HTTP responses.
"""


class BlogError(Exception):
    """Base exception for all blog API errors."""
    pass


class StoreError(BlogError):
    """Raised when talking to the backing store fails."""
    pass


class WriteError(StoreError):
    """Raised when a post cannot be persisted."""
    pass


class NotFound(BlogError):
    """Raised when a post lookup by id misses."""
    pass


class ValidationError(BlogError):
    """Raised when required request input is missing or malformed."""
    pass


class ConfigError(BlogError):
    """Raised when a required setting is absent."""
    pass


class Unauthorized(BlogError):
    """Raised when a caller fails the token check."""
    pass
