"""Security-layer exceptions. Typed, no HTTP."""


class SecurityError(Exception):
    """Base for all security-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthenticationError(SecurityError):
    """Raised when the request carries no (or a malformed) caller identity."""


class AuthorizationError(SecurityError):
    """Raised when role does not have permission for the action."""
