class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """Raised when input or entity fields are malformed."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str = "Resource", id: str = ""):
        super().__init__(f"{resource} not found: {id}" if id else f"{resource} not found")


class ExpiredError(AppError):
    """Raised when an access code exists but is past its expiry."""

    def __init__(self, message: str = "Access code has expired"):
        super().__init__(message)


class ConflictError(AppError):
    """Raised when an insert collides with an existing key."""

    def __init__(self, message: str = "Resource already exists"):
        super().__init__(message)


class ResourceExhaustedError(AppError):
    """Raised when a bounded allocation gives up."""

    def __init__(self, message: str = "Resource exhausted"):
        super().__init__(message)
