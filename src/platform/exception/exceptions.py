class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class IntegrityViolationError(CustomBaseError):
    """Backing store rejected a write because of a referential or uniqueness constraint."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class UnavailableError(CustomBaseError):
    """Backing store cannot be reached."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)
