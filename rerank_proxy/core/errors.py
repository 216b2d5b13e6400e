class AppError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DomainError(AppError):
    """Base class for errors caused by the caller's request."""

    pass


class InfraError(AppError):
    """Base class for infrastructure errors."""

    pass


class BadRequest(DomainError):
    pass


class InvalidJSON(DomainError):
    def __init__(self, message: str = "Invalid JSON in request body"):
        super().__init__(message)


class NotFound(DomainError):
    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class TEIError(InfraError):
    """The TEI backend was unreachable, failed, or replied with garbage."""

    pass


class InternalError(InfraError):
    pass
