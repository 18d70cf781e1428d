"""Error taxonomy shared by services and the HTTP layer."""


class OrderingError(Exception):
    """Base error carrying a user-facing message and an HTTP status."""

    status_code = 500

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidInputError(OrderingError):
    """Malformed or missing request data."""

    status_code = 400


class UnauthorizedError(OrderingError):
    """Missing, invalid or expired credential."""

    status_code = 401


class NotFoundError(OrderingError):
    """Referenced entity does not exist."""

    status_code = 404


class ConflictError(OrderingError):
    """Duplicate account; reported as a bad request."""

    status_code = 400


class InternalError(OrderingError):
    """Store or identity provider failure."""

    status_code = 500
