class DomainError(Exception):
    """Base exception for business rule violations."""

    http_status = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message}


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a staff member or portal user does not exist."""

    http_status = 404


class GeofenceError(DomainError):
    """Raised when a reported location is outside the clinic radius."""

    def __init__(self, message: str, *, distance: float, required: float):
        super().__init__(message)
        self.distance = distance
        self.required = required

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["distance"] = self.distance
        data["required"] = self.required
        return data


class DuplicateError(DomainError):
    """Raised when the same action was already recorded inside the debounce window."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or no bearer token was sent."""

    http_status = 401


class AuthorizationError(DomainError):
    """Raised when a bearer token fails verification or does not cover the action."""

    http_status = 403
