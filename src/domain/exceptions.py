"""Domain errors raised by the item use cases and translated to HTTP statuses at the API edge."""


class ItemValidationError(Exception):
    """Raised when a request field is missing or outside its accepted values."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class AuthenticationError(Exception):
    """Raised when a bearer token is missing, unknown or expired."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Authentication failed: {reason}.")


class ItemNotFoundError(Exception):
    def __init__(self, criteria: str) -> None:
        self.criteria = criteria
        super().__init__(f"No item matches {criteria}.")
