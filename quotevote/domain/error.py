"""Domain layer errors.

Every core operation either returns a value or raises one of these. The
interface layer maps each kind to a stable HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Malformed or missing client input."""

    pass


class ConflictError(DomainError):
    """Operation conflicts with the current state of the resource.

    Raised for duplicate votes, removing a vote that does not exist and
    editing a quote that already has votes.
    """

    pass


class AlreadyExistsError(ConflictError):
    """A resource with the same unique key already exists (taken username)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnauthorizedError(DomainError):
    """Credential is missing, invalid or expired."""

    pass


class StoreError(DomainError):
    """The backing store failed to execute an operation.

    Safe for the caller to retry with backoff; the core never retries.
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} failed: {message}")


class StoreTimeoutError(StoreError):
    """A store operation exceeded its timeout."""

    def __init__(self, operation: str, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(operation, f"timed out after {timeout_seconds}s")
