"""Domain exceptions."""


class RegWatchError(Exception):
    """Base exception for RegWatch."""

    pass


class NotFound(RegWatchError):
    """Requested resource was not found."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} {identifier} not found")
        self.resource = resource
        self.identifier = identifier


class RetrievalError(RegWatchError):
    """Change store is unreachable or the query failed."""

    pass


class ValidationError(RegWatchError):
    """Validation failed for input data."""

    pass
