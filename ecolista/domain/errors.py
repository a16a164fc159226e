"""Error taxonomy shared by the store adapters, the logic layer and the API."""


class EcoListaError(Exception):
    """Base class for every failure reported to the caller of an operation."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(EcoListaError):
    """A required field is empty or malformed. The caller must fix the input."""


class DuplicateError(EcoListaError):
    """A category with the same name already exists in the store."""


class RemoteError(EcoListaError):
    """Any failure of the remote store. Re-invoke the operation to retry."""


__all__ = ['EcoListaError', 'ValidationError', 'DuplicateError', 'RemoteError']
