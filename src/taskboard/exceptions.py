# taskboard/exceptions.py


class RepositoryError(Exception):
    """Any failure raised by a repository."""


class NotFoundError(RepositoryError):
    """The requested row does not exist."""


class AlreadyExistsError(RepositoryError):
    """An insert or update violated a uniqueness constraint."""


class InvalidTokenError(Exception):
    pass


class ApiError(Exception):
    """Aborts a service operation with the given envelope code."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message
