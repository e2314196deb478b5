from domain.exceptions.library_exceptions import (
    AuthorAlreadyExistsError,
    AuthorNotFoundError,
    BookIdConflictError,
    BookNotFoundError,
    BookValidationError,
    DomainError,
    MalformedRequestError,
    PersistenceError,
)

__all__ = [
    "AuthorAlreadyExistsError",
    "AuthorNotFoundError",
    "BookIdConflictError",
    "BookNotFoundError",
    "BookValidationError",
    "DomainError",
    "MalformedRequestError",
    "PersistenceError",
]
