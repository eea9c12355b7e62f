"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A stock quantity would become negative."""


class RecordFormatError(ValidationError):
    """A text record could not be parsed."""


class MissingFieldError(RecordFormatError):
    """A record has the wrong number of fields or an unusable id."""


class InvalidScoreFormatError(RecordFormatError):
    """A record's score field is not an integer."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateEntityError(DomainException):
    """An entity with the same id is already stored."""


class StorageError(DomainException):
    """Reading or writing a data file failed."""
