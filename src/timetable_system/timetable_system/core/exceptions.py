class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingInputError(DomainError):
    """Raised when a required input collection is absent (None) rather than empty."""


class ConfigurationError(DomainError):
    """Raised when a settings module lacks a value that has no safe default."""


class ExportError(DomainError):
    """Raised when a timetable cannot be rendered into a workbook."""
