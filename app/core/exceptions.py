"""Custom exceptions for the application."""


class ValidationError(Exception):
    """Raised when a create request is malformed."""

    pass


class BackendError(Exception):
    """Raised when a single generation backend call fails."""

    pass


class GenerationError(Exception):
    """Raised when every ranked generation model has failed."""

    pass


class GenerationInProgressError(Exception):
    """Raised when a document is requested while another one is generating."""

    pass


class PersistenceError(Exception):
    """Raised when blob store operations fail."""

    pass
