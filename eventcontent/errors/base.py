"""
Base exception classes for the event content pipeline.
"""


class ContentError(Exception):
    """
    Base exception class for all content pipeline errors.

    Every failure raised by the loader, normalizer, renderer or merge engine
    derives from this class so the command boundary can report it uniformly.
    """

    def __init__(self, message: str, **kwargs):
        """
        Initialize the ContentError.

        Args:
            message: The error message
            **kwargs: Additional context (file paths, slugs, schedule keys)
        """
        super().__init__(message)
        self.message = message
        self.context = kwargs

    def __str__(self):
        """Return a string representation of the error."""
        return self.message

    def to_dict(self):
        """
        Convert the exception to a dictionary for logging or adapter responses.

        Returns:
            dict: A dictionary containing error details
        """
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context
        }


class ConfigurationError(ContentError):
    """Raised when settings are inconsistent (e.g. identical languages)."""
