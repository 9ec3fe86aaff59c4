"""
External collaborator exceptions.
"""


class ExternalAPIError(Exception):
    """Base exception for external API errors."""
    pass


class SymptomAnalysisError(ExternalAPIError):
    """Exception raised when the AI consultant returns no usable result."""
    pass


class RepositoryError(Exception):
    """Exception raised when the clinic store rejects a read or write."""
    pass
