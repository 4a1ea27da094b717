from __future__ import annotations


class AnalysisError(Exception):
    """
    Base class for every failure in the analysis path.
    `kind` is only used for diagnostics; users always see one generic message.
    """
    kind = "unexpected"


class MissingCredentialsError(AnalysisError):
    kind = "credentials"


class AnalysisServiceError(AnalysisError):
    kind = "service"


class InvalidResponseError(AnalysisError):
    kind = "invalid_response"


class AnalysisInProgressError(Exception):
    """Raised when an analysis is triggered while one is still running for the same session."""
