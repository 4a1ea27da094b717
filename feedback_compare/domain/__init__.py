from .errors import (
    AnalysisError,
    AnalysisInProgressError,
    AnalysisServiceError,
    InvalidResponseError,
    MissingCredentialsError,
)
from .models import (
    ActionPoint,
    ComparisonReport,
    ContentStrength,
    ImprovementArea,
    PeriodAnalysis,
    SelectedFile,
    Sentiment,
    Theme,
)

__all__ = [
    "AnalysisError",
    "AnalysisInProgressError",
    "AnalysisServiceError",
    "InvalidResponseError",
    "MissingCredentialsError",
    "ActionPoint",
    "ComparisonReport",
    "ContentStrength",
    "ImprovementArea",
    "PeriodAnalysis",
    "SelectedFile",
    "Sentiment",
    "Theme",
]
