from .analysis_service import FeedbackAnalysisService, parse_report
from .feedback_session import GENERIC_ERROR_MESSAGE, FeedbackSession, SessionStatus
from .file_intake import FileIntake
from .prompt_builder import RESPONSE_SCHEMA, build_prompt

__all__ = [
    "FeedbackAnalysisService",
    "parse_report",
    "GENERIC_ERROR_MESSAGE",
    "FeedbackSession",
    "SessionStatus",
    "FileIntake",
    "RESPONSE_SCHEMA",
    "build_prompt",
]
