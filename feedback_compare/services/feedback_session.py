from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional

from feedback_compare.domain.errors import AnalysisError, AnalysisInProgressError
from feedback_compare.domain.models import ComparisonReport
from feedback_compare.services.analysis_service import FeedbackAnalysisService
from feedback_compare.services.file_intake import FileIntake

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = (
    "An error occurred during analysis. Please check the server logs for details "
    "and ensure your API key is configured correctly."
)


class SessionStatus(str, Enum):
    IDLE = "idle"
    READY = "ready"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FeedbackSession:
    """
    Per-browser state: the two selected files, the loading flag and the outcome of the last run.
    Every run starts by clearing the previous report and error.
    """

    def __init__(self, intake: Optional[FileIntake] = None) -> None:
        self.intake = intake or FileIntake()
        self.loading = False
        self.report: Optional[ComparisonReport] = None
        self.error_message: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def status(self) -> SessionStatus:
        if self.loading:
            return SessionStatus.LOADING
        if self.error_message:
            return SessionStatus.FAILED
        if self.report is not None:
            return SessionStatus.SUCCEEDED
        if self.intake.is_ready:
            return SessionStatus.READY
        return SessionStatus.IDLE

    @property
    def can_analyze(self) -> bool:
        return self.intake.is_ready and not self.loading

    def analyze(self, service: FeedbackAnalysisService) -> bool:
        """
        Runs one analysis. Returns False when the files are not both selected,
        otherwise True once the run has finished (check `report` / `error_message`).
        """
        if not self.intake.is_ready:
            return False
        with self._lock:
            if self.loading:
                raise AnalysisInProgressError("An analysis is already running for this session.")
            self.loading = True
            self.report = None
            self.error_message = None

        try:
            period1_csv, period2_csv = self.intake.texts()
            self.report = service.analyze(period1_csv, period2_csv)
        except AnalysisError as e:
            logger.warning("Analysis failed (%s): %s", e.kind, e)
            self.error_message = GENERIC_ERROR_MESSAGE
        except Exception:
            logger.exception("Analysis failed (unexpected)")
            self.error_message = GENERIC_ERROR_MESSAGE
        finally:
            self.loading = False

        return True
