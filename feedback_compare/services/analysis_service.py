from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass

from pydantic import ValidationError

from feedback_compare.domain.errors import InvalidResponseError
from feedback_compare.domain.models import ComparisonReport
from feedback_compare.ports.llm import LlmClient
from feedback_compare.services.prompt_builder import RESPONSE_SCHEMA, build_prompt

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?```$", flags=re.DOTALL | re.IGNORECASE)


def parse_report(text: str) -> ComparisonReport:
    """
    Deserialization boundary: raw model text -> validated ComparisonReport.
    Anything that is not a JSON object of the expected shape raises InvalidResponseError.
    """
    text = (text or "").strip()
    fenced = _CODE_FENCE.match(text)
    if fenced:
        text = fenced.group(1).strip()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidResponseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidResponseError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        return ComparisonReport.model_validate(data)
    except ValidationError as e:
        raise InvalidResponseError(f"Response does not match the analysis schema: {e}") from e


@dataclass
class FeedbackAnalysisService:
    """
    Service layer: prompt -> one model call -> validated report.
    Keeps controllers/routes thin.
    """
    llm_client: LlmClient

    def analyze(self, period1_csv: str, period2_csv: str) -> ComparisonReport:
        prompt = build_prompt(period1_csv, period2_csv)
        raw = self.llm_client.generate_json(prompt, RESPONSE_SCHEMA)
        report = parse_report(raw)

        logger.info(
            "Analysis complete: %d/%d themes, %d action points",
            len(report.period1_analysis.thematic_analysis),
            len(report.period2_analysis.thematic_analysis),
            len(report.action_points),
        )
        return report
