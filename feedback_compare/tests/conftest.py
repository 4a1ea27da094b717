from __future__ import annotations

import copy
import json
from typing import Any, Dict, List

import pytest

from feedback_compare.config.ini_config import AppSettings
from feedback_compare.ports.llm import LlmClient

PERIOD_1_CSV = "comment\nGreat examples,5"
PERIOD_2_CSV = "comment\nToo theoretical,2"

SAMPLE_PAYLOAD: Dict[str, Any] = {
    "comparativeSummary": "Improved practicality",
    "period1Analysis": {
        "sentiment": {"positive": 80, "neutral": 10, "negative": 10},
        "thematicAnalysis": [{"theme": "Examples", "summary": "Well liked"}],
        "contentStrengths": [{"strength": "Clarity", "quotes": ["Great examples"]}],
        "improvementAreas": [],
    },
    "period2Analysis": {
        "sentiment": {"positive": 33.333, "neutral": 16.667, "negative": 50},
        "thematicAnalysis": [{"theme": "Theory", "summary": "Too abstract"}],
        "contentStrengths": [],
        "improvementAreas": [
            {
                "area": "Practical exercises",
                "suggestion": "Add worked cases",
                "quotes": ["Too theoretical", "Needs hands-on labs"],
            }
        ],
    },
    "actionPoints": [
        {"action": "Add more examples", "rationale": "Period 2 found content too theoretical"}
    ],
}


# -----------------------------
# Test doubles
# -----------------------------
class FakeLlmClient(LlmClient):
    """Returns canned text (or raises) and records every call."""

    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: List[tuple[str, Dict[str, Any]]] = []

    def generate_json(self, prompt: str, response_schema: Dict[str, Any]) -> str:
        self.calls.append((prompt, response_schema))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def payload() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def make_llm():
    return FakeLlmClient


@pytest.fixture
def fake_llm(payload) -> FakeLlmClient:
    return FakeLlmClient(response=json.dumps(payload))


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        model="gemini-test",
        api_key_env=("TEST_API_KEY",),
        temperature=None,
        max_upload_bytes=1024 * 1024,
        max_sessions=3,
        session_idle_seconds=600,
        flask_host="127.0.0.1",
        flask_port=5000,
        flask_debug=False,
        secret_key="test-secret",
        log_level="DEBUG",
    )
