from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import google.generativeai as genai

from feedback_compare.domain.errors import (
    AnalysisServiceError,
    InvalidResponseError,
    MissingCredentialsError,
)
from feedback_compare.ports.llm import LlmClient

logger = logging.getLogger(__name__)


@dataclass
class GeminiLlmClient(LlmClient):
    """
    Gemini adapter: one generate_content call per analysis, JSON output constrained by schema.
    The API key is looked up on every call so a key added after startup is picked up.
    """
    model_name: str
    api_key_env: tuple[str, ...] = ("API_KEY", "GEMINI_API_KEY")
    temperature: Optional[float] = None

    def _api_key(self) -> str:
        for name in self.api_key_env:
            value = (os.getenv(name) or "").strip()
            if value:
                return value
        raise MissingCredentialsError(
            f"No API key found in environment variables: {', '.join(self.api_key_env)}"
        )

    def generate_json(self, prompt: str, response_schema: Dict[str, Any]) -> str:
        api_key = self._api_key()

        genai.configure(api_key=api_key)
        generation_config = genai.GenerationConfig(
            temperature=self.temperature,
            response_mime_type="application/json",
            response_schema=response_schema,
        )
        model = genai.GenerativeModel(self.model_name, generation_config=generation_config)

        logger.info("Calling %s with a %d character prompt", self.model_name, len(prompt))
        try:
            response = model.generate_content(prompt)
        except Exception as e:
            raise AnalysisServiceError(f"Gemini request failed: {e}") from e

        # .text raises ValueError when the candidate was blocked or has no parts
        try:
            text = response.text
        except ValueError as e:
            raise InvalidResponseError(f"Gemini returned no text: {e}") from e

        if not (text or "").strip():
            raise InvalidResponseError("Gemini returned an empty response.")

        return text.strip()
