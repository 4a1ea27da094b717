from typing import Any, Dict


class LlmClient:
    """Strategy interface for the JSON-producing model call."""
    def generate_json(self, prompt: str, response_schema: Dict[str, Any]) -> str:
        raise NotImplementedError
