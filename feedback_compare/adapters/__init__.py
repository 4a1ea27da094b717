from .llm_gemini import GeminiLlmClient

__all__ = ["GeminiLlmClient"]
