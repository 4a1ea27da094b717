from .llm import LlmClient

__all__ = ["LlmClient"]
