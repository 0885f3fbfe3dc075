"""LLM client implementations."""

from dinner_decider.llm.client.ollama import OllamaClient
from dinner_decider.llm.client.protocol import LLMClientProtocol


__all__ = ["LLMClientProtocol", "OllamaClient"]
