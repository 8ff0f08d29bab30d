"""LLM Client Package"""

from aicommit.llm.base import LLMClient, LLMResponse
from aicommit.llm.claude import ClaudeClient
from aicommit.llm.generator import MessageGenerator

__all__ = [
    "LLMClient",
    "LLMResponse",
    "ClaudeClient",
    "MessageGenerator",
]
