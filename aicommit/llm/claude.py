"""Claude (Anthropic) LLM Client"""

import anthropic

from aicommit.config import DEFAULT_MAX_TOKENS, DEFAULT_MODEL
from aicommit.errors import GenerationFailed
from aicommit.llm.base import LLMClient, LLMResponse


class ClaudeClient(LLMClient):
    """Claude API client. The API key is passed in, never read from the environment here."""

    MAX_RETRIES = 0  # the SDK retries 429, 5xx and connection errors by default

    def __init__(self, api_key: str, model: str | None = None, max_tokens: int = DEFAULT_MAX_TOKENS):
        if not api_key:
            raise ValueError("api_key is required")
        self.model = model or DEFAULT_MODEL
        self.max_tokens = max_tokens
        self._client = anthropic.Anthropic(api_key=api_key, max_retries=self.MAX_RETRIES)

    @property
    def name(self) -> str:
        return f"Claude ({self.model})"

    def generate(self, prompt: str) -> LLMResponse:
        """Single request, no retries. Every SDK failure becomes GenerationFailed."""
        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}]
            )
        except anthropic.AuthenticationError as e:
            raise GenerationFailed("Invalid API key. Check your ANTHROPIC_API_KEY.") from e
        except anthropic.RateLimitError as e:
            raise GenerationFailed("Rate limited by the Claude API. Wait a moment and try again.") from e
        except anthropic.APIConnectionError as e:
            raise GenerationFailed(f"Could not reach the Claude API: {e}") from e
        except anthropic.APIStatusError as e:
            raise GenerationFailed(f"Claude API error ({e.status_code}): {e.message}") from e
        except anthropic.APIError as e:
            raise GenerationFailed(f"Claude API error: {e.message}") from e

        content = None
        for block in response.content or []:
            if getattr(block, "type", None) == "text":
                content = block.text
                break
        if content is None:
            raise GenerationFailed("Malformed response from Claude API: no text content returned.")

        usage = getattr(response, "usage", None)
        tokens_used = usage.input_tokens + usage.output_tokens if usage else 0
        return LLMResponse(content=content, model=self.model, tokens_used=tokens_used)
