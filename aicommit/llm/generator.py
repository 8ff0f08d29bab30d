"""Message Generator - Turn a staged diff into a commit message."""

import time

from aicommit.errors import AICommitError, GenerationFailed
from aicommit.llm.base import LLMClient, LLMResponse
from aicommit.output import BOLT, dim, info
from aicommit.prompts import build_prompt
from aicommit.result import StageResult, capture


class MessageGenerator:
    """Sends the diff to the model and returns the trimmed message."""

    def __init__(self, client: LLMClient):
        self.client = client
        self.last_response: LLMResponse | None = None
        self.last_prompt: str = ""

    def generate_message(self, diff: str) -> str:
        prompt = build_prompt(diff)
        self.last_prompt = prompt

        start = time.perf_counter()
        try:
            response = self.client.generate(prompt)
        except AICommitError:
            raise
        except Exception as e:
            # A client that isn't ours may raise anything
            raise GenerationFailed(f"Error calling {self.client.name}: {e}") from e
        elapsed = time.perf_counter() - start
        print(f"{info(BOLT)} {dim(f'Generated in {elapsed:.2f}s')}\n")

        self.last_response = response
        message = (response.content or "").strip()
        if not message:
            raise GenerationFailed("Malformed response: the model returned an empty message.")
        return message

    def generate(self, diff: str) -> StageResult[str]:
        return capture(self.generate_message, diff)
