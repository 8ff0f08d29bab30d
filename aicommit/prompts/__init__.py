"""Prompt Construction Package"""

from aicommit.prompts.builder import PromptBuilder, PROMPT_TEMPLATE, build_prompt

__all__ = ["PromptBuilder", "PROMPT_TEMPLATE", "build_prompt"]
