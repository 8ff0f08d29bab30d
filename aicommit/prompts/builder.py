"""Prompt Builder - The instruction sent with every staged diff."""

PROMPT_TEMPLATE = """You are a helpful assistant that writes clear, concise git commit messages following best practices.

Based on the following git diff, generate a commit message that:
- Uses imperative mood (e.g., "Add feature" not "Added feature")
- Has a clear, concise summary line (50 chars or less if possible)
- If needed, includes a blank line followed by more detailed explanation
- Focuses on WHAT changed and WHY, not HOW

Git diff:
{diff}

Respond with ONLY the commit message, no additional commentary or formatting."""


class PromptBuilder:
    """Embeds the diff verbatim into the fixed instruction."""

    def build(self, diff: str) -> str:
        # str.replace, not format(): diffs are full of braces
        return PROMPT_TEMPLATE.replace("{diff}", diff, 1)


def build_prompt(diff: str) -> str:
    return PromptBuilder().build(diff)
