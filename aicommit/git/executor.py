"""Commit Executor - Create the commit with the approved message."""

import subprocess

from aicommit.errors import CommitFailed, VcsUnavailable
from aicommit.result import StageResult, capture

QUOTING_MODES = ("argv", "shell")


def escape_double_quotes(message: str) -> str:
    """Prefix every double quote with a backslash."""
    return message.replace('"', '\\"')


def build_commit_command(message: str, quoting: str = "argv") -> list[str] | str:
    """Command for `git commit -m`.

    argv: an argument list, the message reaches git untouched.
    shell: a single shell string with double quotes escaped.
    """
    if quoting == "shell":
        return f'git commit -m "{escape_double_quotes(message)}"'
    return ['git', 'commit', '-m', message]


class CommitExecutor:
    """Runs git commit with the parent's stdin/stdout/stderr, so hooks and
    signing prompts reach the user directly."""

    def __init__(self, quoting: str = "argv"):
        if quoting not in QUOTING_MODES:
            raise ValueError(f"Unknown quoting mode: {quoting}. Use 'argv' or 'shell'.")
        self.quoting = quoting

    def run_commit(self, message: str) -> None:
        command = build_commit_command(message, self.quoting)
        try:
            result = subprocess.run(command, shell=self.quoting == "shell")
        except FileNotFoundError:
            raise VcsUnavailable("Not a git repository or git is not installed.")

        if result.returncode != 0:
            raise CommitFailed("Failed to commit changes.")

    def commit(self, message: str) -> StageResult[None]:
        return capture(self.run_commit, message)
