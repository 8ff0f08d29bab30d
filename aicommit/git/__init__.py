"""Git Operations Package"""

from aicommit.git.collector import DiffCollector, FileChange, run_git
from aicommit.git.executor import CommitExecutor, build_commit_command, escape_double_quotes

__all__ = [
    "DiffCollector",
    "FileChange",
    "run_git",
    "CommitExecutor",
    "build_commit_command",
    "escape_double_quotes",
]
