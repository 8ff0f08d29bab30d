"""Diff Collector - Read the staged changeset from git."""

import subprocess
from dataclasses import dataclass

from aicommit.errors import NoStagedChanges, VcsUnavailable
from aicommit.result import StageResult, capture


@dataclass(frozen=True)
class FileChange:
    """One staged file from `git diff --staged --numstat`."""
    path: str
    additions: int
    deletions: int

    @property
    def total_changes(self) -> int:
        return self.additions + self.deletions


def run_git(*args: str) -> str:
    """Run a git command and return stdout."""
    try:
        result = subprocess.run(
            ['git', *args],
            capture_output=True,
            text=True,
            check=True,
            encoding='utf-8',
            errors='replace'
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        raise VcsUnavailable(f"Git command failed: git {' '.join(args)}\n{e.stderr}".rstrip())
    except FileNotFoundError:
        raise VcsUnavailable("Not a git repository or git is not installed.")


class DiffCollector:
    """Collects the staged diff. Fails fast on user-fixable preconditions."""

    NO_CHANGES_MESSAGE = 'No staged changes found. Use "git add" to stage your changes first.'

    def _verify_in_repo(self) -> None:
        try:
            run_git('rev-parse', '--git-dir')
        except VcsUnavailable:
            raise VcsUnavailable("Not a git repository or git is not installed.")

    def get_staged_diff(self) -> str:
        """Return the staged diff text, raising if git fails or nothing is staged."""
        self._verify_in_repo()
        diff = run_git('diff', '--staged')
        if not diff.strip():
            raise NoStagedChanges(self.NO_CHANGES_MESSAGE)
        return diff

    def collect_staged_diff(self) -> StageResult[str]:
        return capture(self.get_staged_diff)

    def staged_files(self) -> list[FileChange]:
        """Parse 'git diff --staged --numstat' output. Binary files count as 0/0."""
        output = run_git('diff', '--staged', '--numstat')

        files = []
        for line in output.strip().split('\n'):
            parts = line.split('\t')
            if len(parts) >= 3:
                additions = int(parts[0]) if parts[0] != '-' else 0
                deletions = int(parts[1]) if parts[1] != '-' else 0
                files.append(FileChange(path=parts[2], additions=additions, deletions=deletions))

        return files
