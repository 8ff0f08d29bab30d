"""Error kinds for each stage of the commit pipeline."""


class AICommitError(Exception):
    """Base for every failure that ends the current run."""
    exit_code = 1


class MissingCredential(AICommitError):
    """No API key configured."""
    pass


class VcsUnavailable(AICommitError):
    """Git is not installed, or we are not inside a repository."""
    pass


class NoStagedChanges(AICommitError):
    """Nothing is staged for the next commit."""
    pass


class GenerationFailed(AICommitError):
    """The remote model call failed. The original error is kept as __cause__."""
    pass


class CommitFailed(AICommitError):
    """git commit exited with a non-zero status."""
    pass
