"""
aicommit

Draft a commit message for the staged changes with Claude, confirm it,
and commit.
"""

__version__ = "1.0.0"
