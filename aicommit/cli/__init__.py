"""Command Line Interface Package"""

from aicommit.cli.confirm import confirm, is_affirmative
from aicommit.cli.main import main, run, run_pipeline

__all__ = ["confirm", "is_affirmative", "main", "run", "run_pipeline"]
