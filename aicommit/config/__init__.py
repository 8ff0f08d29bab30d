"""Runtime Settings

Settings are resolved once at startup and passed down explicitly.
Priority: CLI flags > environment variables > .env file > defaults.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from aicommit.errors import MissingCredential

API_KEY_VAR = "ANTHROPIC_API_KEY"
MODEL_VAR = "AICOMMIT_MODEL"
QUOTING_VAR = "AICOMMIT_QUOTING"

DEFAULT_MODEL = "claude-3-5-haiku-20241022"
DEFAULT_MAX_TOKENS = 1024

VALID_QUOTING = {"argv", "shell"}


@dataclass
class Settings:
    """Everything the pipeline needs, resolved up front."""
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    quoting: str = "argv"  # "argv" or "shell"
    verbose: bool = False

    def validate(self) -> list[str]:
        """Reset invalid values to defaults and return warnings."""
        warnings = []
        defaults = Settings()

        if self.quoting not in VALID_QUOTING:
            warnings.append(f"Invalid quoting '{self.quoting}', using '{defaults.quoting}'")
            self.quoting = defaults.quoting

        return warnings


def load_env_file(path: Optional[Path] = None) -> bool:
    """Load a .env file into the environment without overriding existing variables."""
    env_path = path or Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(dotenv_path=env_path, override=False)


def load_settings(
    model: Optional[str] = None,
    shell_quoting: bool = False,
    verbose: bool = False,
    env_file: Optional[Path] = None,
) -> Settings:
    load_env_file(env_file)

    settings = Settings(
        api_key=os.environ.get(API_KEY_VAR) or None,
        model=model or os.environ.get(MODEL_VAR) or DEFAULT_MODEL,
        quoting="shell" if shell_quoting else os.environ.get(QUOTING_VAR, "argv"),
        verbose=verbose,
    )
    for warning in settings.validate():
        print(f"Config warning: {warning}", file=sys.stderr)
    return settings


def require_api_key(settings: Settings) -> str:
    """Return the API key or fail before any git or network work starts."""
    if not settings.api_key or not settings.api_key.strip():
        raise MissingCredential(
            f"{API_KEY_VAR} environment variable is not set.\n"
            "Please create a .env file with your API key."
        )
    return settings.api_key.strip()


__all__ = [
    "Settings",
    "load_settings",
    "load_env_file",
    "require_api_key",
    "API_KEY_VAR",
    "MODEL_VAR",
    "QUOTING_VAR",
    "DEFAULT_MODEL",
    "DEFAULT_MAX_TOKENS",
    "VALID_QUOTING",
]
