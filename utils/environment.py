"""
Environment Loader
Loads deployment secrets from the process environment and .env files
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from .exceptions import MissingSecretError

REQUIRED_ENV_VARS = ('PRIVATE_KEY',)


@dataclass(frozen=True)
class Secrets:
    """Secrets needed for one deployment run. Never persisted."""

    private_key: str = field(repr=False)


def load_secrets(env_file: Optional[Union[Path, str]] = None) -> Secrets:
    """
    Load and validate deployment secrets

    Variables already present in the process environment win over
    values from the .env file.

    Args:
        env_file: Path to a .env file (None = search from the working directory)

    Returns:
        Secrets

    Raises:
        MissingSecretError: If any required variable is unset or empty
    """
    if env_file is None:
        env_file = find_dotenv(usecwd=True)

    if env_file and load_dotenv(env_file):
        logger.debug(f"Loaded environment from {env_file}")

    missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name, '').strip()]

    if missing:
        raise MissingSecretError(
            f"{', '.join(missing)} must be set in the environment or .env"
        )

    return Secrets(private_key=os.environ['PRIVATE_KEY'].strip())
