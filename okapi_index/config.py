"""
BM25 configuration.

Parameters:
    k: Term frequency saturation (>= 0, default 1.5)
    b: Document length normalization strength (0..1, default 0.75)

Sources (highest priority first):
1. Explicit keyword arguments / BM25Settings(...)
2. .env.local, or .env if there is no .env.local, in the working directory.
   Loaded with python-dotenv using override=True, so file values replace
   BM25_K / BM25_B already set in the process environment
3. Environment variables BM25_K, BM25_B
4. Defaults
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidConfigError

logger = logging.getLogger(__name__)

DEFAULT_K = 1.5
DEFAULT_B = 0.75


class BM25Settings(BaseModel):
    """Validated BM25 tuning constants (fixed for the lifetime of an index)"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    k: float = Field(default=DEFAULT_K, ge=0, allow_inf_nan=False, description="Term frequency saturation")
    b: float = Field(default=DEFAULT_B, ge=0, le=1, allow_inf_nan=False, description="Length normalization strength")

    @classmethod
    def build(cls, **values) -> "BM25Settings":
        """
        Validate values, converting pydantic errors to InvalidConfigError.

        None values are dropped so the field default applies.

        Raises:
            InvalidConfigError: If k < 0, b outside [0, 1], or a value is not a finite number

        Examples:
            >>> BM25Settings.build(k=1.2)
            BM25Settings(k=1.2, b=0.75)
            >>> BM25Settings.build(k=-1)
            Traceback (most recent call last):
            ...
            okapi_index.errors.InvalidConfigError: Invalid BM25 configuration: k: ...
        """
        values = {name: value for name, value in values.items() if value is not None}
        try:
            return cls(**values)
        except ValidationError as e:
            errors = [(".".join(str(loc) for loc in err["loc"]), err["msg"]) for err in e.errors()]
            details = "; ".join(f"{field}: {msg}" for field, msg in errors)
            raise InvalidConfigError(f"Invalid BM25 configuration: {details}", errors) from e


def load_env_file(env_file: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Load environment variables from an env file.

    Without an explicit path, .env.local is preferred over .env
    (both looked up in the current working directory).

    Returns:
        Path of the loaded file, or None if nothing was found
    """
    if env_file is not None:
        candidates = [Path(env_file)]
    else:
        cwd = Path.cwd()
        candidates = [cwd / ".env.local", cwd / ".env"]

    for candidate in candidates:
        if candidate.exists():
            logger.info(f"Loading environment from: {candidate}")
            load_dotenv(candidate, override=True)
            return candidate

    logger.debug("No .env.local or .env file found - using system environment variables only")
    return None


def load_settings(env_file: Optional[Union[str, Path]] = None) -> BM25Settings:
    """
    Build BM25Settings from the environment.

    Args:
        env_file: Optional explicit env file (default: .env.local / .env lookup)

    Returns:
        Validated settings

    Raises:
        InvalidConfigError: If BM25_K / BM25_B hold invalid values
    """
    load_env_file(env_file)

    settings = BM25Settings.build(
        k=os.getenv("BM25_K") or None,
        b=os.getenv("BM25_B") or None,
    )
    logger.debug(f"BM25 settings: k={settings.k}, b={settings.b}")
    return settings
