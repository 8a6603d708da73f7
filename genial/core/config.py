"""Optional TOML configuration for codec defaults.

Lookup order: ``GENIAL_CONFIG`` environment variable, explicit path,
``./genial.toml``, ``~/genial.toml``. When no file is found the defaults
are used.

Example genial.toml:

    [codec]
    default_format = "PNG"
    png_compress_level = 9
"""

from __future__ import annotations

import logging
import os
from typing import Any, cast

from pydantic import BaseModel, Field, ValidationError, field_validator

# TOML loading for Python 3.11+ and older
try:
    import tomllib  # type: ignore[import-not-found, unused-ignore]
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found, no-redef, unused-ignore]

from genial.core.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_VAR = "GENIAL_CONFIG"
DEFAULT_FILENAME = "genial.toml"


class CodecConfig(BaseModel):
    """Codec settings.

    Attributes:
        default_format: Pillow format name used when the path has no known extension
        png_compress_level: zlib level for PNG output (0-9)
    """

    model_config = {"frozen": True}

    default_format: str = Field(default="PNG")
    png_compress_level: int = Field(default=6, ge=0, le=9)

    @field_validator("default_format")
    @classmethod
    def _upper(cls, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise ValueError("default_format must not be empty")
        return value


def _resolve_config_path(config_path: str | None) -> str | None:
    """Resolve configuration path from env, explicit path, or defaults."""
    env_config = os.environ.get(ENV_VAR)
    if env_config:
        return env_config
    if config_path:
        return config_path
    candidates = [
        DEFAULT_FILENAME,
        os.path.expanduser(f"~/{DEFAULT_FILENAME}"),
    ]
    for candidate in candidates:
        if os.path.exists(candidate):
            return candidate
    return None


def load_codec_config(config_path: str | None = None) -> CodecConfig:
    """Load the ``[codec]`` table.

    Args:
        config_path: Path to genial.toml (auto-detected if None)

    Returns:
        Validated CodecConfig (defaults when no file is found)

    Raises:
        FileNotFoundError: If an explicitly named file does not exist
        ConfigError: If the file is not valid TOML or has invalid values
    """
    resolved_path = _resolve_config_path(config_path)
    if resolved_path is None:
        return CodecConfig()
    if not os.path.exists(resolved_path):
        raise FileNotFoundError(
            f"Config file not found at {resolved_path}. Set {ENV_VAR} or create {DEFAULT_FILENAME}"
        )
    logger.debug("loading config from %s", resolved_path)
    try:
        with open(resolved_path, "rb") as f:
            config = cast(dict[str, Any], tomllib.load(f))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {resolved_path}: {e}") from e

    section = config.get("codec", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[codec] in {resolved_path} must be a table")
    try:
        return CodecConfig(**section)
    except ValidationError as e:
        raise ConfigError(f"Invalid [codec] settings in {resolved_path}: {e}") from e
