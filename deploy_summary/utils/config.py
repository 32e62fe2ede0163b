"""
Environment-driven settings for deploy-summary

Settings are read from DEPLOY_SUMMARY_* environment variables and then
overridden by whatever the command line passed explicitly.

Design Notes:
- Env values are parsed as JSON first, falling back to the raw string
- Command line flags that were not given (None) never override the env
- Invalid values raise ConfigurationError instead of being ignored
"""

import json
import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .exceptions import ConfigurationError

LOG = logging.getLogger(__name__)

ENV_PREFIX = "DEPLOY_SUMMARY_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class Settings:
    """Resolved runtime settings"""
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    checksum: bool = False


def _get_env_override(key: str, default: Any = None, environ: Mapping[str, str] = None) -> Any:
    """Get environment variable override"""
    environ = os.environ if environ is None else environ
    env_value = environ.get(f"{ENV_PREFIX}{key.upper()}")

    if env_value is None:
        return default

    try:
        return json.loads(env_value)
    except json.JSONDecodeError:
        return env_value


def _to_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for {field}: {value!r}", field=field)


def _to_log_level(value: Any) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level {value!r}, expected one of {', '.join(LOG_LEVELS)}",
            field="log_level"
        )
    return level


def load_settings(environ: Mapping[str, str] = None, **overrides) -> Settings:
    """
    Build settings from the environment plus explicit overrides.

    Args:
        environ: Mapping to read instead of os.environ
        **overrides: log_level, log_file or checksum; None values are ignored

    Returns:
        Validated Settings

    Raises:
        ConfigurationError: If a value cannot be interpreted
    """
    defaults = Settings()
    settings = Settings(
        log_level=_get_env_override("log_level", defaults.log_level, environ),
        log_file=_get_env_override("log_file", defaults.log_file, environ),
        checksum=_get_env_override("checksum", defaults.checksum, environ),
    )

    unknown = set(overrides) - set(Settings.__dataclass_fields__)
    if unknown:
        raise ConfigurationError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    explicit = {key: value for key, value in overrides.items() if value is not None}
    settings = replace(settings, **explicit)

    settings.log_level = _to_log_level(settings.log_level)
    settings.checksum = _to_bool(settings.checksum, "checksum")
    if settings.log_file is not None:
        settings.log_file = str(settings.log_file)

    return settings
