"""terrors configuration from YAML file and environment.

Configuration only affects the logging helpers in terrors.log, and only when
a TerrorsConfig is handed to them. Nothing here is cached at module level;
construction, wrapping and inspection of errors never read it.

Example config file:

    terrors:
      log_level: WARNING
      log_verbose: ${TERRORS_VERBOSE:-false}
      max_message_length: 500

Environment variables ARE supported using ${VAR_NAME} syntax in YAML files.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from terrors.exceptions import errorf
from terrors.types import Type

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "TERRORS_CONFIG"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load YAML file and return dict."""
    if not path.exists():
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand ${VAR_NAME} and ${VAR_NAME:-default} environment variables in config data."""
    if isinstance(data, dict):
        return {key: _expand_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        pattern = r"\$\{([^}:]+)(?::-(([^}]*))?)?\}"

        def replacer(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else match.group(0)
            return os.getenv(var_name, default_value)

        return re.sub(pattern, replacer, data)
    else:
        return data


def _to_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise errorf(Type.INVALID, "%s must be a boolean, got %r", name, value)


def _to_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise errorf(Type.INVALID, "%s must be an integer, got %r", name, value) from e


@dataclass
class TerrorsConfig:
    """Settings for the logging helpers.

    Attributes:
        log_level: Default level name used by log_error()
        log_verbose: Attach the verbose rendering (causal chain and stacks)
            to log records
        max_message_length: Messages longer than this are truncated in log
            fields
    """

    log_level: str = "ERROR"
    log_verbose: bool = False
    max_message_length: int = 500

    def __post_init__(self):
        self.validate()

    @property
    def level(self) -> int:
        """log_level as a logging module level number."""
        return logging.getLevelName(self.log_level.upper())

    def validate(self) -> None:
        """Raise a Type.INVALID error if any setting is out of range."""
        if not isinstance(self.log_level, str) or not isinstance(self.level, int):
            raise errorf(Type.INVALID, "log_level must be a logging level name, got %r", self.log_level)
        if self.max_message_length < 1:
            raise errorf(
                Type.INVALID,
                "max_message_length must be >= 1, got %d",
                self.max_message_length,
            )


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> TerrorsConfig:
    """Load terrors configuration.

    The file is config_path, else the path in $TERRORS_CONFIG. Without
    either the defaults are used. Environment variables TERRORS_LOG_LEVEL,
    TERRORS_LOG_VERBOSE and TERRORS_MAX_MESSAGE_LENGTH take precedence over
    the file, overrides take precedence over both.
    """
    if config_path is None and os.getenv(CONFIG_PATH_ENV):
        config_path = Path(os.environ[CONFIG_PATH_ENV])

    settings: Dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        logger.info(f"Loading configuration from file: {config_path}")
        yaml_data = _expand_env_vars(load_yaml(config_path))

        if "terrors" not in yaml_data:
            raise errorf(Type.INVALID, "Invalid config file %s: missing 'terrors:' section", config_path)
        settings = dict(yaml_data["terrors"] or {})

    for key in ("log_level", "log_verbose", "max_message_length"):
        env_value = os.getenv(f"TERRORS_{key.upper()}")
        if env_value:
            settings[key] = env_value

    if overrides:
        logger.debug(f"Applying overrides: {list(overrides.keys())}")
        settings.update(overrides)

    config = TerrorsConfig(
        log_level=str(settings.get("log_level", "ERROR")),
        log_verbose=_to_bool(settings.get("log_verbose", False), "log_verbose"),
        max_message_length=_to_int(settings.get("max_message_length", 500), "max_message_length"),
    )
    logger.debug(
        f"Configuration loaded: log_level={config.log_level} "
        f"log_verbose={config.log_verbose} max_message_length={config.max_message_length}"
    )
    return config
