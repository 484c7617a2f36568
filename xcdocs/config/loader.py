"""Configuration loading with fail-fast behavior.

Sources, first match wins:
1. An explicit path (--config)
2. The file named by $XCDOCS_CONFIG
3. ~/.xcdocs/config.json, if it exists
4. Pydantic defaults
"""

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from xcdocs.config.load_utils import read_json_object, read_json_object_if_exists
from xcdocs.config.schema import Config
from xcdocs.core.constants import CONFIG_ENV_VAR, get_default_config_path
from xcdocs.core.errors import ConfigError, LoadError

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None) -> Config:
    """Load and validate configuration.

    Args:
        path: Explicit config file path. Must exist if given.

    Returns:
        Validated, immutable Config object.

    Raises:
        ConfigError: If a config file is missing (explicit path or env var),
            contains invalid JSON, or fails validation.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)

    if path is not None:
        return _load_from_path(path)

    home_config = get_default_config_path()
    try:
        data = read_json_object_if_exists(home_config, "config")
    except LoadError as e:
        raise ConfigError(e.message) from e

    if not data:
        logger.debug("No config file at %s, using defaults", home_config)
        return Config()

    logger.info("Config loaded from: %s", home_config)
    return _validate(data, home_config)


def _load_from_path(path: Path) -> Config:
    """Load and validate config from a specific path.

    Raises:
        ConfigError: If file doesn't exist, contains invalid JSON, or fails validation.
    """
    try:
        data = read_json_object(path, "config")
    except LoadError as e:
        raise ConfigError(e.message) from e

    logger.info("Config loaded from: %s", path)
    return _validate(data, path)


def _validate(data: dict, source: Path) -> Config:
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {source}: {e}") from e
