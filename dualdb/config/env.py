"""
Environment configuration management module.

This module loads the OLTP and OLAP connection targets once per process
and serves them to the rest of the application.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..constants import DOTENV_FILE
from ..models import Config
from .loader import ConfigLoader
from .schema import OlapDatabaseSchema, OltpDatabaseSchema

logger = logging.getLogger(__name__)

# Module-level singleton instance
_CONFIG: Optional[Config] = None


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


def load(
    overrides: Optional[Mapping[str, Any]] = None,
    dotenv_path: Optional[str] = DOTENV_FILE,
) -> Config:
    """
    Load both connection targets from the environment.

    Every ``{OLTP,OLAP}_DB_{HOST,PORT,USER,PASSWORD,NAME}`` variable falls
    back to its default when unset or empty. Values are not validated
    beyond being text.

    Args:
        overrides: Optional mapping of env var name -> value (highest priority)
        dotenv_path: Dotenv file loaded before the environment, or None

    Returns:
        The loaded Config, also stored as the process-wide instance

    Raises:
        ConfigError: If a value fails schema validation
    """
    global _CONFIG

    try:
        oltp = ConfigLoader.load(OltpDatabaseSchema, overrides=overrides, dotenv_path=dotenv_path)
        olap = ConfigLoader.load(OlapDatabaseSchema, overrides=overrides, dotenv_path=dotenv_path)
    except ValueError as e:
        raise ConfigError(str(e)) from e

    _CONFIG = Config(oltp=oltp.to_database_config(), olap=olap.to_database_config())
    logger.debug(f"Database configuration loaded: oltp={_CONFIG.oltp.mask()} olap={_CONFIG.olap.mask()}")
    return _CONFIG


def current() -> Config:
    """
    Return the process-wide Config.

    Raises:
        ConfigError: If load() has not been called yet
    """
    if _CONFIG is None:
        raise ConfigError("Configuration not initialized. Call load() first.")
    return _CONFIG
