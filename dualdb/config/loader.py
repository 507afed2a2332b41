"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to automatically load, validate, and merge configuration from multiple sources.
"""

import logging
import os
from typing import Dict, Any, Optional, Mapping

from dotenv import load_dotenv
from pydantic import ValidationError

from ..constants import DOTENV_FILE
from .schema import DatabaseSchema


logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[DatabaseSchema],
        overrides: Optional[Mapping[str, Any]] = None,
        dotenv_path: Optional[str] = DOTENV_FILE,
    ) -> DatabaseSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env.local file (if it exists; never overrides the environment)
        3. OS environment variables
        4. Explicit overrides keyed by environment variable name

        Unset and empty values fall through to the next lower source. Any
        other value is used exactly as given.

        Args:
            schema: The configuration schema class to use
            overrides: Optional mapping of env var name -> value
            dotenv_path: Dotenv file to load first, or None to skip it

        Returns:
            Validated configuration instance

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        if dotenv_path:
            _load_from_dotenv_file(dotenv_path)

        for field_name, env_var in _env_vars(schema).items():
            env_value = os.getenv(env_var)
            if env_value:
                config_dict[field_name] = env_value

        if overrides:
            for field_name, env_var in _env_vars(schema).items():
                if env_var not in overrides or overrides[env_var] is None:
                    continue
                value = overrides[env_var]
                if value != "":
                    config_dict[field_name] = value

        try:
            config = schema(**config_dict)
            logger.debug(f"{schema.__name__} loaded and validated successfully")
            return config
        except ValidationError as e:
            env_vars = _env_vars(schema)
            errors = []
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else "?"
                env_var = env_vars.get(field, str(field).upper())
                errors.append(f"{env_var}: {error['msg']}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ValueError(error_msg) from e


def _env_vars(schema: type[DatabaseSchema]) -> Dict[str, str]:
    """Map schema field names to the environment variables they read."""
    result = {}
    for field_name, field_info in schema.model_fields.items():
        extra = field_info.json_schema_extra
        if isinstance(extra, dict) and extra.get("env_var"):
            result[field_name] = extra["env_var"]
    return result


def _load_from_dotenv_file(path: str) -> None:
    """Load values from a dotenv file if it exists."""
    if os.path.exists(path):
        load_dotenv(path, override=False)
        logger.debug(f"Loaded configuration from {path} file")
    else:
        logger.debug(f"{path} file not found, skipping")
