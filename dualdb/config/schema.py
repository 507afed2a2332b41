"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema for the OLTP and
OLAP connection targets. Each field names the environment variable it is
read from; field defaults apply when that variable is unset or empty.
"""

from pydantic import BaseModel, Field

from ..constants import (
    DEFAULT_DB_HOST,
    DEFAULT_DB_PASSWORD,
    DEFAULT_DB_USER,
    DEFAULT_OLAP_DB_NAME,
    DEFAULT_OLAP_DB_PORT,
    DEFAULT_OLTP_DB_NAME,
    DEFAULT_OLTP_DB_PORT,
)
from ..models import DatabaseConfig


class DatabaseSchema(BaseModel):
    """Base schema shared by both connection targets."""

    host: str
    port: str
    user: str
    password: str
    name: str

    model_config = {
        "validate_assignment": True,
        "extra": "forbid",
    }

    def to_database_config(self) -> DatabaseConfig:
        """Convert the validated schema into an immutable DatabaseConfig."""
        return DatabaseConfig(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            name=self.name,
        )


class OltpDatabaseSchema(DatabaseSchema):
    """Transactional database target (``OLTP_DB_*``)."""

    host: str = Field(
        DEFAULT_DB_HOST,
        description="OLTP database hostname",
        json_schema_extra={"env_var": "OLTP_DB_HOST"},
    )

    port: str = Field(
        DEFAULT_OLTP_DB_PORT,
        description="OLTP database port",
        json_schema_extra={"env_var": "OLTP_DB_PORT"},
    )

    user: str = Field(
        DEFAULT_DB_USER,
        description="OLTP database user",
        json_schema_extra={"env_var": "OLTP_DB_USER"},
    )

    password: str = Field(
        DEFAULT_DB_PASSWORD,
        description="OLTP database password",
        json_schema_extra={"env_var": "OLTP_DB_PASSWORD", "sensitive": True},
    )

    name: str = Field(
        DEFAULT_OLTP_DB_NAME,
        description="OLTP database name",
        json_schema_extra={"env_var": "OLTP_DB_NAME"},
    )


class OlapDatabaseSchema(DatabaseSchema):
    """Analytical database target (``OLAP_DB_*``)."""

    host: str = Field(
        DEFAULT_DB_HOST,
        description="OLAP database hostname",
        json_schema_extra={"env_var": "OLAP_DB_HOST"},
    )

    port: str = Field(
        DEFAULT_OLAP_DB_PORT,
        description="OLAP database port",
        json_schema_extra={"env_var": "OLAP_DB_PORT"},
    )

    user: str = Field(
        DEFAULT_DB_USER,
        description="OLAP database user",
        json_schema_extra={"env_var": "OLAP_DB_USER"},
    )

    password: str = Field(
        DEFAULT_DB_PASSWORD,
        description="OLAP database password",
        json_schema_extra={"env_var": "OLAP_DB_PASSWORD", "sensitive": True},
    )

    name: str = Field(
        DEFAULT_OLAP_DB_NAME,
        description="OLAP database name",
        json_schema_extra={"env_var": "OLAP_DB_NAME"},
    )
