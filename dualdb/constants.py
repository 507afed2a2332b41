#!/usr/bin/env python3
"""
Application Constants

This module contains the connection defaults, DSN options
and pool policy used throughout the dualdb package.
"""

# Connection defaults applied when a variable is unset or empty
DEFAULT_DB_HOST = "localhost"
DEFAULT_OLTP_DB_PORT = "3306"
DEFAULT_OLAP_DB_PORT = "3307"
DEFAULT_DB_USER = "root"
DEFAULT_DB_PASSWORD = "password"
DEFAULT_OLTP_DB_NAME = "oltp_db"
DEFAULT_OLAP_DB_NAME = "olap_db"

# Fixed DSN connection options
DSN_PROTOCOL = "tcp"
DSN_OPTIONS = "parseTime=true&charset=utf8mb4"
DEFAULT_CHARSET = "utf8mb4"

# SQLAlchemy dialect used for DSN-built engines
SQLALCHEMY_DRIVER = "mysql+pymysql"

# Connection pool policy (not tunable per call)
MAX_OPEN_CONNECTIONS = 25
MAX_IDLE_CONNECTIONS = 5

# Query used for the startup liveness check
PING_QUERY = "SELECT 1"

# Optional dotenv file loaded before reading the environment
DOTENV_FILE = ".env.local"
