"""Settings shared by every environment, read from environment variables."""

import os


def db_config_from_env(*, default_password: str = "", default_database: str = "class_attendance") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", default_database),
    }


DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
