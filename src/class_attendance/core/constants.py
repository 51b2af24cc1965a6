"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DB_PORT = 3306
DEFAULT_POOL_NAME = "class_attendance"
DEFAULT_POOL_SIZE = 5
DEFAULT_ISOLATION_LEVEL = "REPEATABLE READ"

# Upper bound of the INT id columns in schema.sql.
MAX_ID = 2147483647
