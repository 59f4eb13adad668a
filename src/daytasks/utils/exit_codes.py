"""
Exit codes for DayTasks.

Semantic exit codes so scripts can tell what happened.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Resource not found (e.g. unknown config key)
ERROR_NOT_FOUND = 5

# Permission denied (e.g. calendar access refused)
ERROR_PERMISSION_DENIED = 6

