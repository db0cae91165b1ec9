"""
Global constants used throughout the project
"""

import os

LOG_FORMAT = "%(levelname)s | %(message)s"
DEFAULT_LOG_LEVEL = "INFO"

# Overridable from the environment, e.g. LEVELWISE_LOG_LEVEL=DEBUG
LOG_LEVEL = os.getenv("LEVELWISE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
