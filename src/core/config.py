"""
Settings for the command line shell.

Plain module-level constants. Only the log level can be overridden, through the environment.
"""

import os

LOG_LEVEL = os.environ.get("KNIGHT_PATH_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

PROMPT = "Start coordinate and end coordinate (ex. a1h7): "
