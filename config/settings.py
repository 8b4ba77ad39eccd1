"""Project configuration settings.

Constants used by the mapping parser, the synthesized command group and the
CLI. Environment overrides are read once at import time.
"""

import logging
import os

# Mapping syntax: name:path[:description]
MAPPING_SEPARATOR = ':'
MAPPING_MAX_PARTS = 3

# Everything after this token is handed to the synthesized command
TRAILING_SEPARATOR = '--'

# Exit status when an exec failure carries no errno
DISPATCH_FAILURE_EXIT_CODE = 1

# Logging (stderr only; stdout belongs to help text and the target program)
def resolve_log_level(value: str, default: str = "WARNING") -> str:
	"""Level name for `value`, or `default` when logging does not know it."""
	value = (value or "").strip().upper()
	return value if isinstance(logging.getLevelName(value), int) else default

LOG_LEVEL = resolve_log_level(os.environ.get("CMDBUNDLE_LOG_LEVEL", "WARNING"))
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Shared by the outer command and every synthesized command
CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

__all__ = [
	'MAPPING_SEPARATOR','MAPPING_MAX_PARTS','TRAILING_SEPARATOR','DISPATCH_FAILURE_EXIT_CODE',
	'LOG_LEVEL','LOG_FORMAT','CONTEXT_SETTINGS','resolve_log_level'
]
