"""Configuration package for cmdbundle.

Exposes the constants from `config.settings` at package level so callers can
write `from config import LOG_LEVEL`. Keep the values in `settings.py`.
"""

from .settings import (
	MAPPING_SEPARATOR, MAPPING_MAX_PARTS, TRAILING_SEPARATOR, DISPATCH_FAILURE_EXIT_CODE,
	LOG_LEVEL, LOG_FORMAT, CONTEXT_SETTINGS
)

__all__ = [
	'MAPPING_SEPARATOR', 'MAPPING_MAX_PARTS', 'TRAILING_SEPARATOR', 'DISPATCH_FAILURE_EXIT_CODE',
	'LOG_LEVEL', 'LOG_FORMAT', 'CONTEXT_SETTINGS'
]
