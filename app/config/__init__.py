"""
Configuration package.

Exposes the Settings class that the formatters read their defaults
(locale, timezone, output limit, log level) from.
"""

from .settings import Settings, env_bool, env_int

__all__ = ['Settings', 'env_bool', 'env_int']
