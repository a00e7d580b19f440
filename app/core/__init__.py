"""
Core utilities package.

Logging setup shared by host applications and the test suite.
"""

from .logger import setup_logger

__all__ = ['setup_logger']
