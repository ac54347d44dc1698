"""
Utility module for common functions and constants.

This module contains:
- Default values and constants

Configuration loading lives in ``arhl_engine.utils.config`` and is imported
directly, since it depends on the analysis package.
"""

from .defaults import *
