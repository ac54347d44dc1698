"""
Regression model tables.

This module contains:
- Median and 95th percentile coefficients per frequency
- Coefficients for the composite pure-tone averages
"""

from .coefficients import ModelCoefficients, MODEL_TABLE, get_coefficients, has_model

__all__ = ["ModelCoefficients", "MODEL_TABLE", "get_coefficients", "has_model"]
