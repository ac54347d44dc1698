"""
Population threshold estimates from the quadratic age regression models.
"""
# Standard library imports
from dataclasses import dataclass
from typing import Optional, Union

# Third-party imports
import numpy as np
import pandas as pd

# Local imports
from ..models.coefficients import Metric, ModelCoefficients, get_coefficients
from ..utils.defaults import MIN_AGE, MAX_AGE

AgeType = Union[int, float, np.ndarray]


@dataclass(frozen=True)
class EstimationResult:
    """Median and 95th percentile thresholds (dB HL) for one metric."""
    median: float
    p95: float


def apply_model(coefficients: Optional[ModelCoefficients], age: AgeType):
    """
    Evaluate a quadratic regression model: y = c + b*age + a*age**2.

    Age is not range checked; callers keep it within the fitted range.

    Args:
        coefficients (ModelCoefficients): Model triple, or None if unconfigured.
        age (float or np.ndarray): Age in years, scalar or array.

    Returns:
        float or np.ndarray: Threshold in dB HL. 0 when coefficients are None.
    """
    ages = np.asarray(age, dtype=float)
    if coefficients is None:
        values = np.zeros_like(ages)
    else:
        c, b, a = coefficients
        values = c + b * ages + a * ages ** 2
    if values.ndim == 0:
        return float(values)
    return values


def _estimate(sex: str, metric: Metric, age: float) -> EstimationResult:
    median = apply_model(get_coefficients(sex, metric, 'median'), age)
    p95 = apply_model(get_coefficients(sex, metric, 'p95'), age)
    # The 95th curve is left as fitted; high frequency models bend down on purpose
    return EstimationResult(median=max(0.0, median), p95=p95)


def compute_frequency_estimate(sex: str, frequency: int, age: float) -> EstimationResult:
    """Median (floored at 0) and 95th percentile threshold at a single frequency."""
    return _estimate(sex, frequency, age)


def compute_composite_index(sex: str, index_name: str, age: float) -> EstimationResult:
    """Median (floored at 0) and 95th percentile of a composite pure-tone average."""
    return _estimate(sex, index_name, age)


def estimate_age_curve(sex: str, metric: Metric, ages=None) -> pd.DataFrame:
    """
    Evaluate median and 95th percentile curves across a range of ages.

    Args:
        sex (str): 'male' or 'female'.
        metric (int or str): Frequency in Hz or composite index name.
        ages (array-like): Ages to evaluate. Defaults to every year of the fitted range.

    Returns:
        pd.DataFrame: Columns 'age', 'median' and 'p95'.
    """
    if ages is None:
        ages = np.arange(MIN_AGE, MAX_AGE + 1)
    ages = np.atleast_1d(np.asarray(ages, dtype=float))

    median = apply_model(get_coefficients(sex, metric, 'median'), ages)
    p95 = apply_model(get_coefficients(sex, metric, 'p95'), ages)

    return pd.DataFrame({
        'age': ages,
        'median': np.maximum(0.0, median),
        'p95': p95
    })
