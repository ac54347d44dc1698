"""
Quadratic regression models for age-related hearing thresholds.

Coefficients are stored as (intercept, linear, quadratic) for the formula
``y = c + b*x + a*x**2`` where ``x`` is age in years. They were derived by
least squares quadratic regression on the NHANES population data analysed by
Hoffman et al. (Ear & Hearing 2010; 31: 725-734 and 2012; 33: 437-440), as
tabulated in the ARHL calculator spreadsheet by Robert Dobie, MD.
"""
from types import MappingProxyType
from typing import NamedTuple, Optional, Union

Metric = Union[int, str]  # frequency in Hz or composite index name


class ModelCoefficients(NamedTuple):
    """Immutable (intercept, linear, quadratic) triple of a regression curve."""
    intercept: float
    linear: float
    quadratic: float


_FREQUENCY_MODELS = {
    'male': {
        # Median
        (500, 'median'): (6.8, -0.09, 0.003),
        (1000, 'median'): (4.4, -0.17, 0.0044),
        (2000, 'median'): (4.2, -0.21, 0.0064),
        (3000, 'median'): (7.2, -0.55, 0.0139),
        (4000, 'median'): (9.6, -0.63, 0.0171),
        (6000, 'median'): (11.0, -0.56, 0.0171),
        (8000, 'median'): (5.2, -0.47, 0.0179),

        # 95th percentile, saturation correction applied from 3 kHz up
        (500, 'p95'): (18.2, -0.01, 0.0036),
        (1000, 'p95'): (12.6, 0.03, 0.005),
        (2000, 'p95'): (16.6, -0.11, 0.0107),
        (3000, 'p95'): (-15.2, 1.48, -0.0036),
        (4000, 'p95'): (-33.2, 2.76, -0.0164),
        (6000, 'p95'): (-35.0, 3.01, -0.0171),
        (8000, 'p95'): (-36.2, 2.92, -0.0157),
    },
    'female': {
        # Median
        (500, 'median'): (5.2, -0.05, 0.0018),
        (1000, 'median'): (4.4, -0.06, 0.0025),
        (2000, 'median'): (1.8, -0.04, 0.0040),
        (3000, 'median'): (1.2, -0.03, 0.0055),
        (4000, 'median'): (0.8, 0.02, 0.0065),
        (6000, 'median'): (2.0, 0.05, 0.0085),
        (8000, 'median'): (-1.0, 0.15, 0.0110),

        # 95th percentile, 2k/3k/4k share curvature so that 2k < 3k < 4k
        (500, 'p95'): (12.0, 0.05, 0.0015),
        (1000, 'p95'): (7.5, 0.15, 0.0035),
        (2000, 'p95'): (5.0, 0.05, 0.0085),
        (3000, 'p95'): (6.0, 0.1, 0.0085),
        (4000, 'p95'): (8.0, 0.15, 0.0085),
        # High frequency saturation
        (6000, 'p95'): (-8.0, 1.4, -0.003),
        (8000, 'p95'): (-10.0, 1.5, -0.002),
    }
}

_PTA_MODELS = {
    'male': {
        ('pta5123', 'median'): (3.65, -0.053, 0.0044),
        ('pta5123', 'p95'): (4.55, 0.22, 0.0064),
        ('pta234', 'median'): (6.2, -0.38, 0.0114),
        ('pta234', 'p95'): (-26.3, 2.06, -0.0096),
    },
    'female': {
        ('pta5123', 'median'): (6.2, -0.22, 0.0053),
        ('pta5123', 'p95'): (11.5, 0.05, 0.0045),
        ('pta234', 'median'): (3.5, -0.2, 0.0065),
        ('pta234', 'p95'): (5.0, 0.1, 0.01),
    }
}


def _build_table(*sources):
    table = {}
    for source in sources:
        for sex, models in source.items():
            for (metric, tier), coeffs in models.items():
                table[(sex, metric, tier)] = ModelCoefficients(*coeffs)
    return MappingProxyType(table)


# Read-only lookup keyed by (sex, metric, tier)
MODEL_TABLE = _build_table(_FREQUENCY_MODELS, _PTA_MODELS)


def get_coefficients(sex: str, metric: Metric, tier: str) -> Optional[ModelCoefficients]:
    """Return the model for (sex, metric, tier), or None if it is not tabulated."""
    return MODEL_TABLE.get((sex, metric, tier))


def has_model(sex: str, metric: Metric, tier: str) -> bool:
    """Check whether a model exists, so a 0 dB sentinel can be told apart from an estimate."""
    return (sex, metric, tier) in MODEL_TABLE
