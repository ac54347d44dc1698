"""
ARHL Engine - age-related hearing loss estimates from NHANES regression models
"""

__version__ = "0.1.0"

# Import main functions for easy access
from .analysis.estimation import (
    EstimationResult,
    apply_model,
    compute_frequency_estimate,
    compute_composite_index
)
from .analysis.severity import SeverityBand, classify_severity
from .analysis.patient import compute_patient_composite

__all__ = [
    "EstimationResult",
    "apply_model",
    "compute_frequency_estimate",
    "compute_composite_index",
    "SeverityBand",
    "classify_severity",
    "compute_patient_composite"
]
