"""Side-by-side comparison of population norms and patient thresholds."""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import pandas as pd

from .estimation import compute_composite_index, compute_frequency_estimate
from .patient import compute_patient_composite
from .severity import SeverityBand, classify_severity
from ..utils.defaults import FREQUENCIES, PTA_COMPONENTS, PTA_TITLES


@dataclass(frozen=True)
class CompositeSummary:
    """Contents of one composite index card."""
    index_name: str
    title: str
    median: float
    p95: float
    patient: Optional[float]
    median_band: SeverityBand
    patient_band: Optional[SeverityBand]


def frequency_label(frequency: int) -> str:
    """Short axis label: 500 stays '500', 2000 becomes '2k'."""
    if frequency < 1000:
        return str(frequency)
    khz = frequency / 1000
    return f"{khz:g}k"


def frequency_comparison_table(sex: str, age: float,
                               thresholds: Optional[Mapping[int, Optional[float]]] = None) -> pd.DataFrame:
    """
    Tabulate population estimates next to the patient's thresholds.

    Args:
        sex (str): 'male' or 'female'.
        age (float): Age in years.
        thresholds (dict): Frequency to patient threshold, None where absent.

    Returns:
        pd.DataFrame: One row per frequency with columns 'frequency', 'label',
        'median', 'p95', 'patient', 'median_band' and 'patient_band'.
    """
    thresholds = thresholds or {}
    rows = []
    for freq in FREQUENCIES:
        estimate = compute_frequency_estimate(sex, freq, age)
        patient = thresholds.get(freq)
        rows.append({
            'frequency': freq,
            'label': frequency_label(freq),
            'median': estimate.median,
            'p95': estimate.p95,
            'patient': patient,
            'median_band': classify_severity(estimate.median),
            'patient_band': classify_severity(patient) if patient is not None else None
        })
    table = pd.DataFrame(rows, columns=['frequency', 'label', 'median', 'p95',
                                        'patient', 'median_band', 'patient_band'])
    # Keep absent entries as None rather than NaN
    table['patient'] = pd.Series([row['patient'] for row in rows], dtype=object)
    return table


def composite_summaries(sex: str, age: float,
                        thresholds: Optional[Mapping[int, Optional[float]]] = None) -> Dict[str, CompositeSummary]:
    """Build the PTA 5123 and PTA 234 cards, in display order."""
    thresholds = thresholds or {}
    summaries = {}
    for index_name in PTA_COMPONENTS:
        estimate = compute_composite_index(sex, index_name, age)
        patient = compute_patient_composite(thresholds, index_name)
        summaries[index_name] = CompositeSummary(
            index_name=index_name,
            title=PTA_TITLES[index_name],
            median=estimate.median,
            p95=estimate.p95,
            patient=patient,
            median_band=classify_severity(estimate.median),
            patient_band=classify_severity(patient) if patient is not None else None
        )
    return summaries
