"""
Patient audiogram entries and patient composite pure-tone averages.

Thresholds are held as a plain dict mapping each test frequency to a dB HL
value, or None where nothing has been entered.
"""
import math
from typing import Dict, Mapping, Optional, Union

from ..utils.defaults import FREQUENCIES, PTA_COMPONENTS

EntryType = Union[int, float, str, None]
ThresholdsDict = Dict[int, Optional[float]]


def empty_thresholds() -> ThresholdsDict:
    """Cleared entry state: every frequency absent."""
    return {freq: None for freq in FREQUENCIES}


def parse_threshold_entry(value: EntryType) -> Optional[float]:
    """
    Convert a free-form entry into a threshold.

    Args:
        value: Number, numeric text, blank text or None.

    Returns:
        float or None: The threshold in dB HL, None for a blank entry.

    Raises:
        ValueError: If the entry is not numeric or not finite.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
    if isinstance(value, bool):
        raise ValueError(f"Threshold must be numeric, got {value!r}")
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Threshold must be numeric, got {value!r}")
    if not math.isfinite(threshold):
        raise ValueError(f"Threshold must be finite, got {value!r}")
    return threshold


def _parse_frequency(key) -> int:
    try:
        freq = int(key)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid frequency: {key!r}")
    if freq not in FREQUENCIES:
        raise ValueError(f"Unsupported frequency {freq} Hz. Expected one of {FREQUENCIES}")
    return freq


def parse_patient_thresholds(entries: Optional[Mapping]) -> ThresholdsDict:
    """
    Build a complete thresholds dict from raw entries.

    Keys may be ints or numeric strings (as read from YAML or the command
    line). Frequencies without an entry are absent.

    Raises:
        ValueError: If ``entries`` is not a mapping, or for an invalid entry.
    """
    if entries is None:
        entries = {}
    if not isinstance(entries, Mapping):
        raise ValueError(f"Thresholds must be a mapping of frequency to dB HL, got {entries!r}")
    thresholds = empty_thresholds()
    for key, value in entries.items():
        thresholds[_parse_frequency(key)] = parse_threshold_entry(value)
    return thresholds


def update_threshold(thresholds: Mapping[int, Optional[float]], frequency,
                     value: EntryType) -> ThresholdsDict:
    """Return a copy of ``thresholds`` with a single frequency replaced."""
    updated = dict(thresholds)
    updated[_parse_frequency(frequency)] = parse_threshold_entry(value)
    return updated


def compute_patient_composite(thresholds: Mapping[int, Optional[float]],
                              index_name: str) -> Optional[float]:
    """
    Patient pure-tone average for a composite index.

    PTA 5123 averages 500, 1000, 2000 and 3000 Hz; PTA 234 averages 2000,
    3000 and 4000 Hz. The average is only defined when every contributing
    frequency has a value, otherwise None is returned (no partial average).

    Args:
        thresholds (dict): Frequency (Hz) to threshold (dB HL) or None.
        index_name (str): 'pta5123' or 'pta234'.

    Returns:
        float or None: Mean threshold in dB HL.
    """
    try:
        components = PTA_COMPONENTS[index_name]
    except KeyError:
        raise ValueError(f"Unrecognized index: {index_name}. Expected one of {list(PTA_COMPONENTS)}.")

    values = [thresholds.get(freq) for freq in components]
    if any(v is None for v in values):
        return None
    return sum(values) / len(values)
