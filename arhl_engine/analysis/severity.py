"""ASHA degree of hearing loss classification."""

from enum import Enum
from typing import List, Optional

from ..utils.defaults import ASHA_UPPER_BOUNDS


class SeverityBand(Enum):
    NORMAL = 'Normal'
    SLIGHT = 'Slight'
    MILD = 'Mild'
    MODERATE = 'Moderate'
    MODERATELY_SEVERE = 'Mod-Severe'
    SEVERE = 'Severe'
    PROFOUND = 'Profound'

    @property
    def label(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Position on the scale, 0 for Normal up to 6 for Profound."""
        return list(SeverityBand).index(self)

    @property
    def upper_bound(self) -> Optional[float]:
        """Inclusive upper bound in dB HL, None for the unbounded Profound band."""
        return ASHA_UPPER_BOUNDS.get(self.value)

    @property
    def range_label(self) -> str:
        """Range as shown on the reference scale, e.g. '16-25' or '91+'."""
        if self.rank == 0:
            return f"0-{self.upper_bound}"
        lower = SeverityBand.asha_scale()[self.rank - 1].upper_bound + 1
        if self.upper_bound is None:
            return f"{lower}+"
        return f"{lower}-{self.upper_bound}"

    @property
    def color(self) -> str:
        return _BAND_COLORS[self]

    @classmethod
    def from_db(cls, db: float) -> 'SeverityBand':
        return classify_severity(db)

    @classmethod
    def asha_scale(cls) -> List['SeverityBand']:
        return list(cls)


_BAND_COLORS = {
    SeverityBand.NORMAL: '#10b981',
    SeverityBand.SLIGHT: '#14b8a6',
    SeverityBand.MILD: '#f59e0b',
    SeverityBand.MODERATE: '#f97316',
    SeverityBand.MODERATELY_SEVERE: '#f43f5e',
    SeverityBand.SEVERE: '#dc2626',
    SeverityBand.PROFOUND: '#9333ea'
}


def classify_severity(db: float) -> SeverityBand:
    """
    Classify a threshold on the ASHA scale.

    Upper bounds are inclusive (15, 25, 40, 55, 70, 90). Values at or below
    15 dB, negatives included, are Normal; anything above 90 dB is Profound.

    Args:
        db (float): Hearing threshold in dB HL.

    Returns:
        SeverityBand: The band the threshold falls into.
    """
    for band in SeverityBand:
        if band.upper_bound is None or db <= band.upper_bound:
            return band
    return SeverityBand.PROFOUND
