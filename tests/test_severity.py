import numpy as np
import pytest

from arhl_engine.analysis.severity import SeverityBand, classify_severity


@pytest.mark.parametrize('db, label', [
    (15, 'Normal'),
    (16, 'Slight'),
    (25, 'Slight'),
    (26, 'Mild'),
    (40, 'Mild'),
    (41, 'Moderate'),
    (55, 'Moderate'),
    (56, 'Mod-Severe'),
    (70, 'Mod-Severe'),
    (71, 'Severe'),
    (90, 'Severe'),
    (91, 'Profound'),
])
def test_band_boundaries(db, label):
    assert classify_severity(db).label == label


def test_fractional_values_just_above_bound():
    assert classify_severity(15.1) is SeverityBand.SLIGHT
    assert classify_severity(90.01) is SeverityBand.PROFOUND


def test_negative_values_are_normal():
    assert classify_severity(-10) is SeverityBand.NORMAL


def test_profound_is_unbounded():
    assert classify_severity(1e6) is SeverityBand.PROFOUND
    assert SeverityBand.PROFOUND.upper_bound is None


def test_classification_is_monotonic():
    ranks = [classify_severity(db).rank for db in np.arange(-20, 130, 0.5)]
    assert ranks == sorted(ranks)
    assert ranks[0] == 0
    assert ranks[-1] == 6


def test_scale_order_and_ranges():
    scale = SeverityBand.asha_scale()
    assert [band.label for band in scale] == [
        'Normal', 'Slight', 'Mild', 'Moderate', 'Mod-Severe', 'Severe', 'Profound'
    ]
    assert [band.range_label for band in scale] == [
        '0-15', '16-25', '26-40', '41-55', '56-70', '71-90', '91+'
    ]


def test_from_db_matches_classify():
    assert SeverityBand.from_db(42) is classify_severity(42)


def test_every_band_has_a_color():
    for band in SeverityBand:
        assert band.color.startswith('#')
