import pytest

from arhl_engine.analysis.comparison import (
    composite_summaries,
    frequency_comparison_table,
    frequency_label
)
from arhl_engine.analysis.estimation import compute_frequency_estimate
from arhl_engine.analysis.patient import parse_patient_thresholds
from arhl_engine.analysis.severity import SeverityBand, classify_severity
from arhl_engine.utils.defaults import FREQUENCIES, SEXES


def test_frequency_labels():
    assert [frequency_label(f) for f in FREQUENCIES] == ['500', '1k', '2k', '3k', '4k', '6k', '8k']
    assert frequency_label(1500) == '1.5k'


def test_table_without_patient():
    table = frequency_comparison_table('female', 45)
    assert table['frequency'].tolist() == FREQUENCIES
    assert table['patient'].tolist() == [None] * len(FREQUENCIES)
    assert table['patient_band'].tolist() == [None] * len(FREQUENCIES)
    expected = compute_frequency_estimate('female', 6000, 45)
    row = table[table['frequency'] == 6000].iloc[0]
    assert row['median'] == pytest.approx(expected.median)
    assert row['p95'] == pytest.approx(expected.p95)
    assert row['median_band'] is classify_severity(expected.median)


def test_table_with_partial_patient():
    thresholds = parse_patient_thresholds({500: 10, 4000: 58})
    table = frequency_comparison_table('male', 60, thresholds).set_index('frequency')
    assert table.loc[500, 'patient'] == 10.0
    assert table.loc[500, 'patient_band'] is SeverityBand.NORMAL
    assert table.loc[4000, 'patient_band'] is SeverityBand.MODERATELY_SEVERE
    assert table.loc[1000, 'patient'] is None
    assert table.loc[1000, 'patient_band'] is None


@pytest.mark.parametrize('sex', SEXES)
@pytest.mark.parametrize('age', [20, 35, 50, 65, 80])
def test_median_fed_back_as_patient_keeps_band(sex, age):
    norms = frequency_comparison_table(sex, age)
    thresholds = dict(zip(norms['frequency'], norms['median']))
    table = frequency_comparison_table(sex, age, thresholds)
    assert table['patient_band'].tolist() == table['median_band'].tolist()


def test_composite_summaries_without_patient():
    summaries = composite_summaries('male', 50)
    assert list(summaries) == ['pta5123', 'pta234']
    card = summaries['pta5123']
    assert card.title == 'PTA 5123 (Speech)'
    assert card.median == pytest.approx(12.0)
    assert card.p95 == pytest.approx(31.55)
    assert card.median_band is SeverityBand.NORMAL
    assert card.patient is None
    assert card.patient_band is None
    assert summaries['pta234'].title == 'PTA 234 (OSHA STS)'


def test_composite_summaries_with_patient():
    thresholds = parse_patient_thresholds({500: 10, 1000: 20, 2000: 30, 3000: 40})
    summaries = composite_summaries('female', 70, thresholds)
    assert summaries['pta5123'].patient == pytest.approx(25.0)
    assert summaries['pta5123'].patient_band is SeverityBand.SLIGHT
    # 4 kHz missing
    assert summaries['pta234'].patient is None
