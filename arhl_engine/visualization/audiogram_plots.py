"""Plots comparing population norms with patient thresholds."""

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns

from ..analysis.estimation import estimate_age_curve
from ..analysis.severity import SeverityBand
from ..utils.defaults import CHART_MIN_DB, CHART_MAX_DB, CHART_TICK_STEP, MIN_AGE, MAX_AGE


def plot_comparison_audiogram(table, title="Comparison Audiogram", ax=None, show=True):
    """
    Plot median and 95th percentile norms against the patient's audiogram.

    Frequencies are spaced evenly, as on a clinical audiogram form, and the
    y axis runs from 0 dB HL at the top down to 120 dB HL.

    Args:
        table (pd.DataFrame): Output of frequency_comparison_table.
        title (str): Axes title.
        ax (matplotlib.axes.Axes): Axes to draw on. A new figure is created if None.
        show (bool): Call plt.show() when done.

    Returns:
        matplotlib.figure.Figure: The figure drawn on.
    """
    palette = sns.color_palette("deep")
    median_color = palette[0]
    p95_color = palette[1]
    patient_color = palette[3]

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    else:
        fig = ax.figure

    x = np.arange(len(table))
    # Display only; the 95th estimates themselves are not floored
    p95 = np.clip(table['p95'].to_numpy(dtype=float), CHART_MIN_DB, None)

    ax.plot(x, table['median'], color=median_color, marker='o', markersize=4,
            lw=2, alpha=0.6, label='Median')
    ax.plot(x, p95, color=p95_color, marker='o', markersize=4,
            lw=2, linestyle='--', alpha=0.6, label='95th %ile')

    has_patient = table['patient'].notna().to_numpy()
    patient_x = x[has_patient]
    patient_y = table.loc[has_patient, 'patient'].to_numpy(dtype=float)
    if len(patient_x) > 1:
        ax.plot(patient_x, patient_y, color=patient_color, lw=3, label='Patient')
    if len(patient_x) > 0:
        ax.plot(patient_x, patient_y, color=patient_color, marker='o', markersize=9,
                linestyle='none', label='_nolegend_' if len(patient_x) > 1 else 'Patient')

    ax.set_xticks(x)
    ax.set_xticklabels(table['label'])
    ax.set_yticks(np.arange(CHART_MIN_DB, CHART_MAX_DB + 1, CHART_TICK_STEP))
    ax.set_ylim(CHART_MAX_DB, CHART_MIN_DB)
    ax.set_xlabel('Frequency (Hz)')
    ax.set_ylabel('Hearing Thresholds (dB HL)')
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)
    ax.legend(loc='lower left')

    if show:
        plt.show()
    return fig


def plot_age_progression(sex, metric, patient_value=None, age=None, ax=None, show=True):
    """
    Plot median and 95th percentile curves across the fitted age range,
    over the ASHA severity bands.

    Args:
        sex (str): 'male' or 'female'.
        metric (int or str): Frequency in Hz or composite index name.
        patient_value (float): Optional patient threshold to mark at ``age``.
        age (float): Age at which to mark the patient value.
        ax (matplotlib.axes.Axes): Axes to draw on.
        show (bool): Call plt.show() when done.

    Returns:
        matplotlib.figure.Figure: The figure drawn on.
    """
    curve = estimate_age_curve(sex, metric)
    palette = sns.color_palette("deep")

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    else:
        fig = ax.figure

    lower = CHART_MIN_DB
    for band in SeverityBand.asha_scale():
        upper = band.upper_bound if band.upper_bound is not None else CHART_MAX_DB
        ax.axhspan(lower, upper, color=band.color, alpha=0.08, lw=0)
        ax.text(MAX_AGE, (lower + upper) / 2, band.label, fontsize=8,
                ha='right', va='center', color=band.color)
        lower = upper

    ax.plot(curve['age'], curve['median'], color=palette[0], lw=2, label='Median')
    ax.plot(curve['age'], curve['p95'], color=palette[1], lw=2, linestyle='--', label='95th %ile')

    if patient_value is not None and age is not None:
        ax.plot([age], [patient_value], color=palette[3], marker='o', markersize=9,
                linestyle='none', label='Patient')

    name = f"{metric} Hz" if isinstance(metric, int) else metric.upper()
    ax.set_title(f"{name} ({sex})")
    ax.set_xlim(MIN_AGE, MAX_AGE)
    ax.set_ylim(CHART_MAX_DB, CHART_MIN_DB)
    ax.set_xlabel('Age (years)')
    ax.set_ylabel('Hearing Thresholds (dB HL)')
    ax.legend(loc='lower left')

    if show:
        plt.show()
    return fig
