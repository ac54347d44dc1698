"""Console rendering of estimation results."""

from ..analysis.severity import SeverityBand

PLACEHOLDER = "--"


def _fmt(value, precision=1):
    if value is None:
        return PLACEHOLDER
    return f"{value:.{precision}f}"


def print_metric_card(summary):
    """Print one composite index card (median, 95th %ile, patient)."""
    header = summary.title.upper()
    if summary.patient_band is not None:
        header += f"  [ASHA: {summary.patient_band.label}]"
    print(f"\n{header}")
    print("-" * 40)
    print(f"{'Median':<10} {_fmt(summary.median):>6} dB  ({summary.median_band.label})")
    print(f"{'95th %ile':<10} {_fmt(summary.p95):>6} dB")
    print(f"{'Patient':<10} {_fmt(summary.patient):>6} dB")


def print_frequency_grid(table):
    """Print the per-frequency comparison table."""
    print("\nFreq  |  Med |  95% | User | Band")
    print("-" * 40)
    for row in table.itertuples(index=False):
        band = row.patient_band.label if row.patient_band is not None else PLACEHOLDER
        # Display only; the 95th estimate itself is not floored
        p95 = max(0.0, row.p95)
        print(f"{row.label:>5} | {_fmt(row.median, 0):>4} | {_fmt(p95, 0):>4} | "
              f"{_fmt(row.patient, 0):>4} | {band}")


def print_asha_scale():
    """Print the ASHA degree of hearing loss reference scale."""
    print("\nASHA Degree of Hearing Loss")
    print("-" * 40)
    for band in SeverityBand.asha_scale():
        print(f"{band.label:<11} {band.range_label:>6} dB")
