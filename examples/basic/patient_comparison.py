"""Example comparison of a patient audiogram against age norms."""

from arhl_engine.analysis.comparison import composite_summaries, frequency_comparison_table
from arhl_engine.analysis.patient import parse_patient_thresholds
from arhl_engine.visualization.audiogram_plots import plot_comparison_audiogram, plot_age_progression
from arhl_engine.visualization.report_printing import (
    print_asha_scale,
    print_frequency_grid,
    print_metric_card
)

def main():
    # Entries as typed into the audiogram form, 8k not tested
    patient_entries = {
        500: "15",
        1000: "20",
        2000: "25",
        3000: "40",
        4000: "55",
        6000: "60",
        8000: ""
    }
    sex = 'male'
    age = 62

    thresholds = parse_patient_thresholds(patient_entries)

    for summary in composite_summaries(sex, age, thresholds).values():
        print_metric_card(summary)

    table = frequency_comparison_table(sex, age, thresholds)
    print_frequency_grid(table)
    print_asha_scale()

    plot_comparison_audiogram(table, f"Comparison Audiogram ({sex}, {age})")
    plot_age_progression(sex, 4000, patient_value=thresholds[4000], age=age)

if __name__ == "__main__":
    main()
