#!/usr/bin/env python3
"""
Estimate age-related hearing thresholds and compare them with a patient.

Prints the PTA 5123 / PTA 234 cards and the per-frequency grid, and can
plot the comparison audiogram or export the table as CSV.
"""

import argparse
import sys
from pathlib import Path

import matplotlib.pyplot as plt

# Add the package to the path
sys.path.append(str(Path(__file__).parent.parent))

from arhl_engine.analysis.comparison import composite_summaries, frequency_comparison_table
from arhl_engine.analysis.patient import update_threshold
from arhl_engine.utils.config import load_config, validate_config
from arhl_engine.utils.defaults import SEXES
from arhl_engine.visualization.audiogram_plots import plot_comparison_audiogram
from arhl_engine.visualization.report_printing import (
    print_asha_scale,
    print_frequency_grid,
    print_metric_card
)


def parse_threshold_arg(text):
    """Split a FREQ=DB command line entry."""
    freq, sep, value = text.partition('=')
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected FREQ=DB, got {text!r}")
    return freq.strip(), value.strip()


def build_parser():
    parser = argparse.ArgumentParser(description='Estimate age-related hearing loss thresholds')
    parser.add_argument('--config', type=str, default=None,
                       help='Path to YAML configuration file')
    parser.add_argument('--sex', type=str.lower, choices=SEXES,
                       help='Patient sex')
    parser.add_argument('--age', type=float,
                       help='Patient age in years (clamped to 20-80)')
    parser.add_argument('--threshold', type=parse_threshold_arg, action='append', default=[],
                       metavar='FREQ=DB',
                       help='Patient threshold, e.g. 2000=35 (repeatable)')
    parser.add_argument('--clear', action='store_true',
                       help='Ignore thresholds from the configuration file')
    parser.add_argument('--plot', action='store_true',
                       help='Show the comparison audiogram')
    parser.add_argument('--save-plot', type=str,
                       help='Save the comparison audiogram to this path')
    parser.add_argument('--csv', type=str,
                       help='Write the per-frequency table to this CSV file')
    parser.add_argument('--scale', action='store_true',
                       help='Print the ASHA severity scale')
    return parser


def apply_overrides(config, args):
    """Override configuration values with command line arguments."""
    patient = config['patient']
    if args.sex:
        patient['sex'] = args.sex
    if args.age is not None:
        patient['age'] = args.age
    if args.clear:
        patient['thresholds'] = {}
    for freq, value in args.threshold:
        patient['thresholds'] = update_threshold(patient['thresholds'], freq, value)
    if args.plot:
        config['output']['plot'] = True
    if args.save_plot:
        config['output']['save_plot'] = args.save_plot
    if args.csv:
        config['output']['csv'] = args.csv
    return validate_config(config)


def run_estimation(config):
    """Compute and report the comparison for one configured patient."""
    patient = config['patient']
    output = config['output']
    sex, age, thresholds = patient['sex'], patient['age'], patient['thresholds']

    print(f"ARHL estimates for a {age} year old {sex}")

    summaries = composite_summaries(sex, age, thresholds)
    for summary in summaries.values():
        print_metric_card(summary)

    table = frequency_comparison_table(sex, age, thresholds)
    if output.get('table', True):
        print_frequency_grid(table)

    if output.get('csv'):
        export = table.assign(median_band=table['median_band'].map(lambda b: b.label),
                              patient_band=table['patient_band'].map(lambda b: b.label if b else None))
        export.to_csv(output['csv'], index=False)
        print(f"\nTable written to {output['csv']}")

    if output.get('plot') or output.get('save_plot'):
        fig = plot_comparison_audiogram(table, title=f"Comparison Audiogram ({sex}, {age})",
                                        show=False)
        if output.get('save_plot'):
            fig.savefig(output['save_plot'], bbox_inches='tight')
            print(f"Audiogram saved to {output['save_plot']}")
        if output.get('plot'):
            plt.show()
        plt.close(fig)

    return summaries, table


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
        run_estimation(config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.scale:
        print_asha_scale()
    return 0


if __name__ == "__main__":
    sys.exit(main())
