"""Print median and 95th percentile norms by decade for both sexes."""

import pandas as pd

from arhl_engine.analysis.estimation import estimate_age_curve
from arhl_engine.utils.defaults import FREQUENCIES, PTA_COMPONENTS, SEXES

def main():
    ages = range(20, 81, 10)
    frames = []
    for sex in SEXES:
        for metric in list(FREQUENCIES) + list(PTA_COMPONENTS):
            curve = estimate_age_curve(sex, metric, ages)
            curve['sex'] = sex
            curve['metric'] = str(metric)
            frames.append(curve)

    norms = pd.concat(frames, ignore_index=True)
    pivot = norms.pivot_table(index=['sex', 'metric'], columns='age', values='median')
    print(pivot.round(1).to_string())

if __name__ == "__main__":
    main()
