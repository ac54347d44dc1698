"""
Visualization module for estimation results.

This module contains functions for:
- Plotting comparison audiograms
- Plotting threshold progression with age
- Printing metric cards and frequency grids
"""

from .audiogram_plots import *
from .report_printing import *
