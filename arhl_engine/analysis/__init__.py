"""
Analysis module for hearing threshold estimation.

This module contains functions for:
- Evaluating the age regression models
- ASHA severity classification
- Patient entry handling and composite averages
- Comparison of patient thresholds against population norms
"""

from .estimation import *
from .severity import *
from .patient import *
from .comparison import *
