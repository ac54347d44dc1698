"""Session configuration: YAML loading, validation and defaults."""

import copy
import math
from pathlib import Path

import yaml

from .defaults import DEFAULT_AGE, DEFAULT_SEX, MIN_AGE, MAX_AGE, SEXES
from ..analysis.patient import parse_patient_thresholds

DEFAULT_CONFIG = {
    'patient': {
        'sex': DEFAULT_SEX,
        'age': DEFAULT_AGE,
        'thresholds': {}
    },
    'output': {
        'table': True,
        'plot': False,
        'save_plot': None,
        'csv': None
    }
}


def clamp_age(age):
    """Keep age within the range the regression models were fitted on."""
    age = float(age)
    if not math.isfinite(age):
        raise ValueError(f"Age must be finite, got {age!r}")
    return max(MIN_AGE, min(int(round(age)), MAX_AGE))


def _merge(base, overrides):
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _require_mapping(config, section):
    value = config.get(section)
    if not isinstance(value, dict):
        raise ValueError(f"'{section}' must be a mapping, got {value!r}")
    return value


def validate_config(config):
    """
    Normalise a merged configuration in place and return it.

    Sex is lower-cased and checked, age is clamped and patient thresholds are
    parsed into a complete frequency dict.

    Raises:
        ValueError: For a section that is not a mapping, an unknown sex, a
            non-numeric or non-finite age, or invalid thresholds.
    """
    patient = _require_mapping(config, 'patient')
    if 'output' in config:
        _require_mapping(config, 'output')

    sex = str(patient.get('sex', DEFAULT_SEX)).lower()
    if sex not in SEXES:
        raise ValueError(f"Unrecognized sex: {patient.get('sex')}. Expected one of {list(SEXES)}.")
    patient['sex'] = sex

    try:
        patient['age'] = clamp_age(patient.get('age', DEFAULT_AGE))
    except (TypeError, ValueError):
        raise ValueError(f"Age must be a finite number, got {patient.get('age')!r}")

    patient['thresholds'] = parse_patient_thresholds(patient.get('thresholds'))
    return config


def load_config(config_path=None):
    """
    Load configuration from a YAML file merged over the defaults.

    A missing file falls back to the defaults with a notice.
    """
    overrides = {}
    if config_path is not None:
        try:
            with open(Path(config_path), 'r') as f:
                overrides = yaml.safe_load(f) or {}
        except FileNotFoundError:
            print(f"Configuration file {config_path} not found. Using defaults.")
    if not isinstance(overrides, dict):
        raise ValueError(f"Configuration must be a mapping, got {overrides!r}")
    return validate_config(_merge(DEFAULT_CONFIG, overrides))
