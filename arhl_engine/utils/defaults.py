"""Constants and default values for age-related hearing loss estimation."""

# Audiometric test frequencies covered by the regression tables (Hz)
FREQUENCIES = [500, 1000, 2000, 3000, 4000, 6000, 8000]

# Composite pure-tone averages and the frequencies they average
PTA_COMPONENTS = {
    'pta5123': (500, 1000, 2000, 3000),
    'pta234': (2000, 3000, 4000)
}

PTA_TITLES = {
    'pta5123': 'PTA 5123 (Speech)',
    'pta234': 'PTA 234 (OSHA STS)'
}

SEXES = ('male', 'female')
TIERS = ('median', 'p95')

# Age range the regression models were fitted on
MIN_AGE = 20
MAX_AGE = 80
DEFAULT_AGE = 50
DEFAULT_SEX = 'male'

# ASHA degree of hearing loss scale, inclusive upper bounds in dB HL
ASHA_UPPER_BOUNDS = {
    'Normal': 15,
    'Slight': 25,
    'Mild': 40,
    'Moderate': 55,
    'Mod-Severe': 70,
    'Severe': 90
}

# Audiogram display range (dB HL)
CHART_MIN_DB = 0
CHART_MAX_DB = 120
CHART_TICK_STEP = 20
