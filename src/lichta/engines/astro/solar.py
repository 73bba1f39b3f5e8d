# engines/astro/solar.py

from __future__ import annotations

import math
from math import fmod

# Astronomical constants
JULIAN_CENTURY = 36525.0
EPOCH_2000_12 = 2451545.0

# Mean anomaly
MEAN_ANOMALY_BASE = 357.52910
MEAN_ANOMALY_COEF = 35999.05030
MEAN_ANOMALY_QUAD = 0.0001559
MEAN_ANOMALY_CUBE = 0.00000048

# Mean longitude
MEAN_LONGITUDE_BASE = 280.46645
MEAN_LONGITUDE_COEF = 36000.76983
MEAN_LONGITUDE_QUAD = 0.0003032

# Equation of the center
EQUATION_CENTER_BASE = 1.914600
EQUATION_CENTER_T_COEF = 0.004817
EQUATION_CENTER_T2_COEF = 0.000014
EQUATION_CENTER_FIRST_HARMONIC = 0.019993
EQUATION_CENTER_FIRST_HARMONIC_DECAY = 0.000101
EQUATION_CENTER_SECOND_HARMONIC = 0.000290

SOLAR_LONGITUDE_SEGMENT = 30.0  # one principal term (zhongqi) per segment
SOLAR_TERM_SEGMENT = 15.0


def reduce_longitude(longitude: float) -> float:
    """Real remainder modulo 360; keeps the sign of a negative input."""
    return fmod(longitude, 360.0)


def sun_longitude_aa98(jd: float) -> float:
    """
    True solar longitude (degrees) at JD using the low-precision
    Meeus (1998) series, accurate to ~0.01 deg around the 20th/21st centuries.
    """
    # Julian centuries from 2000-01-01 12:00
    t = (jd - EPOCH_2000_12) / JULIAN_CENTURY
    t_2 = t * t
    mean_anomaly = (
        MEAN_ANOMALY_BASE
        + (MEAN_ANOMALY_COEF * t)
        - (MEAN_ANOMALY_QUAD * t_2)
        - (MEAN_ANOMALY_CUBE * t * t_2)
    )
    mean_longitude = MEAN_LONGITUDE_BASE + (MEAN_LONGITUDE_COEF * t) + (MEAN_LONGITUDE_QUAD * t_2)

    m_rad = math.radians(mean_anomaly)
    equation_of_the_center = (
        (EQUATION_CENTER_BASE - (EQUATION_CENTER_T_COEF * t) - (EQUATION_CENTER_T2_COEF * t_2))
        * math.sin(m_rad)
        + (EQUATION_CENTER_FIRST_HARMONIC - EQUATION_CENTER_FIRST_HARMONIC_DECAY * t)
        * math.sin(2.0 * m_rad)
        + EQUATION_CENTER_SECOND_HARMONIC * math.sin(3.0 * m_rad)
    )
    true_longitude = mean_longitude + equation_of_the_center
    return reduce_longitude(true_longitude)


def get_sun_longitude(jdn: float, timezone: float) -> float:
    """
    Solar longitude at local midnight starting day `jdn`.

    `jdn` is the Julian Day Number (noon-based) of the civil day and
    `timezone` the offset from UTC in hours (e.g. 7.0 for Indochina Time).
    """
    jd_adjusted = jdn - 0.5 - timezone / 24.0
    return sun_longitude_aa98(jd_adjusted)


def solar_segment(jdn: float, timezone: float) -> int:
    """30-degree zodiac segment (floor) of the Sun at the start of local day `jdn`."""
    return math.floor(get_sun_longitude(jdn, timezone) / SOLAR_LONGITUDE_SEGMENT)


def solar_term(jdn: float, timezone: float) -> int:
    """Index of the 15-degree solar term in effect at the start of local day `jdn` (0 = vernal equinox)."""
    return math.floor(get_sun_longitude(jdn, timezone) / SOLAR_TERM_SEGMENT)
