# tests/test_time.py

import random
from datetime import date

import pytest

from lichta.core.time import from_jdn, to_jdn, year_end_jdn


def test_known_epochs():
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert to_jdn(date(1900, 1, 1)) == 2415021
    assert to_jdn(date(2024, 5, 24)) == 2460455


def test_jdn_date_roundtrip():
    random.seed(42)
    for _ in range(2000):
        jdn_in = random.randint(1721426, 5373484)
        assert to_jdn(from_jdn(jdn_in)) == jdn_in


def test_year_end():
    assert year_end_jdn(2024) == to_jdn(date(2024, 12, 31))
    with pytest.raises(ValueError):
        year_end_jdn(0)
