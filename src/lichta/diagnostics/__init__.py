"""Diagnostics package.

Light-weight tables and charts built on the public API. Plotting needs the
optional extras: pip install "lichta[diagnostics]"
"""

__all__ = ["pretty_month", "new_years_table", "leap_months"]
