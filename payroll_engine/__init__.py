"""
Payroll Period & Earnings Engine

Pay period resolution, day grouping, overtime splitting and earnings
calculation for time-tracked hourly employees.
"""

__version__ = "0.1.0"
