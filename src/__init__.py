"""
Self Savings Planner - Automated micro-savings service

A FastAPI service that rounds everyday expenses up to the next hundred,
validates and filters them against wage and period rules, and projects
the inflation-adjusted returns of the remnants in NPS or an index fund.
"""

__version__ = "1.0.0"
