# policyfolio/__init__.py
"""
Policyfolio - valuation engine for investment policy subscriptions.

Values Daily, Monthly and Lumpsum ("digital gold") policy subscriptions at
an explicit as-of date, projects them forward, and aggregates a customer's
subscriptions into a portfolio summary.

Storage, HTTP and authentication live outside this package; callers hand in
Policy and Subscription values and get plain result objects back.
"""

__version__ = "0.1.0"
