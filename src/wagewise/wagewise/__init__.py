"""WageWise package.

This package is organized by feature modules (products, daily_logs, ledger, employees)
with a thin Flask controller layer and service/repository layers over a key-value store.
"""
