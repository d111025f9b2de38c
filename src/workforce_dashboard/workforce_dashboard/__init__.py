"""Workforce dashboard package.

This package is organized by feature modules (shifts, assignments, employees,
projects) with a thin Flask controller layer and service/repository layers.
"""
