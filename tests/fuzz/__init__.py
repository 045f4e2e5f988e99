"""Fuzz testing for decimalfsm.

This package contains:
- test_machine_oracle_property: Differential tests against the regex grammar

Python 3.13+.
"""
