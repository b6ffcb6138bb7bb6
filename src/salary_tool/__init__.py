"""
Salary Tool Package

Estimates a salary range for an employee profile.
Resolves Role → Base → Multipliers → Range with a fixed USD → INR conversion.
"""

__version__ = "1.0.0"
