"""fincalc - Personal finance projection and affordability calculators."""

__version__ = "0.3.0"
