"""Fin Calc command-line interface."""
