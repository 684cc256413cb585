"""freecalc - calculation engine for a free-calculator site."""

__version__ = "1.0.0"
