"""freecalc API middleware."""
