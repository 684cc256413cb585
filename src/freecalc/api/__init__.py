"""freecalc HTTP API."""
