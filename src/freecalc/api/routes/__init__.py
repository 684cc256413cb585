"""freecalc API routers."""
