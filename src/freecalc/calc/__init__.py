"""freecalc calculation engine.

Modules:
- engine: CalcEngine / perform_calculation, run built-in calculators by id
- registry: calculator id -> handler kind, fields and units
- dispatcher: handler kind -> handler family
- coercion, formatting, numeric: total parsing, rendering and IEEE arithmetic
"""
