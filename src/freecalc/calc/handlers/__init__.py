"""Handler families: one pure function per family.

Every entry point has the signature
``handle_<family>(calculator_id, inputs, unit_system) -> str`` and never
raises on malformed input.
"""

from freecalc.calc.handlers.algebra import handle_algebra
from freecalc.calc.handlers.arithmetic import handle_arithmetic
from freecalc.calc.handlers.base import CalculatorInputs, Handler
from freecalc.calc.handlers.construction import handle_construction
from freecalc.calc.handlers.conversion import handle_conversion
from freecalc.calc.handlers.date_time import handle_date_time
from freecalc.calc.handlers.generator import handle_generator
from freecalc.calc.handlers.geometry import handle_geometry
from freecalc.calc.handlers.grade import handle_grade
from freecalc.calc.handlers.health_bmi import handle_health_bmi
from freecalc.calc.handlers.health_calories import handle_health_calories
from freecalc.calc.handlers.health_fitness import handle_health_fitness
from freecalc.calc.handlers.investment import handle_investment
from freecalc.calc.handlers.loan import handle_loan
from freecalc.calc.handlers.number_theory import handle_number_theory
from freecalc.calc.handlers.other import FALLBACK_RESULT, handle_other
from freecalc.calc.handlers.percentage import handle_percentage
from freecalc.calc.handlers.random_gen import handle_random
from freecalc.calc.handlers.salary import handle_salary
from freecalc.calc.handlers.statistics import handle_statistics
from freecalc.calc.handlers.tax_discount import handle_tax_discount
from freecalc.calc.handlers.text import handle_text
from freecalc.calc.handlers.trigonometry import handle_trigonometry

__all__ = [
    "FALLBACK_RESULT",
    "CalculatorInputs",
    "Handler",
    "handle_algebra",
    "handle_arithmetic",
    "handle_construction",
    "handle_conversion",
    "handle_date_time",
    "handle_generator",
    "handle_geometry",
    "handle_grade",
    "handle_health_bmi",
    "handle_health_calories",
    "handle_health_fitness",
    "handle_investment",
    "handle_loan",
    "handle_number_theory",
    "handle_other",
    "handle_percentage",
    "handle_random",
    "handle_salary",
    "handle_statistics",
    "handle_tax_discount",
    "handle_text",
    "handle_trigonometry",
]
