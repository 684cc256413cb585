"""Built-in calculator catalogue.

Seeds a CalculatorRegistry with every calculator the site ships. Calculators
routed to ``HandlerKind.OTHER`` have no dedicated arithmetic and produce the
generic completion message.
"""

from __future__ import annotations

from freecalc.calc.registry import CalculatorDefinition, CalculatorRegistry
from freecalc.calc.registry import HandlerKind as K

_define = CalculatorDefinition.create

_LOAN_FIELDS = ("principal", "rate", "term")
_SAVINGS_FIELDS = ("initial", "monthly", "rate", "years")
_XY_FIELDS = ("x1", "y1", "x2", "y2")
_LWD_FIELDS = ("length", "width", "depth")
_BODY_FIELDS = ("weight", "heightFeet", "heightInches", "age", "gender", "activityLevel")
_CYCLE_FIELDS = ("lastPeriod", "cycleLength")

BUILTIN_CALCULATORS: tuple[CalculatorDefinition, ...] = (
    # Math - arithmetic
    _define("basic-calculator", K.ARITHMETIC, ["expression"]),
    _define("scientific-calculator", K.ARITHMETIC, ["expression"]),
    _define("percentage-calculator", K.PERCENTAGE, ["value", "percentage"]),
    _define("ratio-calculator", K.ARITHMETIC, ["a", "b"]),
    _define(
        "fraction-calculator",
        K.ARITHMETIC,
        ["numerator1", "denominator1", "operation", "numerator2", "denominator2"],
    ),
    _define("rounding-calculator", K.ARITHMETIC, ["number", "decimals"]),
    _define("absolute-value-calculator", K.ARITHMETIC, ["number"]),
    _define("modulo-calculator", K.ARITHMETIC, ["a", "b"]),
    # Math - statistics
    _define("average-calculator", K.STATISTICS, ["values"]),
    _define("standard-deviation-calculator", K.STATISTICS, ["values"]),
    # Math - number theory
    _define("random-number-generator", K.RANDOM, ["min", "max"]),
    _define("factorial-calculator", K.NUMBER_THEORY, ["number"]),
    _define("combination-calculator", K.NUMBER_THEORY, ["n", "r"]),
    _define("permutation-calculator", K.NUMBER_THEORY, ["n", "r"]),
    _define("prime-number-calculator", K.NUMBER_THEORY, ["number"]),
    _define("lcm-calculator", K.NUMBER_THEORY, ["a", "b"]),
    _define("gcf-calculator", K.NUMBER_THEORY, ["a", "b"]),
    _define("divisibility-calculator", K.NUMBER_THEORY, ["number", "divisor"]),
    # Math - algebra
    _define("exponent-calculator", K.ALGEBRA, ["base", "exponent"]),
    _define("square-root-calculator", K.ALGEBRA, ["number"]),
    _define("algebra-calculator", K.ALGEBRA, ["equation"]),
    _define("equation-solver", K.ALGEBRA, ["equation"]),
    _define("quadratic-formula-calculator", K.ALGEBRA, ["a", "b", "c"]),
    _define("log-calculator", K.ALGEBRA, ["number", "base"]),
    _define("antilog-calculator", K.ALGEBRA, ["number", "base"]),
    # Math - geometry
    _define("circle-calculator", K.GEOMETRY, ["radius"]),
    _define("triangle-calculator", K.GEOMETRY, ["side1", "side2", "side3"]),
    _define("area-calculator", K.GEOMETRY, ["shape", "dimension1", "dimension2"]),
    _define(
        "volume-calculator", K.GEOMETRY, ["shape", "dimension1", "dimension2", "dimension3"]
    ),
    _define("perimeter-calculator", K.GEOMETRY, ["shape", "sides"]),
    _define("pythagorean-theorem-calculator", K.GEOMETRY, ["a", "b"]),
    # Math - coordinate geometry
    _define("slope-calculator", K.ALGEBRA, _XY_FIELDS),
    _define("distance-calculator", K.ALGEBRA, _XY_FIELDS),
    _define("midpoint-calculator", K.ALGEBRA, _XY_FIELDS),
    # Math - trigonometry
    _define("sine-calculator", K.TRIGONOMETRY, ["angle"]),
    _define("cosine-calculator", K.TRIGONOMETRY, ["angle"]),
    _define("tangent-calculator", K.TRIGONOMETRY, ["angle"]),
    # Math - number systems
    _define("decimal-to-fraction", K.CONVERSION, ["decimal"]),
    _define("fraction-to-decimal", K.CONVERSION, ["numerator", "denominator"]),
    _define("mixed-number-calculator", K.ARITHMETIC, ["whole", "numerator", "denominator"]),
    _define("binary-calculator", K.CONVERSION, ["number", "operation"]),
    _define("hex-calculator", K.CONVERSION, ["number", "operation"]),
    _define("octal-calculator", K.CONVERSION, ["number", "operation"]),
    _define("base-converter", K.CONVERSION, ["number", "fromBase", "toBase"]),
    _define("binary-converter", K.CONVERSION, ["number", "fromBase", "toBase"]),
    _define("sig-fig-calculator", K.ARITHMETIC, ["number", "sigfigs"]),
    # Math - advanced
    _define("matrix-calculator", K.OTHER, ["matrix"]),
    _define("integral-calculator", K.OTHER, ["function"]),
    _define("derivative-calculator", K.OTHER, ["function"]),
    _define("limit-calculator", K.OTHER, ["function"]),
    _define("series-calculator", K.OTHER, ["sequence"]),
    # Finance - loans
    _define("mortgage-calculator", K.LOAN, _LOAN_FIELDS),
    _define("loan-calculator", K.LOAN, _LOAN_FIELDS),
    _define("auto-loan-calculator", K.LOAN, _LOAN_FIELDS),
    _define("student-loan-calculator", K.LOAN, _LOAN_FIELDS),
    _define("personal-loan-calculator", K.LOAN, _LOAN_FIELDS),
    _define("amortization-calculator", K.LOAN, _LOAN_FIELDS),
    _define("payment-calculator", K.LOAN, _LOAN_FIELDS),
    _define("lease-calculator", K.LOAN, ["price", "residual", "rate", "term"]),
    _define("mortgage-refinance-calculator", K.LOAN, ["balance", "rate", "term", "newRate"]),
    # Finance - interest
    _define("interest-calculator", K.INVESTMENT, ["principal", "rate", "time", "frequency"]),
    _define(
        "compound-interest-calculator",
        K.INVESTMENT,
        ["principal", "rate", "time", "frequency"],
    ),
    _define("simple-interest-calculator", K.INVESTMENT, ["principal", "rate", "time"]),
    # Finance - investment
    _define("investment-calculator", K.INVESTMENT, _SAVINGS_FIELDS),
    _define("roi-calculator", K.INVESTMENT, ["initial", "final"]),
    _define("retirement-calculator", K.INVESTMENT, _SAVINGS_FIELDS),
    _define("401k-calculator", K.INVESTMENT, _SAVINGS_FIELDS),
    _define("roth-ira-calculator", K.INVESTMENT, _SAVINGS_FIELDS),
    _define("savings-calculator", K.INVESTMENT, _SAVINGS_FIELDS),
    _define("college-savings-calculator", K.INVESTMENT, _SAVINGS_FIELDS),
    _define("annuity-calculator", K.INVESTMENT, ["payment", "rate", "periods"]),
    _define("fire-calculator", K.INVESTMENT, ["expenses", "savings", "rate"]),
    # Finance - salary
    _define("salary-calculator", K.SALARY, ["hourly", "hoursPerWeek"]),
    _define("hourly-to-salary", K.SALARY, ["hourly", "hoursPerWeek"]),
    _define("salary-to-hourly", K.SALARY, ["annual", "hoursPerWeek"]),
    _define("paycheck-calculator", K.SALARY, ["salary", "frequency", "taxRate"]),
    # Finance - tax and discounts
    _define("tip-calculator", K.TAX_DISCOUNT, ["bill", "tip", "people"]),
    _define("discount-calculator", K.TAX_DISCOUNT, ["original", "discount"]),
    _define("markup-calculator", K.TAX_DISCOUNT, ["cost", "markup"]),
    _define("margin-calculator", K.TAX_DISCOUNT, ["revenue", "cost"]),
    _define("sales-tax-calculator", K.TAX_DISCOUNT, ["price", "taxRate"]),
    _define("tax-calculator", K.TAX_DISCOUNT, ["income", "deductions"]),
    _define("vat-calculator", K.TAX_DISCOUNT, ["price", "vatRate"]),
    _define("property-tax-calculator", K.TAX_DISCOUNT, ["value", "rate"]),
    _define("commission-calculator", K.TAX_DISCOUNT, ["sales", "rate"]),
    # Finance - other
    _define("inflation-calculator", K.INVESTMENT, ["amount", "years", "rate"]),
    _define("depreciation-calculator", K.INVESTMENT, ["cost", "salvage", "years"]),
    _define("rent-calculator", K.OTHER, ["income"]),
    _define("budget-calculator", K.OTHER, ["income", "expenses"]),
    _define("debt-calculator", K.LOAN, ["balance", "payment", "rate"]),
    _define("credit-card-calculator", K.LOAN, ["balance", "apr", "payment"]),
    _define("apr-calculator", K.INVESTMENT, ["principal", "fee", "term"]),
    _define("apy-calculator", K.INVESTMENT, ["rate", "frequency"]),
    _define("net-worth-calculator", K.OTHER, ["assets", "liabilities"]),
    _define("home-affordability-calculator", K.LOAN, ["income", "debt", "downPayment"]),
    _define("rent-vs-buy-calculator", K.OTHER, ["rent", "price", "downPayment"]),
    _define("closing-costs-calculator", K.TAX_DISCOUNT, ["price", "rate"]),
    _define("currency-converter", K.CONVERSION, ["amount", "from", "to"]),
    _define("stock-calculator", K.INVESTMENT, ["shares", "buyPrice", "sellPrice"]),
    _define("dividend-calculator", K.INVESTMENT, ["shares", "dividend"]),
    _define("bond-calculator", K.INVESTMENT, ["faceValue", "coupon", "years"]),
    # Health
    _define("bmi-calculator", K.HEALTH_BMI, ["weight", "heightFeet", "heightInches"]),
    _define("calorie-calculator", K.HEALTH_CALORIES, _BODY_FIELDS),
    _define("tdee-calculator", K.HEALTH_CALORIES, _BODY_FIELDS),
    _define("bmr-calculator", K.HEALTH_CALORIES, _BODY_FIELDS),
    _define(
        "body-fat-calculator",
        K.HEALTH_BMI,
        ["weight", "waist", "neck", "heightFeet", "heightInches", "gender"],
    ),
    _define("ideal-weight-calculator", K.HEALTH_BMI, ["heightFeet", "heightInches", "gender"]),
    _define("lean-body-mass-calculator", K.HEALTH_BMI, ["weight", "bodyFat"]),
    _define("protein-calculator", K.HEALTH_CALORIES, ["weight", "activityLevel"]),
    _define("carb-calculator", K.HEALTH_CALORIES, ["weight", "activityLevel"]),
    _define("macro-calculator", K.HEALTH_CALORIES, ["weight", "goal", "activityLevel"]),
    _define("water-intake-calculator", K.HEALTH_CALORIES, ["weight"]),
    _define("pace-calculator", K.HEALTH_FITNESS, ["distance", "time"]),
    _define("running-calculator", K.HEALTH_FITNESS, ["distance", "time"]),
    _define("heart-rate-calculator", K.HEALTH_FITNESS, ["age", "restingHR"]),
    _define("vo2-max-calculator", K.HEALTH_FITNESS, ["distance", "time"]),
    _define("blood-pressure-calculator", K.OTHER, ["systolic", "diastolic"]),
    _define("bac-calculator", K.HEALTH_FITNESS, ["weight", "drinks", "hours", "gender"]),
    _define("sleep-calculator", K.DATE_TIME, ["bedtime", "wakeup"]),
    _define("one-rep-max-calculator", K.HEALTH_FITNESS, ["weight", "reps"]),
    _define("pregnancy-calculator", K.DATE_TIME, ["lastPeriod"]),
    _define("due-date-calculator", K.DATE_TIME, ["lastPeriod"]),
    _define("ovulation-calculator", K.DATE_TIME, _CYCLE_FIELDS),
    _define("conception-calculator", K.DATE_TIME, ["dueDate"]),
    _define("period-calculator", K.DATE_TIME, _CYCLE_FIELDS),
    _define("body-type-calculator", K.OTHER, ["measurements"]),
    # Date and time
    _define("age-calculator", K.DATE_TIME, ["birthDate"]),
    _define("date-calculator", K.DATE_TIME, ["startDate", "days"]),
    _define("time-calculator", K.DATE_TIME, ["time1", "time2"]),
    _define("hours-calculator", K.DATE_TIME, ["startTime", "endTime"]),
    _define("time-zone-converter", K.DATE_TIME, ["time", "fromZone", "toZone"]),
    _define("birthday-calculator", K.DATE_TIME, ["birthDate"]),
    _define("days-until-calculator", K.DATE_TIME, ["targetDate"]),
    # Grades
    _define("gpa-calculator", K.GRADE, ["grades"]),
    _define("grade-calculator", K.GRADE, ["scores", "weights"]),
    _define("test-grade-calculator", K.GRADE, ["correct", "total"]),
    _define("final-grade-calculator", K.GRADE, ["current", "finalWeight", "targetGrade"]),
    _define("weighted-grade-calculator", K.GRADE, ["scores", "weights"]),
    # Construction
    _define("concrete-calculator", K.CONSTRUCTION, _LWD_FIELDS, imperial=True),
    _define("paint-calculator", K.CONSTRUCTION, ["sqft", "coats"]),
    _define("flooring-calculator", K.CONSTRUCTION, ["length", "width"], imperial=True),
    _define(
        "tile-calculator",
        K.CONSTRUCTION,
        ["roomLength", "roomWidth", "tileLength", "tileWidth"],
        imperial=True,
    ),
    _define("gravel-calculator", K.CONSTRUCTION, _LWD_FIELDS, imperial=True),
    _define("mulch-calculator", K.CONSTRUCTION, _LWD_FIELDS, imperial=True),
    _define("soil-calculator", K.CONSTRUCTION, _LWD_FIELDS, imperial=True),
    _define("square-footage-calculator", K.CONSTRUCTION, ["length", "width"], imperial=True),
    _define("roof-calculator", K.CONSTRUCTION, ["length", "width", "pitch"], imperial=True),
    _define("fence-calculator", K.CONSTRUCTION, ["perimeter", "height"], imperial=True),
    # Conversions
    _define("temperature-converter", K.CONVERSION, ["fahrenheit"], imperial=True),
    _define("length-converter", K.CONVERSION, ["feet"], imperial=True),
    _define("weight-converter", K.CONVERSION, ["pounds"], imperial=True),
    _define("volume-converter", K.CONVERSION, ["gallons"], imperial=True),
    _define("area-converter", K.CONVERSION, ["sqft"], imperial=True),
    _define("speed-converter", K.CONVERSION, ["mph"], imperial=True),
    _define("time-converter", K.CONVERSION, ["hours"]),
    _define("pressure-converter", K.CONVERSION, ["psi"], imperial=True),
    _define("energy-converter", K.CONVERSION, ["btus"], imperial=True),
    _define("power-converter", K.CONVERSION, ["watts"]),
    _define("miles-to-km", K.CONVERSION, ["miles"], imperial=True),
    _define("kg-to-lbs", K.CONVERSION, ["pounds"], imperial=True),
    _define("cm-to-inches", K.CONVERSION, ["inches"], imperial=True),
    _define("feet-to-meters", K.CONVERSION, ["feet"], imperial=True),
    _define("gallons-to-liters", K.CONVERSION, ["gallons"], imperial=True),
    _define("celsius-to-fahrenheit", K.CONVERSION, ["fahrenheit"], imperial=True),
    # Automotive
    _define("fuel-calculator", K.ARITHMETIC, ["miles", "gallons"], imperial=True),
    _define("gas-mileage-calculator", K.ARITHMETIC, ["miles", "gallons"], imperial=True),
    _define("car-payment-calculator", K.LOAN, _LOAN_FIELDS),
    _define("tire-size-calculator", K.OTHER, ["width", "ratio", "diameter"]),
    # Home
    _define("btu-calculator", K.ARITHMETIC, ["sqft"]),
    _define("air-conditioner-calculator", K.ARITHMETIC, ["sqft"]),
    _define("electricity-calculator", K.ARITHMETIC, ["watts", "hours", "rate"]),
    _define("carbon-footprint-calculator", K.OTHER, ["miles", "electricity", "gas"]),
    # Pets
    _define("dog-age-calculator", K.ARITHMETIC, ["dogAge"]),
    _define("cat-age-calculator", K.ARITHMETIC, ["catAge"]),
    _define("pet-food-calculator", K.ARITHMETIC, ["weight", "activity"]),
    _define("aquarium-calculator", K.GEOMETRY, ["length", "width", "height"], imperial=True),
    # Probability and games
    _define("lottery-calculator", K.NUMBER_THEORY, ["balls", "picks"]),
    _define("probability-calculator", K.NUMBER_THEORY, ["favorable", "total"]),
    _define("odds-calculator", K.ARITHMETIC, ["odds"]),
    _define("dice-roller", K.RANDOM, ["sides", "count"]),
    _define("coin-flip", K.RANDOM, ["flips"]),
    # Events
    _define("wedding-budget-calculator", K.OTHER, ["guests", "perPerson"]),
    _define("party-calculator", K.ARITHMETIC, ["people", "costPerPerson"]),
    # Cooking
    _define("recipe-converter", K.ARITHMETIC, ["originalServings", "desiredServings"]),
    _define("cooking-time-calculator", K.ARITHMETIC, ["weight", "temperature"]),
    _define("batch-calculator", K.ARITHMETIC, ["originalBatch", "desiredBatch"]),
    _define("pizza-calculator", K.OTHER, ["pizzas", "doughBalls"]),
    # Digital and screen
    _define("screen-size-calculator", K.GEOMETRY, ["diagonal", "ratio"]),
    _define("aspect-ratio-calculator", K.ARITHMETIC, ["width", "height"]),
    _define("dpi-calculator", K.ARITHMETIC, ["width", "height", "diagonal"]),
    _define("pixels-to-inches", K.CONVERSION, ["pixels", "dpi"]),
    _define("golden-ratio-calculator", K.ARITHMETIC, ["value"]),
    # Text and tools
    _define("password-generator", K.GENERATOR, ["length"]),
    _define("subnet-calculator", K.OTHER, ["ip", "subnet"]),
    _define("text-compare", K.TEXT, ["text1", "text2"]),
    _define("word-counter", K.TEXT, ["text"]),
    _define("character-counter", K.TEXT, ["text"]),
    _define("case-converter", K.TEXT, ["text", "case"]),
)


def register_builtin_calculators(
    registry: CalculatorRegistry | None = None,
) -> CalculatorRegistry:
    """Register the built-in catalogue with a registry.

    Args:
        registry: Registry to populate. If None, uses the singleton.

    Returns:
        The registry with every built-in calculator registered. Slugs already
        present are left untouched.
    """
    if registry is None:
        registry = CalculatorRegistry()

    for definition in BUILTIN_CALCULATORS:
        if registry.get(definition.slug) is None:
            registry.register(definition)

    return registry
