"""
constants.py – Shared labels, fixed policy values, and advisory texts.
"""

# ── Calculation categories ────────────────────────────────────
CATEGORY_TRANSPORT = "transport"
CATEGORY_MANUFACTURING = "manufacturing"
CATEGORY_OPERATIONS = "operations"
CATEGORY_LOGISTICS = "logistics"

CATEGORIES = [
    CATEGORY_TRANSPORT,
    CATEGORY_MANUFACTURING,
    CATEGORY_OPERATIONS,
    CATEGORY_LOGISTICS,
]

# ── Time bases ────────────────────────────────────────────────
MONTHS_PER_YEAR = 12
WORKING_DAYS_PER_YEAR = 250
KG_PER_TON = 1_000.0

# ── Credit policy ─────────────────────────────────────────────
# 1 credit = 1 metric ton CO₂e
TONS_PER_CREDIT = 1
DEFAULT_CREDIT_UNIT_PRICE = 100
DEFAULT_CURRENCY = "INR"

BULK_ORDER_PROJECT_TYPES = {"mangrove", "seagrass", "marsh", "any"}

# ── Recommendation thresholds (raw monthly inputs) ────────────
FLEET_FUEL_THRESHOLD_LITERS = 1_000
RENEWABLE_ELECTRICITY_THRESHOLD_KWH = 10_000
WASTE_THRESHOLD_TONS = 100
AIR_SHIPPING_MODE = "air"

ADVICE_FLEET_TRANSITION = "Consider switching to electric or hybrid vehicles for fleet"
ADVICE_RENEWABLE_ENERGY = "Implement solar panels or renewable energy sources"
ADVICE_WASTE_OPTIMISATION = "Optimize waste management and recycling processes"
ADVICE_SHIPPING_MODE = "Consider sea or land transportation for non-urgent shipments"

# ── Sequestration model ───────────────────────────────────────
CO2_PER_TREE_TONS = 0.25
CO2_PER_HECTARE_TONS = 2.5
RAINFALL_DIVISOR_MM = 100
RAINFALL_BONUS_CAP = 15
SEQUESTRATION_CREDIT_RATIO = 0.1

SOIL_ALLUVIAL = "alluvial"
SOIL_COASTAL = "coastal"

SOIL_MULTIPLIERS = {
    SOIL_ALLUVIAL: 1.2,
    SOIL_COASTAL: 1.1,
}
DEFAULT_SOIL_MULTIPLIER = 1.0

ECOSYSTEM_BY_SOIL = {
    SOIL_ALLUVIAL: "Mangrove Restoration",
    SOIL_COASTAL: "Seagrass Conservation",
}
DEFAULT_ECOSYSTEM = "Mixed Coastal Ecosystem"

# ── Report export ─────────────────────────────────────────────
REPORT_KIND_EMISSIONS = "emissions"
REPORT_KIND_SEQUESTRATION = "sequestration"
