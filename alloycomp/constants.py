"""Application-wide constants."""

APP_NAME = "Alloy Composition Converter"
APP_VERSION = "0.1.0"

# Serialization
COMPOSITION_SCHEMA_VERSION = "1.0"

# Alloy shipped with the package and used by the CLI by default
DEFAULT_ALLOY_ID = "steel"

# Absolute tolerance for "fractions sum to one" checks
FRACTION_SUM_TOLERANCE = 1e-9

# Text report layout
REPORT_HEADER = (
    "        | At. fraction (X) | Wt. fraction (W) | Site fraction (U)\n"
    "  ------+------------------+------------------+-------------------\n"
)
