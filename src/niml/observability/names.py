# src/niml/observability/names.py

"""Standard metric names for niml observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "niml_parse_duration"

# Counters
PARSE_LINES_TOTAL = "niml_lines_total"
PARSE_LINES_SKIPPED_TOTAL = "niml_lines_skipped_total"

# Gauges
PARSE_SECTIONS = "niml_sections"


# ============================================================================
# Record Filler Metrics
# ============================================================================

# Duration
FILL_DURATION = "niml_fill_duration"

# Counters
FILL_FIELDS_SET_TOTAL = "niml_fields_set_total"
FILL_ERRORS_TOTAL = "niml_fill_errors_total"


# ============================================================================
# Loader Metrics
# ============================================================================

# Duration
LOAD_DURATION = "niml_load_duration"

# Counters
LOAD_ERRORS_TOTAL = "niml_load_errors_total"
