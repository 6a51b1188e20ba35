# src/clippings_kit/observability/names.py

"""Standard metric names for clippings-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parse Metrics
# ============================================================================

# Duration
PARSE_DURATION = "clippings_parse_duration"

# Counters
PARSE_RECORDS_TOTAL = "clippings_parse_records_total"
PARSE_ERRORS_TOTAL = "clippings_parse_errors_total"

# Gauges (distinct books in the last parsed document)
PARSE_BOOKS = "clippings_parse_books"
