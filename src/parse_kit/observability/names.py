# src/parse_kit/observability/names.py

"""Standard metric names for parse-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parse Metrics
# ============================================================================

# Duration (submission to extracted result)
PARSE_DURATION = "parse_duration"

# Counters
PARSE_REQUESTS_TOTAL = "parse_requests_total"
PARSE_ERRORS_TOTAL = "parse_errors_total"
PARSE_RESULTS_EMPTY = "parse_results_empty"


# ============================================================================
# Job Metrics
# ============================================================================

# Duration
JOB_WAIT_DURATION = "job_wait_duration"

# Counters
JOBS_SUBMITTED_TOTAL = "jobs_submitted_total"
JOB_STATUS_POLLS_TOTAL = "job_status_polls_total"
JOB_FAILURES_TOTAL = "job_failures_total"
