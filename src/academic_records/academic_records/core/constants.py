"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Simulated remote-call latency per store operation, in seconds.
LATENCY_GET_ALL = 0.30
LATENCY_GET_BY_ID = 0.20
LATENCY_WRITE = 0.40
LATENCY_DELETE = 0.30
LATENCY_QUERY = 0.25

DEFAULT_LATENCY_SCALE = 1.0
DEFAULT_LOW_ATTENDANCE_THRESHOLD = 75

# Lower bound (inclusive) of each letter band.
LETTER_THRESHOLDS = (
    ("A", 90),
    ("B", 80),
    ("C", 70),
    ("D", 60),
)

FILTER_ALL = "all"
