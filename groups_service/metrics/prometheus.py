# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "groups_requests_total",
    "Total HTTP requests to groups service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "groups_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "groups_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
GROUPS_CREATED = Counter(
    "groups_created_total",
    "Total groups created",
)
GROUP_MUTATIONS = Counter(
    "groups_mutations_total",
    "Group and member mutations by outcome",
    ["operation", "outcome"],
)
ACTIVE_GROUPS = Gauge(
    "groups_active",
    "Number of groups in the session collection",
)
TOTAL_MEMBERS = Gauge(
    "groups_members",
    "Number of members across all groups",
)
