# stockcount/obs/metrics.py
import time

from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware

http_requests_total = Counter("http_requests_total", "HTTP requests", ["method", "path", "code"])
http_request_duration = Histogram(
    "http_request_duration_seconds", "HTTP request duration seconds", ["method", "path"]
)

# stock count domain
stockcount_started_total = Counter(
    "stockcount_started_total", "Stock counts started", ["location_id", "category_code"]
)
stockcount_rejected_total = Counter(
    "stockcount_rejected_total", "Rejected stock count requests", ["op", "reason"]
)
stockcount_rfid_events_total = Counter(
    "stockcount_rfid_events_total", "RFID events recorded against stock counts", ["location_id"]
)


def _route_path(request) -> str:
    # label by route template, not raw path, to keep cardinality bounded
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class PrometheusMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        path = _route_path(request)
        http_requests_total.labels(request.method, path, str(response.status_code)).inc()
        http_request_duration.labels(request.method, path).observe(elapsed)
        return response
