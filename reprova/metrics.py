import logging
import time

from flask import request, Response
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

log = logging.getLogger(__name__)

# Zähler für alle HTTP-Requests
HTTP_REQUESTS_TOTAL = Counter(
    "reprova_http_requests_total",
    "Anzahl der HTTP Requests",
    ["method", "path", "status"],
)

# Latenz in Sekunden pro Pfad
HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "reprova_http_request_duration_seconds",
    "Dauer der HTTP Requests in Sekunden",
    ["path"],
)


def init_metrics(app):
    """
    Initialisiert Prometheus-Metriken:
    - misst Dauer jedes Requests
    - zählt Requests nach Methode / Pfad / Statuscode
    - stellt /metrics-Endpoint zur Verfügung
    """

    @app.before_request
    def _start_timer():
        request._metrics_start_time = time.time()

    @app.after_request
    def _record_metrics(response):
        path = request.path or "unknown"
        try:
            start = getattr(request, "_metrics_start_time", None)
            if start is not None:
                HTTP_REQUEST_DURATION_SECONDS.labels(path=path).observe(time.time() - start)
            HTTP_REQUESTS_TOTAL.labels(
                method=request.method, path=path, status=response.status_code
            ).inc()
        except ValueError as e:
            # Metrik-Fehler sollen nie die eigentliche Response zerstören
            log.warning("Metrik konnte nicht erfasst werden: %s", e)
        return response

    @app.get("/metrics")
    def metrics():
        data = generate_latest()
        return Response(data, mimetype=CONTENT_TYPE_LATEST)
