"""
Bandwidth quota forecast service.

Layers:
- domain: billing cycles, the expected-usage / speed-limit control law,
  series validation and the metrics gateway contract
- application: the forecast pipeline, use cases and DTOs
- infrastructure: Prometheus gateway and health probe
- presentation: FastAPI routers
- shared: logging and environment helpers
- main: settings, dependency container and server entry point
"""
