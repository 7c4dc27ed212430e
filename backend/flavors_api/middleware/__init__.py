# Middleware package init
"""
Acme Flavors Backend: Middleware Package
========================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    1. Request ID first so every later log line can carry it
    2. Logging wraps the handler to measure its duration

The order is reversed for responses, so the access log sees the final
status code and X-Request-ID is set on the way out.
"""
