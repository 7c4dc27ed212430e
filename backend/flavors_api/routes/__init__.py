# Routes package init
"""
Acme Flavors Backend: API Routes Package
========================================

Route Inventory:
    - flavors.py: GET/POST /api/flavors, GET/PUT/DELETE /api/flavors/{id}
    - health.py:  GET /health
    - docs.py:    GET / (index.html) and the static catch-all mount

Routes handle HTTP concerns only; queries live in services/.
"""
