# Services package init
"""
Acme Flavors Backend: Services Layer
====================================

Service Inventory:
    - FlavorRepository: parameterized queries, one Result per operation
    - seed: table rebuild and seed rows at startup
    - Result: ok / not_found / failed outcome values
"""
