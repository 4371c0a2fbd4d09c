# apps/domain/ports/__init__.py
"""
Ports - Interface Definitions (Dependency Inversion)

Ports define contracts between domain and infrastructure layers.
Domain services depend on these interfaces, adapters implement them.
"""
