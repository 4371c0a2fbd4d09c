# apps/infrastructure/__init__.py
"""
Infrastructure Layer - Cross-Cutting Concerns

This layer handles:
- Dependency injection (container)
- Configuration management per environment
"""

__version__ = "1.0.0"
