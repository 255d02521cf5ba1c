"""
API Routes.
"""

from . import health, lookup, resources, suggest, validate

__all__ = ["health", "lookup", "validate", "suggest", "resources"]
