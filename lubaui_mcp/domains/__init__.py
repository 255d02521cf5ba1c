"""
Domains - Business logic layer.

Each domain is self-contained with:
- models.py: Pydantic data models
- Implementation files
- test_*.py beside the code
"""

__all__ = [
    "catalog",
    "lookup",
    "resources",
    "search",
    "suggest",
    "validation",
]
