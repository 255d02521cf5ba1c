"""
Resources Domain - Read-only LubaUI documents.

This domain handles:
- The raw token catalog
- The architecture overview
- The component and primitive directory
"""

from .documents import (
    ARCHITECTURE,
    RESOURCES,
    ResourceInfo,
    architecture_document,
    components_document,
    get_resource,
    read_resource,
    tokens_document,
)

__all__ = [
    "ARCHITECTURE",
    "RESOURCES",
    "ResourceInfo",
    "architecture_document",
    "components_document",
    "get_resource",
    "read_resource",
    "tokens_document",
]
