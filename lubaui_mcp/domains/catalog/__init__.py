"""
Catalog Domain - The bundled LubaUI design-system catalog.

This domain handles:
- Locating and loading tokens, components and primitives JSON
- Shape validation of catalog entries
- Flattening nested token groups into searchable tokens
"""

from .loader import (
    COLOR_CATEGORIES,
    PACKAGE_DATA_DIR,
    flatten_tokens,
    get_catalog,
    load_catalog,
    resolve_data_dir,
)
from .models import Catalog, ComponentEntry, FlatToken, Parameter, PrimitiveEntry

__all__ = [
    # Models
    "Catalog",
    "ComponentEntry",
    "FlatToken",
    "Parameter",
    "PrimitiveEntry",
    # Loading
    "COLOR_CATEGORIES",
    "PACKAGE_DATA_DIR",
    "flatten_tokens",
    "get_catalog",
    "load_catalog",
    "resolve_data_dir",
]
