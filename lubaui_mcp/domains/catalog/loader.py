"""
Catalog Loader - Reads the LubaUI JSON catalog and flattens its tokens.

The catalog ships inside the package under ``lubaui_mcp/data``:
- tokens.json: spacing, radius, colors, typography, motion, glass
- components.json: component reference entries
- primitives.json: interaction primitive entries
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from lubaui_mcp.config import CatalogError, ErrorCode, Settings, get_settings

from .models import Catalog, ComponentEntry, FlatToken, PrimitiveEntry

logger = logging.getLogger(__name__)

__all__ = [
    "COLOR_CATEGORIES",
    "PACKAGE_DATA_DIR",
    "flatten_tokens",
    "get_catalog",
    "load_catalog",
    "resolve_data_dir",
]

PACKAGE_DATA_DIR = Path(__file__).resolve().parents[2] / "data"

COLOR_CATEGORIES = ("greyscale", "surfaces", "accent", "text", "semantic", "border", "glass")
MOTION_CONSTANT_GROUPS = ("pressScales", "animations", "other")


def resolve_data_dir(settings: Settings | None = None) -> Path:
    """
    Pick the directory holding the catalog JSON files.

    A configured ``data_dir`` wins when it exists; otherwise the bundled
    package data is used.
    """
    settings = settings or get_settings()

    if settings.data_dir is not None:
        if settings.data_dir.is_dir():
            return settings.data_dir
        logger.warning("Configured data_dir %s not found, using bundled catalog", settings.data_dir)

    if PACKAGE_DATA_DIR.is_dir():
        return PACKAGE_DATA_DIR

    raise CatalogError(
        "No catalog directory available",
        details={"data_dir": str(settings.data_dir), "bundled": str(PACKAGE_DATA_DIR)},
    )


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file missing: {path.name}", details={"path": str(path)}) from e
    except json.JSONDecodeError as e:
        raise CatalogError(
            f"Catalog file is not valid JSON: {path.name}",
            details={"path": str(path), "line": e.lineno, "column": e.colno},
        ) from e


def _flat(entry: dict[str, Any], category: str, **overrides: Any) -> FlatToken:
    data = {**entry, "category": category, "aliases": [entry.get("api")], **overrides}
    return FlatToken.model_validate(data)


def flatten_tokens(tokens_data: dict[str, Any]) -> list[FlatToken]:
    """
    Flatten the nested tokens document into one searchable list.

    Order is spacing, radius, colors, typography, motion, glass. Sections
    that are missing are skipped.
    """
    flat: list[FlatToken] = []

    for t in tokens_data.get("spacing", {}).get("tokens", []):
        flat.append(_flat(t, "spacing"))

    for t in tokens_data.get("radius", {}).get("tokens", []):
        flat.append(_flat(t, "radius"))

    colors = tokens_data.get("colors", {})
    for sub in COLOR_CATEGORIES:
        for c in colors.get(sub) or []:
            flat.append(_flat(c, "color", subcategory=sub))

    for t in tokens_data.get("typography", {}).get("tokens", []):
        flat.append(_flat(t, "typography", value=f"{t.get('size')}pt {t.get('weight')}"))

    motion = tokens_data.get("motion", {})
    constants = motion.get("constants", {})
    for sub in MOTION_CONSTANT_GROUPS:
        for m in constants.get(sub) or []:
            flat.append(_flat(m, "motion", subcategory=sub))

    for a in motion.get("appliedAnimations", []):
        flat.append(_flat(a, "motion", subcategory="applied"))

    glass = tokens_data.get("glass", {})
    for s in glass.get("styles", []):
        flat.append(_flat(s, "glass"))
    for t in glass.get("tokens", []):
        flat.append(_flat(t, "glass", description=t.get("name")))

    return flat


def load_catalog(data_dir: Path) -> Catalog:
    """
    Load and validate the three catalog documents.

    Raises:
        CatalogError: A file is missing, unreadable or does not match the
            expected shape.
    """
    tokens_path = data_dir / "tokens.json"
    components_path = data_dir / "components.json"
    primitives_path = data_dir / "primitives.json"

    tokens_data = _read_json(tokens_path)
    components_data = _read_json(components_path)
    primitives_data = _read_json(primitives_path)

    if not isinstance(tokens_data, dict):
        raise CatalogError(
            "tokens.json must be an object",
            details={"path": str(tokens_path)},
            code=ErrorCode.CATALOG_INVALID,
        )

    try:
        catalog = Catalog(
            tokens=tokens_data,
            components=[ComponentEntry.model_validate(c) for c in components_data],
            primitives=[PrimitiveEntry.model_validate(p) for p in primitives_data],
            flat_tokens=flatten_tokens(tokens_data),
        )
    except (ValidationError, TypeError) as e:
        raise CatalogError(
            f"Catalog does not match the expected shape: {e}",
            details={"path": str(data_dir)},
            code=ErrorCode.CATALOG_INVALID,
        ) from e

    logger.info(
        "Loaded catalog from %s: %d tokens, %d components, %d primitives",
        data_dir,
        len(catalog.flat_tokens),
        len(catalog.components),
        len(catalog.primitives),
    )
    return catalog


@lru_cache
def get_catalog() -> Catalog:
    """Get the cached process-wide catalog."""
    return load_catalog(resolve_data_dir(get_settings()))
