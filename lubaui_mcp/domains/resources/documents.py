"""
Resource Documents - Static read-only documents about LubaUI.

Each document has a ``lubaui://`` URI and is served as JSON by the MCP
server and the REST API.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from lubaui_mcp.config import ErrorCode, LubaUIError
from lubaui_mcp.domains.catalog import Catalog

logger = logging.getLogger(__name__)

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


class ResourceInfo(BaseModel):
    """Descriptor for one readable document."""

    name: str
    uri: str
    description: str
    mime_type: str = "application/json"

    model_config = {"frozen": True}


RESOURCES: tuple[ResourceInfo, ...] = (
    ResourceInfo(
        name="tokens-all",
        uri="lubaui://tokens/all",
        description=(
            "Complete LubaUI token catalog: spacing, radius, colors, typography, "
            "motion and glass tokens"
        ),
    ),
    ResourceInfo(
        name="architecture",
        uri="lubaui://architecture",
        description="LubaUI design system architecture: three-tier token system, design philosophy and conventions",
    ),
    ResourceInfo(
        name="components",
        uri="lubaui://components",
        description="LubaUI component directory: every component and primitive with descriptions",
    ),
)

ARCHITECTURE: dict[str, Any] = {
    "philosophy": (
        "Composability over inheritance. Behaviors are extracted into primitives so any view "
        "can gain interactive powers through modifiers, not subclassing. Every magic number "
        "has a name, a token, and documented rationale."
    ),
    "tokenSystem": {
        "tier1": {
            "name": "Primitives (LubaPrimitives)",
            "rule": "Raw hex values and numbers. The DNA. NEVER reference directly in component code.",
            "examples": [
                "LubaPrimitives.grey900Light → Color(hex: 0x1A1A1A)",
                "LubaPrimitives.space4 → 4",
            ],
        },
        "tier2": {
            "name": "Semantic Tokens",
            "rule": "Human-readable, context-aware names. USE THESE in components.",
            "modules": [
                "LubaColors",
                "LubaSpacing",
                "LubaRadius",
                "LubaTypography",
                "LubaMotion",
                "LubaAnimations",
            ],
            "examples": [
                "LubaColors.textPrimary → adaptive grey900",
                "LubaSpacing.lg → 16pt",
                "LubaMotion.pressScale → 0.97",
            ],
        },
        "tier3": {
            "name": "Component Tokens",
            "rule": "Per-component configuration enums. Reference tier 2 tokens internally.",
            "modules": [
                "LubaCardTokens",
                "LubaFieldTokens",
                "LubaButtonSize",
                "LubaToastTokens",
                "LubaTabsTokens",
                "etc.",
            ],
        },
    },
    "colorSystem": {
        "approach": "Greyscale-first with organic sage green accent",
        "adaptive": "All colors use LubaColors.adaptive(light:dark:) for automatic light/dark mode",
        "surfaceHierarchy": "background → surface → surfaceSecondary → surfaceTertiary",
        "accentColor": "Sage green (#5F7360 light / #9AB897 dark), WCAG AA compliant",
    },
    "spacingGrid": (
        "4pt base grid. Named tokens: xs(4), sm(8), md(12), lg(16), xl(24), xxl(32), xxxl(48), huge(64)"
    ),
    "radiusScale": "none(0), xs(4), sm(8), md(12), lg(16), xl(24), full(9999)",
    "typography": "SF Rounded by default. Config-aware via LubaConfig.shared.useRoundedFont",
    "motionSystems": {
        "LubaMotion": "Raw constants (scale values, animation parameters). Use with .scaleEffect(), .opacity()",
        "LubaAnimations": "Applied Animation objects. Use with withAnimation(), .animation(), .transition()",
    },
    "platforms": "iOS 16+, macOS 13+, watchOS 9+, tvOS 16+, visionOS 1.0+",
    "configuration": {
        "environment": (
            "@Environment(\\.lubaConfig) for runtime settings, @Environment(\\.lubaTheme) for theming"
        ),
        "presets": [".minimal", ".accessible", ".debug"],
    },
}


def tokens_document(catalog: Catalog) -> dict[str, Any]:
    """The raw tokens document as loaded."""
    return catalog.tokens


def architecture_document(catalog: Catalog | None = None) -> dict[str, Any]:
    """Static architecture overview."""
    return ARCHITECTURE


def components_document(catalog: Catalog) -> dict[str, Any]:
    """Directory of every component and primitive."""
    components = [{"name": c.name, "description": c.description} for c in catalog.components]
    primitives = [
        {"name": p.name, "modifier": p.modifier, "description": p.description}
        for p in catalog.primitives
    ]
    return {
        "components": components,
        "primitives": primitives,
        "total": {"components": len(components), "primitives": len(primitives)},
    }


_BUILDERS = {
    "lubaui://tokens/all": tokens_document,
    "lubaui://architecture": architecture_document,
    "lubaui://components": components_document,
}


def get_resource(key: str) -> ResourceInfo:
    """
    Find a resource by URI or short name.

    Raises:
        LubaUIError: Unknown resource (NOT_FOUND)
    """
    for resource in RESOURCES:
        if key in (resource.uri, resource.name):
            return resource
    raise LubaUIError(
        ErrorCode.NOT_FOUND,
        f"Unknown resource: {key}",
        details={"available": [r.uri for r in RESOURCES]},
    )


def read_resource(catalog: Catalog, key: str) -> dict[str, Any]:
    """Build the document for a resource URI or short name."""
    resource = get_resource(key)
    logger.debug("Reading resource %s", resource.uri)
    return _BUILDERS[resource.uri](catalog)
