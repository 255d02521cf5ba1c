"""
API Dependencies - Dependency injection for FastAPI routes.

Services are built once per application from the settings it was created
with and kept on ``app.state``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import FastAPI, Request

from lubaui_mcp.config import Settings
from lubaui_mcp.domains.catalog import Catalog, load_catalog, resolve_data_dir
from lubaui_mcp.domains.lookup import LookupService
from lubaui_mcp.domains.search import FuzzyRanker
from lubaui_mcp.domains.suggest import TokenSuggester

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Services:
    """Catalog-backed services shared by every request of one app."""

    catalog: Catalog
    lookup: LookupService
    suggester: TokenSuggester


def build_services(settings: Settings) -> Services:
    """
    Load the catalog named by ``settings`` and wire the services over it.

    Raises:
        CatalogError: If the catalog cannot be loaded
    """
    catalog = load_catalog(resolve_data_dir(settings))
    ranker = FuzzyRanker(default_max_results=settings.search_default_limit)
    return Services(
        catalog=catalog,
        lookup=LookupService(catalog, ranker),
        suggester=TokenSuggester(catalog, ranker),
    )


def init_services(app: FastAPI) -> Services:
    """
    Build services on startup.

    This should be called from the FastAPI lifespan handler. A broken
    catalog fails here rather than on the first request.
    """
    services = build_services(app.state.settings)
    app.state.services = services
    logger.info(
        "  Catalog: %d tokens, %d components, %d primitives",
        len(services.catalog.flat_tokens),
        len(services.catalog.components),
        len(services.catalog.primitives),
    )
    return services


def get_services(request: Request) -> Services:
    """Services for the current app, built on first use without a lifespan."""
    services = getattr(request.app.state, "services", None)
    if services is None:
        services = init_services(request.app)
    return services


def get_lookup_service(request: Request) -> LookupService:
    """Get the app's lookup service."""
    return get_services(request).lookup


def get_suggester(request: Request) -> TokenSuggester:
    """Get the app's token suggester."""
    return get_services(request).suggester
