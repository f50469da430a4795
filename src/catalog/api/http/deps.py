"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Depends, Request

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import ProductService
from src.catalog.entities.service.product import ProductRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies built at application startup."""
    return request.app.state.app_dependencies


def get_product_repository(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> ProductRepository:
    """Get the product store instance."""
    return app_deps.product_repository


def get_product_service(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> ProductService:
    """Get the product service instance."""
    return app_deps.product_service
