# catalog_api/api/__init__.py
from fastapi import FastAPI

from catalog_api.api.errors import register_error_handlers
from catalog_api.api.routers import health, products
from catalog_api.repos.catalog_repo import CatalogStore
from catalog_api.utils.settings import CatalogProfile, load_profile
from catalog_api.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(
    profile: CatalogProfile | None = None,
    store: CatalogStore | None = None,
) -> FastAPI:
    """
    Build the catalog application.
    One store per app, created here and kept on app.state; handlers get it
    through Depends, never through a module global.
    """
    profile = profile or load_profile()
    if store is None:
        store = CatalogStore(
            name_policy=profile.name_policy,
            cost_enabled=profile.cost_enabled,
        )

    app = FastAPI(title="Catalog Service", version="1.0.0")
    app.state.profile = profile
    app.state.catalog = store

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)

    logger.info(
        f"Catalog service ready (name_policy={profile.name_policy}, "
        f"empty_result_policy={profile.empty_result_policy}, "
        f"cost_enabled={profile.cost_enabled})"
    )
    return app
