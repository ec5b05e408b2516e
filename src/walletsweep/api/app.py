"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from walletsweep.config import get_settings


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Walletsweep API",
        description="Multi-chain batch token withdrawal backend",
        version="0.1.0",
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    from walletsweep.api.routes import health
    from walletsweep.web.controllers import (
        balances_router,
        chains_router,
        screening_router,
        withdrawals_router,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(chains_router, prefix="/api/v1")
    app.include_router(withdrawals_router, prefix="/api/v1")
    app.include_router(screening_router, prefix="/api/v1")
    app.include_router(balances_router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()
