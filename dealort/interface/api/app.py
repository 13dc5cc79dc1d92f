"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealort.config import Settings
from dealort.interface.api.error import register_error_handlers
from dealort.interface.api.middleware import TransportTimeoutMiddleware
from dealort.interface.api.routes import (
    analytics,
    comments,
    products,
    reports,
    reviews,
    root,
    transport,
    waitlist,
)
from dealort.util.di.container import create_container, setup_di
from dealort.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Settings to use (loaded from the environment by default)
        container: DI container to use (the production container by default)

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = settings or Settings()

    # Logfire must be configured before instrumentation
    instrument_httpx()

    app_instance = FastAPI(
        title="Dealort API",
        description="Backend API for Dealort - launch, review and discuss products",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Innermost first. The request container must open inside the transport
    # deadline so an abandoned handler keeps its scope until it finishes.
    setup_di(app_instance, container or create_container())
    app_instance.add_middleware(TransportTimeoutMiddleware)
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    app_instance.include_router(transport.router)
    app_instance.include_router(root.router)
    app_instance.include_router(products.router)
    app_instance.include_router(reviews.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(reports.router)
    app_instance.include_router(analytics.router)
    app_instance.include_router(waitlist.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
