from fastapi import FastAPI

from parts_market.entrypoints.http.exception_handlers import register_exception_handlers
from parts_market.entrypoints.http.routes.admin import router as admin_router
from parts_market.entrypoints.http.routes.auth import router as auth_router
from parts_market.entrypoints.http.routes.health import router as health_router
from parts_market.entrypoints.http.routes.parts import router as parts_router
from parts_market.entrypoints.http.routes.ratings import router as ratings_router
from parts_market.entrypoints.http.routes.sellers import router as sellers_router
from parts_market.entrypoints.http.routes.vehicles import router as vehicles_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Parts Market API",
        description="""
        Regional auto-parts marketplace API.

        ## Features
        - Search part listings by text, condition, location, seller type and price
        - Cascading vehicle selector (type → year → make → model)
        - Seller listings management and seller ratings
        - Admin moderation of sellers and listings

        ## Authentication
        The auth proxy in front of the API identifies the caller with the
        `X-User-Id` header. Read-only endpoints need no authentication.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        contact={
            "name": "Parts Market Team",
            "email": "dev@parts-market.example",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(parts_router, prefix="/v1")
    app.include_router(sellers_router, prefix="/v1")
    app.include_router(ratings_router, prefix="/v1")
    app.include_router(auth_router, prefix="/v1")
    app.include_router(admin_router, prefix="/v1")
    app.include_router(vehicles_router, prefix="/v1")

    return app


app = build_app()
