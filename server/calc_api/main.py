from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calc_api.api.routes import calculator
from calc_api.core.config import get_settings
from calc_api.core.exceptions import register_exception_handlers
from calc_api.core.logging import configure_logging
from calc_api.core.middleware import RequestContextMiddleware


def create_app() -> FastAPI:
    """
    Application factory for the calculator service.
    Routes are attached in their respective modules and imported here.
    """

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description="Evaluates arithmetic expressions over + - * / and parentheses.",
        version=settings.api_version,
    )

    cors_origins = settings.resolved_cors_origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(calculator.router, prefix=settings.api_prefix)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
