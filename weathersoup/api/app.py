"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weathersoup import __version__
from weathersoup.config import Settings, load_settings
from weathersoup.exceptions import ServiceError
from weathersoup.service import WeatherService

CONTENT_SECURITY_POLICY = "default-src 'self'; script-src 'self'; style-src 'self';"

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, service: WeatherService | None = None) -> FastAPI:
    """Build the HTTP application.

    Args:
        settings: Settings to use. Loaded from the environment if omitted.
        service: Pre-built service, mainly for tests. Built from settings if omitted.

    Returns:
        Configured FastAPI app

    Raises:
        ConfigError: If settings are loaded from an incomplete environment

    """
    if service is None:
        service = WeatherService(settings or load_settings())
    settings = service.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.service = service
        yield
        service.close()

    app = FastAPI(
        title='WeatherSoup API',
        version=__version__,
        description='Current weather scraped from a configurable upstream page',
        lifespan=lifespan,
    )
    # Also set eagerly so the app works without running the lifespan
    app.state.service = service

    @app.middleware('http')
    async def content_security_policy(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception('Server error')
            logfire.error('Server error', path=request.url.path, error=str(exc))
            response = JSONResponse(status_code=500, content=ServiceError().to_dict())
        response.headers['Content-Security-Policy'] = CONTENT_SECURITY_POLICY
        return response

    # Added last so CORS headers also wrap the 500 responses built above
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=['GET'],
        allow_headers=['*'],
    )

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        logger.info(f'{request.url.path} -> {exc.status_code}: {exc}')
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    from weathersoup.api.routers import weather

    app.include_router(weather.router, prefix='/api/weather', tags=['weather'])

    @app.get('/health')
    def health():
        return {'status': 'ok'}

    return app
