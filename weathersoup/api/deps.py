"""FastAPI dependency injection."""

from fastapi import Request

from weathersoup.service import WeatherService


def get_service(request: Request) -> WeatherService:
    """Provide the app-wide WeatherService."""
    return request.app.state.service
